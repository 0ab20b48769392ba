"""List Options - paging arithmetic, filter predicate and normalization."""

from datetime import datetime, timezone

from orders_api.core.order import (
    DEFAULT_PAGE_SIZE, ListOrdersOptions, Order, normalize_list_options,
)

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def _order(description: str, canceled: bool = False) -> Order:
    order = Order.new(description, T0)
    return order.canceled(T0) if canceled else order


def test_defaults():
    options = ListOrdersOptions()
    assert options.include_canceled is True
    assert options.page_number == 1
    assert options.page_size == 10
    assert options.search_text is None


def test_skip_and_take():
    options = ListOrdersOptions(page_number=3, page_size=4)
    assert options.skip == 8
    assert options.take == 4


def test_search_is_case_insensitive_substring():
    options = ListOrdersOptions(search_text="found")
    assert options.matches(_order("third FOUND order."))
    assert options.matches(_order("fourth order.found"))
    assert not options.matches(_order("first order."))


def test_search_text_is_trimmed():
    options = ListOrdersOptions(search_text="  found  ")
    assert options.search_term == "found"
    assert options.matches(_order("Found it"))


def test_blank_search_text_matches_everything():
    options = ListOrdersOptions(search_text="   ")
    assert options.search_term is None
    assert options.matches(_order("anything"))


def test_exclude_canceled():
    options = ListOrdersOptions(include_canceled=False)
    assert options.matches(_order("live"))
    assert not options.matches(_order("dead", canceled=True))


def test_include_canceled_by_default():
    assert ListOrdersOptions().matches(_order("dead", canceled=True))


def test_normalize_none_gives_defaults():
    assert normalize_list_options(None) == ListOrdersOptions()


def test_normalize_page_number_below_one():
    options = normalize_list_options(ListOrdersOptions(page_number=0))
    assert options.page_number == 1
    options = normalize_list_options(ListOrdersOptions(page_number=-7))
    assert options.page_number == 1


def test_normalize_negative_page_size():
    options = normalize_list_options(ListOrdersOptions(page_size=-1))
    assert options.page_size == DEFAULT_PAGE_SIZE


def test_normalize_keeps_zero_page_size():
    assert normalize_list_options(ListOrdersOptions(page_size=0)).page_size == 0


def test_normalize_does_not_mutate_input():
    raw = ListOrdersOptions(page_number=0, page_size=-5, search_text=" x ")
    normalize_list_options(raw)
    assert raw.page_number == 0
    assert raw.page_size == -5
    assert raw.search_text == " x "
