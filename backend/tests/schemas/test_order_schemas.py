"""Order Schemas - request validation and camelCase response shaping.

Invariants:
    - description must be 2-20 chars and not blank
    - Responses serialize with camelCase keys and string statuses
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from orders_api.core.order import Order
from orders_api.schemas.order import (
    OrderCreate, OrderDetail, OrderListItem, OrderUpdate,
)

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


# --- OrderCreate ---------------------------------------------------------------

@pytest.mark.parametrize("description", ["ab", "x" * 20, "first order."])
def test_create_accepts_bounded_description(description):
    assert OrderCreate(description=description).description == description


@pytest.mark.parametrize("description", ["", "a", "x" * 21, "   "])
def test_create_rejects_out_of_bounds_description(description):
    with pytest.raises(ValidationError):
        OrderCreate(description=description)


def test_create_requires_description():
    with pytest.raises(ValidationError):
        OrderCreate()


# --- OrderUpdate ---------------------------------------------------------------

def test_update_reads_camel_case_id():
    body = OrderUpdate.model_validate({"description": "renamed", "orderId": 4})
    assert body.order_id == 4


def test_update_id_is_optional():
    assert OrderUpdate(description="renamed").order_id is None


def test_update_rejects_long_description():
    with pytest.raises(ValidationError):
        OrderUpdate(description="x" * 21)


# --- Responses -----------------------------------------------------------------

def test_detail_from_order_uses_camel_case():
    order = Order.new("first order.", T0)
    order.id = 1
    dumped = OrderDetail.from_order(order).model_dump(mode="json", by_alias=True)
    assert dumped == {
        "orderId": 1,
        "description": "first order.",
        "status": "Active",
        "createdOn": "2024-01-01T12:00:00Z",
        "lastModOn": None,
    }


def test_detail_of_canceled_order():
    order = Order.new("first order.", T0).canceled(T0)
    detail = OrderDetail.from_order(order)
    assert detail.model_dump(mode="json", by_alias=True)["status"] == "Canceled"
    assert detail.last_mod_on == T0


def test_list_item_from_order():
    order = Order.new("first order.", T0)
    order.id = 9
    dumped = OrderListItem.from_order(order).model_dump(mode="json", by_alias=True)
    assert dumped == {"orderId": 9, "description": "first order.", "status": "Active"}
