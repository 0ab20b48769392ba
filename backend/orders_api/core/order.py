"""Order Record - the tracked entity and the query options used to page over it.

Invariants:
    - id is None until the store persists the order, then never changes
    - created_on is set once at creation; last_modified_on is None until the
      first mutation and is always >= created_on afterwards
    - with_description() never touches status; canceled() is the only path
      that changes status
    - ListOrdersOptions.skip/take are derived, never stored

Design Decisions:
    - Transforms return new records (dataclasses.replace): the store swaps
      whole records under its lock instead of callers mutating shared objects
    - normalize_list_options() is the single place paging input is corrected;
      the store only tolerates degenerate values, it never fixes them
"""

from dataclasses import dataclass, replace
from datetime import datetime

from orders_api.core.domain_types import OrderId, OrderStatus

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10


@dataclass
class Order:
    """A unit of work to track."""
    description: str
    created_on: datetime
    status: OrderStatus = OrderStatus.ACTIVE
    id: OrderId | None = None
    last_modified_on: datetime | None = None

    @classmethod
    def new(cls, description: str, now: datetime) -> "Order":
        """Build an unpersisted Active order."""
        return cls(description=description, created_on=now)

    @property
    def is_canceled(self) -> bool:
        return self.status is OrderStatus.CANCELED

    def with_description(self, description: str, now: datetime) -> "Order":
        return replace(
            self, description=description,
            last_modified_on=self._stamp(now),
        )

    def canceled(self, now: datetime) -> "Order":
        return replace(
            self, status=OrderStatus.CANCELED,
            last_modified_on=self._stamp(now),
        )

    def _stamp(self, now: datetime) -> datetime:
        # clock skew between callers must not break created_on <= last_modified_on
        return max(now, self.created_on)


@dataclass
class ListOrdersOptions:
    """Filtering and paging for order scans."""
    include_canceled: bool = True
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    search_text: str | None = None

    @property
    def skip(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def take(self) -> int:
        return self.page_size

    @property
    def search_term(self) -> str | None:
        """Trimmed search text, or None when there is nothing to match."""
        if self.search_text is None:
            return None
        term = self.search_text.strip()
        return term or None

    def matches(self, order: Order) -> bool:
        """Filter predicate applied before ordering and paging."""
        if not self.include_canceled and order.is_canceled:
            return False
        term = self.search_term
        if term is None:
            return True
        return term.casefold() in order.description.casefold()


def normalize_list_options(
    options: ListOrdersOptions | None,
) -> ListOrdersOptions:
    """Replace missing or out-of-range paging input with defaults.

    page_number < 1 becomes 1 and page_size < 0 becomes DEFAULT_PAGE_SIZE.
    page_size == 0 is kept: it is a valid (empty) page.
    """
    if options is None:
        return ListOrdersOptions()
    return replace(
        options,
        page_number=(
            options.page_number if options.page_number >= 1
            else DEFAULT_PAGE_NUMBER
        ),
        page_size=(
            options.page_size if options.page_size >= 0
            else DEFAULT_PAGE_SIZE
        ),
        search_text=options.search_term,
    )
