"""Order Service - business rules over the order store.

Invariants:
    - Every mutation goes through the repository; the service never keeps
      records between calls
    - Failures are raised before any change is applied (no partial updates)
    - update_order checks for a missing id before touching the store
    - Canceled is terminal for description updates; cancel_order on a
      canceled order re-stamps last_modified_on instead of failing

Design Decisions:
    - Clock injected as a callable: tests pin timestamps without patching datetime
    - Paging input is normalized here, once; the API passes raw query values
    - Record shaping (detail/list views) lives in schemas/, not here
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from orders_api.core.domain_types import OrderId
from orders_api.core.errors import (
    InvalidArgumentError, OrderCanceledError, OrderNotFoundError,
)
from orders_api.core.order import (
    ListOrdersOptions, Order, normalize_list_options,
)
from orders_api.core.repository_protocols import OrderRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrderService:
    """Create, read, update, cancel and list orders."""

    def __init__(self, store: OrderRepository, clock: Clock = utc_now):
        self._store = store
        self._clock = clock

    def create_order(self, description: str) -> Order:
        """Create an Active order; the store assigns its id."""
        order = self._store.add_order(Order.new(description, self._clock()))
        logger.info("Order created", extra={"order_id": order.id})
        return order

    def get_order(self, order_id: OrderId) -> Order:
        order = self._store.get_order(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def cancel_order(self, order_id: OrderId) -> Order:
        """Cancel an order. Canceling twice re-stamps last_modified_on."""
        now = self._clock()
        order = self._store.update_order(
            order_id, lambda current: current.canceled(now),
        )
        if order is None:
            raise OrderNotFoundError(order_id)
        logger.info("Order canceled", extra={"order_id": order.id})
        return order

    def update_order(
        self, order_id: OrderId | None, description: str,
    ) -> Order:
        """Overwrite the description of an Active order."""
        if order_id is None:
            raise InvalidArgumentError("id is required", "order_id")
        now = self._clock()

        def change(current: Order) -> Order:
            # runs under the store lock, so the status check cannot go stale
            if current.is_canceled:
                raise OrderCanceledError(order_id)
            return current.with_description(description, now)

        order = self._store.update_order(order_id, change)
        if order is None:
            raise OrderNotFoundError(order_id)
        logger.info("Order updated", extra={"order_id": order.id})
        return order

    def list_orders(
        self, options: ListOrdersOptions | None = None,
    ) -> list[Order]:
        return self._store.get_orders(normalize_list_options(options))

    def count_orders(self) -> int:
        return self._store.count()
