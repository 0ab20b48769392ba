"""Order Store - volatile, in-memory record store and sole identity assigner.

Invariants:
    - Ids are assigned as max(existing) + 1, starting at 1: strictly increasing,
      no gaps, no repeats, even under concurrent add_order calls
    - One lock guards every read and write of the collection
    - Records leaving the store are snapshots; the canonical records are only
      ever replaced through update_order
    - Scans filter, then order ascending by id, then page

Design Decisions:
    - threading.Lock over asyncio.Lock: operations never await, and the store
      may be shared with sync callers running in worker threads
    - Explicit update_order(order_id, change) instead of handing out mutable
      references: the change runs under the lock, so read-modify-write is atomic
    - No business rules here (no length checks, no state transitions);
      the service owns those
    - Volatile by design: state is rebuilt empty on process restart
"""

import logging
import threading
from dataclasses import replace

from orders_api.core.domain_types import OrderId
from orders_api.core.order import ListOrdersOptions, Order
from orders_api.core.repository_protocols import OrderChange

logger = logging.getLogger(__name__)


class OrderStore:
    """Authoritative in-memory collection of orders."""

    def __init__(self) -> None:
        self._orders: list[Order] = []
        self._lock = threading.Lock()

    def add_order(self, order: Order) -> Order:
        """Persist an order, assigning its id in place on the caller's record."""
        with self._lock:
            order.id = OrderId(self._next_id())
            self._orders.append(replace(order))
        logger.debug("Order stored", extra={"order_id": order.id})
        return order

    def get_order(self, order_id: OrderId) -> Order | None:
        """Point lookup. Returns a snapshot, or None when the id is unknown."""
        with self._lock:
            index = self._index_of(order_id)
            return None if index is None else replace(self._orders[index])

    def get_orders(self, options: ListOrdersOptions | None = None) -> list[Order]:
        """Filtered, id-ordered, paginated scan."""
        options = options or ListOrdersOptions()
        skip = max(options.skip, 0)
        take = options.take
        if take <= 0:
            return []
        with self._lock:
            matched = [o for o in self._orders if options.matches(o)]
            matched.sort(key=lambda o: o.id)
            return [replace(o) for o in matched[skip:skip + take]]

    def update_order(
        self, order_id: OrderId, change: OrderChange,
    ) -> Order | None:
        """Replace a record with change(current), atomically.

        Returns the stored result, or None when the id is unknown. If change
        raises, the record is left untouched and the exception propagates.
        """
        with self._lock:
            index = self._index_of(order_id)
            if index is None:
                return None
            updated = change(replace(self._orders[index]))
            # identity is store-owned; a change can never reassign it
            updated.id = self._orders[index].id
            self._orders[index] = updated
            return replace(updated)

    def count(self) -> int:
        with self._lock:
            return len(self._orders)

    # Callers must hold self._lock.

    def _next_id(self) -> int:
        if not self._orders:
            return 1
        return max(o.id for o in self._orders) + 1

    def _index_of(self, order_id: OrderId) -> int | None:
        for i, order in enumerate(self._orders):
            if order.id == order_id:
                return i
        return None
