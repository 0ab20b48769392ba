"""Boundary Protocols - contracts between core/services and the record store.

Invariants:
    - Services depend on OrderRepository, never on a concrete store class
    - update_order applies the change atomically or not at all

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Sync methods: the store is in-memory and never blocks on IO
"""

from typing import Callable, Protocol

from orders_api.core.domain_types import OrderId
from orders_api.core.order import ListOrdersOptions, Order

OrderChange = Callable[[Order], Order]


class OrderRepository(Protocol):
    """Contract for order storage - implemented by infrastructure."""
    def add_order(self, order: Order) -> Order: ...
    def get_order(self, order_id: OrderId) -> Order | None: ...
    def get_orders(self, options: ListOrdersOptions) -> list[Order]: ...
    def update_order(
        self, order_id: OrderId, change: OrderChange,
    ) -> Order | None: ...
    def count(self) -> int: ...
