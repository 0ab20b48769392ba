"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - OrderId wraps int; ids are store-assigned, starting at 1
    - All valid order states encoded as an Enum - no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders, values match the
      status strings clients already consume ("Active", "Canceled")
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OrderId = NewType("OrderId", int)


# ─── Value Types ─────────────────────────────────────────────────

class OrderStatus(str, Enum):
    """Order lifecycle. ACTIVE -> CANCELED is one-way; CANCELED is terminal."""
    ACTIVE = "Active"
    CANCELED = "Canceled"

    @property
    def is_terminal(self) -> bool:
        return self is OrderStatus.CANCELED
