"""Order Schemas - Pydantic models with field-level validation for API boundaries.

Invariants:
    - description: 2-20 chars, not blank (enforced here, not by the store)
    - Responses use camelCase keys (orderId, createdOn, lastModOn)
    - status serializes as "Active" / "Canceled"

Design Decisions:
    - alias_generator=to_camel with populate_by_name: Python code uses
      snake_case, clients keep the camelCase wire names
    - from_order() classmethods keep record-to-response shaping out of services
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from orders_api.core.domain_types import OrderStatus
from orders_api.core.order import Order

DESCRIPTION_MIN_LENGTH = 2
DESCRIPTION_MAX_LENGTH = 20


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _reject_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("description cannot be empty or whitespace")
    return v


class OrderCreate(_CamelModel):
    """Order creation request."""
    description: str = Field(
        min_length=DESCRIPTION_MIN_LENGTH, max_length=DESCRIPTION_MAX_LENGTH,
    )

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str) -> str:
        return _reject_blank(v)


class OrderUpdate(_CamelModel):
    """Order update request. The route's path id overrides order_id."""
    description: str = Field(
        min_length=DESCRIPTION_MIN_LENGTH, max_length=DESCRIPTION_MAX_LENGTH,
    )
    order_id: int | None = None

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str) -> str:
        return _reject_blank(v)


class OrderDetail(_CamelModel):
    """Full view of a single order."""
    order_id: int | None
    description: str
    status: OrderStatus
    created_on: datetime
    last_mod_on: datetime | None = None

    @classmethod
    def from_order(cls, order: Order) -> "OrderDetail":
        return cls(
            order_id=order.id,
            description=order.description,
            status=order.status,
            created_on=order.created_on,
            last_mod_on=order.last_modified_on,
        )


class OrderListItem(_CamelModel):
    """Row in an order listing."""
    order_id: int | None
    description: str
    status: OrderStatus

    @classmethod
    def from_order(cls, order: Order) -> "OrderListItem":
        return cls(
            order_id=order.id,
            description=order.description,
            status=order.status,
        )


class CancelResponse(BaseModel):
    message: str
