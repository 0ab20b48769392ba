"""Order Routes - HTTP surface for create, read, update, cancel and list.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler
    - Paging query values are passed through raw; OrderService normalizes them
    - Domain errors propagate to the global handlers (api/error_handlers.py)

Design Decisions:
    - PUT /orders/{order_id}: the path id wins over any id in the body
    - Cancel returns a confirmation message rather than the record
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from orders_api.api.dependencies import get_order_service
from orders_api.core.domain_types import OrderId
from orders_api.core.order import (
    DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, ListOrdersOptions,
)
from orders_api.schemas.order import (
    CancelResponse, OrderCreate, OrderDetail, OrderListItem, OrderUpdate,
)
from orders_api.services.order_service import OrderService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "", response_model=OrderDetail,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    body: OrderCreate,
    service: OrderService = Depends(get_order_service),
):
    """Create a new order."""
    logger.info("Creating order")
    return OrderDetail.from_order(service.create_order(body.description))


@router.get("", response_model=list[OrderListItem])
async def list_orders(
    include_canceled: bool = Query(True, alias="includeCanceled"),
    page_number: int = Query(DEFAULT_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize"),
    search_text: str | None = Query(None, alias="searchText"),
    service: OrderService = Depends(get_order_service),
):
    """List orders, filtered and paginated, ascending by id."""
    orders = service.list_orders(ListOrdersOptions(
        include_canceled=include_canceled,
        page_number=page_number,
        page_size=page_size,
        search_text=search_text,
    ))
    return [OrderListItem.from_order(o) for o in orders]


@router.get("/{order_id}", response_model=OrderDetail)
async def get_order(
    order_id: int, service: OrderService = Depends(get_order_service),
):
    """Get order details."""
    return OrderDetail.from_order(service.get_order(OrderId(order_id)))


@router.put("/{order_id}", response_model=OrderDetail)
async def update_order(
    order_id: int,
    body: OrderUpdate,
    service: OrderService = Depends(get_order_service),
):
    """Update an order's description."""
    order = service.update_order(OrderId(order_id), body.description)
    return OrderDetail.from_order(order)


@router.put("/{order_id}/cancel", response_model=CancelResponse)
async def cancel_order(
    order_id: int, service: OrderService = Depends(get_order_service),
):
    """Cancel an order."""
    service.cancel_order(OrderId(order_id))
    return CancelResponse(message=f"Order {order_id} canceled successfully.")
