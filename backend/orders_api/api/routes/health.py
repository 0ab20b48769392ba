"""Health Probe - liveness endpoint for container orchestration."""

from fastapi import APIRouter, Depends, status

from orders_api.api.dependencies import get_order_service
from orders_api.config import get_settings
from orders_api.services.order_service import OrderService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(service: OrderService = Depends(get_order_service)):
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "orders": service.count_orders(),
    }
