"""Orders API - FastAPI application entry point and composition root.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map OrdersError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Exactly one OrderStore per process, owned here and injected into the
      OrderService; nothing else constructs one

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Store and service live on app.state, reached through
      api.dependencies.get_order_service (no hidden module-level singleton)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orders_api.api.error_handlers import register_error_handlers
from orders_api.api.routes import health, orders
from orders_api.config import get_settings
from orders_api.infrastructure.observability import setup_logging
from orders_api.infrastructure.order_store import OrderStore
from orders_api.services.order_service import OrderService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(
        f"{settings.app_name} shutting down, "
        f"{app.state.order_service.count_orders()} orders discarded",
    )


settings = get_settings()
app = FastAPI(
    title=settings.app_name, version=settings.app_version, lifespan=lifespan,
)

app.state.order_store = OrderStore()
app.state.order_service = OrderService(app.state.order_store)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(orders.router)

register_error_handlers(app)
