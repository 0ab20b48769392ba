"""Dependency Providers - hand the composition root's objects to route handlers.

Design Decisions:
    - Service read from app.state rather than a module global: tests swap it
      through app.dependency_overrides without touching process state
"""

from fastapi import Request

from orders_api.services.order_service import OrderService


def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service
