"""Root conftest - shared test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone

import pytest

# Keep test output readable and independent of a developer's .env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from orders_api.infrastructure.order_store import OrderStore  # noqa: E402
from orders_api.services.order_service import OrderService  # noqa: E402

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Deterministic clock: each call advances by `step`."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def store():
    return OrderStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(store, clock):
    return OrderService(store, clock=clock)
