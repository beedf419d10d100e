"""
Common pytest fixtures
"""
from datetime import timedelta
from typing import List

import pytest

from order_stats.domain.entities.order import FilledOrder
from order_stats.infrastructure.adapters.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from tests.helpers import BASE_TIME, RecordingPublisher, make_order


@pytest.fixture
def sample_orders() -> List[FilledOrder]:
    """Mixed filled orders covering every type and side."""
    return [
        make_order("market", "AAPL", "buy", 10, "100.10", BASE_TIME),
        make_order("market", "MSFT", "sell", 30, "200.20", BASE_TIME + timedelta(minutes=1)),
        make_order("limit", "GOOG", "buy", 50, "150.00", BASE_TIME + timedelta(minutes=2), limit_price="149.50"),
        make_order("limit", "AMZN", "sell", 5, "120.00", BASE_TIME + timedelta(minutes=3), limit_price="121.00"),
        make_order("stop", "TSLA", "buy", 20, "90.00", BASE_TIME + timedelta(minutes=4), stop_price="91.00"),
    ]


@pytest.fixture
def memory_repository(sample_orders) -> InMemoryOrderRepository:
    """In-memory repository seeded with sample orders."""
    return InMemoryOrderRepository(sample_orders)


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()
