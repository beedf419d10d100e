"""
Test helpers shared across test modules.
"""
import asyncio
from datetime import datetime
from typing import List, Optional

from order_stats.application.ports.outbound.report_publisher_port import ReportPublisherPort
from order_stats.domain.entities.order import FilledOrder, create_filled_order

BASE_TIME = datetime(2024, 1, 2, 10, 0, 0)


def make_order(
    order_type: str = "market",
    symbol: str = "AAPL",
    side: str = "buy",
    quantity: int = 10,
    avg_price="100",
    filled_at: Optional[datetime] = None,
    limit_price=None,
    stop_price=None,
) -> FilledOrder:
    """Filled order factory with sensible defaults."""
    return create_filled_order(
        order_type,
        symbol=symbol,
        side=side,
        quantity=quantity,
        avg_price=avg_price,
        filled_at=filled_at or BASE_TIME,
        limit_price=limit_price,
        stop_price=stop_price,
    )


class RecordingPublisher(ReportPublisherPort):
    """Publisher that keeps every report it receives."""

    def __init__(self):
        self.reports: List[str] = []

    async def publish(self, report: str) -> None:
        self.reports.append(report)


async def wait_until(predicate, timeout: float = 1.0, interval: float = 0.001) -> None:
    """Poll ``predicate`` until it holds or fail after ``timeout`` seconds."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met in time")
        await asyncio.sleep(interval)
