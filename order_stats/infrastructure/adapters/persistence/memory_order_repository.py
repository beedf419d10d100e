"""
InMemoryOrderRepository - In-memory implementation of OrderRepositoryPort.

This adapter keeps filled orders in a list for tests and demos.
Failures can be injected to exercise the worker's error handling.
"""
from typing import Iterable, List, Optional

from order_stats.application.ports.outbound.order_repository_port import (
    OrderFilter,
    OrderRepositoryPort,
)
from order_stats.domain.entities.order import FilledOrder
from order_stats.exceptions import RepositoryError


class InMemoryOrderRepository(OrderRepositoryPort):
    """
    In-memory order repository.

    Tracks connect/fetch/close calls so tests can assert on the lifecycle.
    """

    def __init__(self, orders: Optional[Iterable[FilledOrder]] = None):
        """Initialize with optional seed orders."""
        self._orders: List[FilledOrder] = list(orders or [])
        self._connected = False
        self.connect_calls = 0
        self.fetch_calls = 0
        self.close_calls = 0
        self.fetch_error: Optional[Exception] = None
        self.close_error: Optional[Exception] = None

    def add(self, *orders: FilledOrder) -> None:
        """Append filled orders."""
        self._orders.extend(orders)

    def clear(self) -> None:
        """Remove all orders. Useful for test cleanup."""
        self._orders.clear()

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def connect(self) -> None:
        self.connect_calls += 1
        self._connected = True

    async def fetch_filled_orders(
        self,
        order_filter: Optional[OrderFilter] = None,
    ) -> List[FilledOrder]:
        self.fetch_calls += 1
        if not self._connected:
            raise RepositoryError("fetch", "repository is not connected")
        if self.fetch_error is not None:
            raise self.fetch_error

        if order_filter is None:
            return list(self._orders)
        return [order for order in self._orders if order_filter(order)]

    async def close(self) -> None:
        self.close_calls += 1
        self._connected = False
        if self.close_error is not None:
            raise self.close_error
