"""
OrderRepositoryPort - Interface for reading filled orders.

This port defines the contract for the store that holds filled orders.
The statistics worker owns one repository connection for its lifetime:

    await repository.connect()
    try:
        orders = await repository.fetch_filled_orders()
    finally:
        await repository.close()
"""
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from order_stats.domain.entities.order import FilledOrder

OrderFilter = Callable[[FilledOrder], bool]


class OrderRepositoryPort(ABC):
    """
    Port interface for the filled orders store.

    All operations raise RepositoryError on connectivity or query failure.
    """

    @abstractmethod
    async def connect(self) -> None:
        """
        Acquire the connection used by subsequent fetches.

        Raises:
            RepositoryError: If the store is unreachable
        """
        pass

    @abstractmethod
    async def fetch_filled_orders(
        self,
        order_filter: Optional[OrderFilter] = None,
    ) -> List[FilledOrder]:
        """
        Get all filled orders.

        Args:
            order_filter: Optional predicate; only matching orders are returned

        Returns:
            Filled orders in store order

        Raises:
            RepositoryError: If the query fails
            ComputationError: If a stored record is malformed
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """
        Release the connection.

        Raises:
            RepositoryError: If the release did not complete
        """
        pass
