"""
SqlAlchemyOrderRepository - SQL implementation of OrderRepositoryPort.

Holds a single AsyncConnection from connect() to close(). Every fetch runs
in its own short transaction so no transaction stays open between cycles.
"""
from __future__ import annotations
import logging
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import MetaData, Table, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from order_stats.application.ports.outbound.order_repository_port import (
    OrderFilter,
    OrderRepositoryPort,
)
from order_stats.domain.entities.order import FilledOrder, create_filled_order
from order_stats.exceptions import RepositoryError
from order_stats.infrastructure.adapters.persistence.models import FilledOrderModel

if TYPE_CHECKING:
    from order_stats.config.settings import Settings

logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepositoryPort):
    """
    Order repository backed by the filled orders table.

    Maps rows to the Market/Limit/Stop domain variants.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        dispose_engine: bool = True,
        table_name: Optional[str] = None,
    ):
        """
        Args:
            engine: Async engine for the order store
            dispose_engine: Dispose the engine pool on close()
            table_name: Orders table (FilledOrderModel's table if None)
        """
        self._engine = engine
        self._dispose_engine = dispose_engine
        self._table = self._orders_table(table_name)
        self._connection: Optional[AsyncConnection] = None

    @staticmethod
    def _orders_table(table_name: Optional[str]) -> Table:
        """FilledOrderModel's columns under the given table name."""
        table = FilledOrderModel.__table__
        if table_name is None or table_name == table.name:
            return table
        return table.to_metadata(MetaData(), name=table_name)

    @property
    def table_name(self) -> str:
        return self._table.name

    @classmethod
    def from_settings(cls, settings: Settings) -> SqlAlchemyOrderRepository:
        """Create a repository for the configured database."""
        engine = create_async_engine(
            settings.DATABASE_URL,
            echo=settings.LOG_LEVEL == "DEBUG",
            pool_pre_ping=True,
            pool_size=1,
            max_overflow=0,
        )
        return cls(engine, table_name=settings.STATS_DB_ORDERS_TABLE)

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    async def connect(self) -> None:
        """Acquire the connection."""
        if self._connection is not None:
            return
        try:
            self._connection = await self._engine.connect()
        except SQLAlchemyError as e:
            logger.error(f"Failed to connect to order store: {e}")
            raise RepositoryError("connect", str(e)) from e
        logger.info(f"Connected to order store ({self._engine.url.render_as_string(hide_password=True)})")

    async def fetch_filled_orders(
        self,
        order_filter: Optional[OrderFilter] = None,
    ) -> List[FilledOrder]:
        """Get all filled orders, optionally filtered."""
        if self._connection is None:
            raise RepositoryError("fetch", "repository is not connected")

        table = self._table
        query = select(table).order_by(table.c.id)
        try:
            async with self._connection.begin():
                result = await self._connection.execute(query)
                rows = result.mappings().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch filled orders: {e}")
            raise RepositoryError("fetch", str(e)) from e

        orders = [self._map_row_to_domain(row) for row in rows]
        if order_filter is not None:
            orders = [order for order in orders if order_filter(order)]
        logger.debug(f"Fetched {len(orders)} filled orders")
        return orders

    async def close(self) -> None:
        """Close the connection and dispose the engine."""
        try:
            if self._connection is not None:
                await self._connection.close()
            if self._dispose_engine:
                await self._engine.dispose()
        except SQLAlchemyError as e:
            raise RepositoryError("close", str(e)) from e
        finally:
            self._connection = None
        logger.info("Order store connection closed")

    @staticmethod
    def _map_row_to_domain(row) -> FilledOrder:
        """Map a filled_orders row to the domain variant."""
        return create_filled_order(
            row["order_type"],
            symbol=row["symbol"],
            side=row["side"],
            quantity=row["quantity"],
            avg_price=row["avg_price"],
            filled_at=row["filled_at"],
            limit_price=row["limit_price"],
            stop_price=row["stop_price"],
        )
