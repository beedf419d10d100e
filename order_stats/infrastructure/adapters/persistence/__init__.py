"""Order repository adapters."""
from order_stats.infrastructure.adapters.persistence.memory_order_repository import InMemoryOrderRepository
from order_stats.infrastructure.adapters.persistence.sqlalchemy_order_repository import SqlAlchemyOrderRepository

__all__ = [
    "InMemoryOrderRepository",
    "SqlAlchemyOrderRepository",
]
