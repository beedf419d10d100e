"""Domain entities."""
from order_stats.domain.entities.order import (
    FilledOrder,
    MarketOrder,
    LimitOrder,
    StopOrder,
    OrderSide,
    OrderType,
    create_filled_order,
)

__all__ = [
    "FilledOrder",
    "MarketOrder",
    "LimitOrder",
    "StopOrder",
    "OrderSide",
    "OrderType",
    "create_filled_order",
]
