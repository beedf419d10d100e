"""
Statistics Value Objects

Immutable results produced by the aggregator and the ranking selector.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple, Union

from order_stats.domain.entities.order import FilledOrder, OrderSide, OrderType


def round_half_up(value: Union[Decimal, int, float, str], places: int = 2) -> Decimal:
    """
    Round to ``places`` decimals, halves away from zero.

    >>> round_half_up(Decimal("2.345"))
    Decimal('2.35')
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class TypeSummary:
    """
    Summary of one order type group.

    Attributes:
        order_type: Group key
        count: Number of orders in the group (always > 0)
        mean_quantity: Mean quantity, 2 decimals
        mean_avg_price: Mean realized fill price, 2 decimals
        mean_type_price: Mean limit/stop price, None for market orders
    """
    order_type: OrderType
    count: int
    mean_quantity: Decimal
    mean_avg_price: Decimal
    mean_type_price: Optional[Decimal] = None


@dataclass(frozen=True)
class RankedOrder:
    """Projection of an order kept by the ranking selector."""
    symbol: str
    quantity: int
    filled_at: datetime

    @classmethod
    def from_order(cls, order: FilledOrder) -> RankedOrder:
        return cls(symbol=order.symbol, quantity=order.quantity, filled_at=order.filled_at)


@dataclass(frozen=True)
class SideSelection:
    """
    Top-N selection for one side.

    Attributes:
        side: Group key
        count: Size of the whole side group
        limit: Requested N
        orders: Selected orders, best first
    """
    side: OrderSide
    count: int
    limit: int
    orders: Tuple[RankedOrder, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.count == 0
