"""
Filled Order Domain Entities

Immutable records of completed order executions, modelled as a tagged
variant: Market, Limit (with limit price) and Stop (with stop price).
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, ClassVar, Optional, Union

from order_stats.exceptions import InvalidOrderError


class OrderType(Enum):
    """Order type. Declaration order is the report order."""
    MARKET = "market"
    LIMIT = "limit"
    STOP = "stop"

    @property
    def label(self) -> str:
        """Human readable name (e.g. "Market")."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Union[str, OrderType]) -> OrderType:
        """Parse a stored value case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidOrderError(f"unknown order type: {value!r}")


class OrderSide(Enum):
    """Order side. Declaration order is the report order."""
    BUY = "buy"
    SELL = "sell"

    @property
    def label(self) -> str:
        """Human readable name (e.g. "Buy")."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Union[str, OrderSide]) -> OrderSide:
        """Parse a stored value case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidOrderError(f"unknown order side: {value!r}")


def _to_decimal(name: str, value: Any) -> Decimal:
    if value is None:
        raise InvalidOrderError(f"{name} is required")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise InvalidOrderError(f"{name} is not numeric: {value!r}")


@dataclass(frozen=True)
class FilledOrder:
    """
    Base filled order record.

    Attributes:
        symbol: Traded instrument (e.g., "AAPL")
        side: Buy or sell
        quantity: Filled quantity (non-negative integer)
        avg_price: Realized average fill price
        filled_at: When the order was filled
    """
    symbol: str
    side: OrderSide
    quantity: int
    avg_price: Decimal
    filled_at: datetime

    order_type: ClassVar[OrderType]

    def __post_init__(self) -> None:
        """Validate and normalize fields."""
        if not self.symbol:
            raise InvalidOrderError("symbol is required")
        if not isinstance(self.side, OrderSide):
            raise InvalidOrderError(f"side must be an OrderSide, got {self.side!r}")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidOrderError(f"quantity must be an integer, got {self.quantity!r}")
        if self.quantity < 0:
            raise InvalidOrderError(f"quantity must be non-negative, got {self.quantity}")
        if self.filled_at is None:
            raise InvalidOrderError("filled_at is required")
        object.__setattr__(self, "avg_price", _to_decimal("avg_price", self.avg_price))

    @property
    def type_price(self) -> Optional[Decimal]:
        """Price specific to the order type (None for market orders)."""
        return None


@dataclass(frozen=True)
class MarketOrder(FilledOrder):
    """Filled market order."""
    order_type: ClassVar[OrderType] = OrderType.MARKET


@dataclass(frozen=True)
class LimitOrder(FilledOrder):
    """Filled limit order."""
    limit_price: Decimal

    order_type: ClassVar[OrderType] = OrderType.LIMIT

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "limit_price", _to_decimal("limit_price", self.limit_price))

    @property
    def type_price(self) -> Optional[Decimal]:
        return self.limit_price


@dataclass(frozen=True)
class StopOrder(FilledOrder):
    """Filled stop order."""
    stop_price: Decimal

    order_type: ClassVar[OrderType] = OrderType.STOP

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "stop_price", _to_decimal("stop_price", self.stop_price))

    @property
    def type_price(self) -> Optional[Decimal]:
        return self.stop_price


def create_filled_order(
    order_type: Union[str, OrderType],
    *,
    symbol: str,
    side: Union[str, OrderSide],
    quantity: int,
    avg_price: Any,
    filled_at: datetime,
    limit_price: Any = None,
    stop_price: Any = None,
) -> FilledOrder:
    """
    Build the variant matching ``order_type``.

    Only the price valid for the type is kept; the other one is ignored.

    Raises:
        InvalidOrderError: If the type is unknown or a required field is missing
    """
    order_type = OrderType.parse(order_type)
    side = OrderSide.parse(side)

    if order_type is OrderType.LIMIT:
        return LimitOrder(symbol, side, quantity, avg_price, filled_at, limit_price)
    if order_type is OrderType.STOP:
        return StopOrder(symbol, side, quantity, avg_price, filled_at, stop_price)
    return MarketOrder(symbol, side, quantity, avg_price, filled_at)
