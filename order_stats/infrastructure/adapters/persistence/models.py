"""
Filled order table model.
"""
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Index, Integer, MetaData, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class Base(DeclarativeBase):
    """Base class for ORM models."""
    metadata = metadata


class FilledOrderModel(Base):
    """Filled orders written by the order execution service."""
    __tablename__ = "filled_orders"

    id: Mapped[int] = mapped_column(primary_key=True)
    order_id: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False,
        comment="Order identifier assigned at submission"
    )
    symbol: Mapped[str] = mapped_column(
        String(20), nullable=False, index=True,
        comment="Traded instrument"
    )
    order_type: Mapped[str] = mapped_column(
        String(10), nullable=False,
        comment="market, limit or stop"
    )
    side: Mapped[str] = mapped_column(
        String(10), nullable=False,
        comment="buy or sell"
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    avg_price: Mapped[Decimal] = mapped_column(
        Numeric(20, 8), nullable=False,
        comment="Realized average fill price"
    )
    limit_price: Mapped[Decimal | None] = mapped_column(
        Numeric(20, 8), nullable=True,
        comment="Set for limit orders only"
    )
    stop_price: Mapped[Decimal | None] = mapped_column(
        Numeric(20, 8), nullable=True,
        comment="Set for stop orders only"
    )
    filled_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, index=True,
        comment="Fill time"
    )

    __table_args__ = (
        Index('ix_filled_orders_type_side', 'order_type', 'side'),
    )

    def __repr__(self) -> str:
        return f"<FilledOrder {self.order_id} {self.order_type} {self.side} {self.quantity} {self.symbol}>"
