"""
Statistics Aggregator Domain Service

Groups filled orders by type and by side and computes per-type means.
All functions are pure; groups with no orders are omitted.
"""
from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Optional, Sequence

from order_stats.domain.entities.order import FilledOrder, OrderSide, OrderType
from order_stats.domain.value_objects.statistics import TypeSummary, round_half_up
from order_stats.exceptions import ComputationError


def group_by_type(orders: Iterable[FilledOrder]) -> Dict[OrderType, List[FilledOrder]]:
    """
    Partition orders by type.

    Keys follow OrderType declaration order; members keep input order.
    """
    buckets: Dict[OrderType, List[FilledOrder]] = {t: [] for t in OrderType}
    for order in orders:
        buckets[order.order_type].append(order)
    return {t: group for t, group in buckets.items() if group}


def group_by_side(orders: Iterable[FilledOrder]) -> Dict[OrderSide, List[FilledOrder]]:
    """
    Partition orders by side.

    Keys follow OrderSide declaration order; members keep input order.
    """
    buckets: Dict[OrderSide, List[FilledOrder]] = {s: [] for s in OrderSide}
    for order in orders:
        buckets[order.side].append(order)
    return {s: group for s, group in buckets.items() if group}


def _mean(values: Sequence[Decimal]) -> Decimal:
    # callers never pass an empty group
    return round_half_up(sum(values, Decimal(0)) / Decimal(len(values)))


def _summarize_group(order_type: OrderType, group: List[FilledOrder]) -> TypeSummary:
    mean_type_price: Optional[Decimal] = None
    if order_type is not OrderType.MARKET:
        mean_type_price = _mean([order.type_price for order in group])

    return TypeSummary(
        order_type=order_type,
        count=len(group),
        mean_quantity=_mean([Decimal(order.quantity) for order in group]),
        mean_avg_price=_mean([order.avg_price for order in group]),
        mean_type_price=mean_type_price,
    )


def summarize_by_type(orders: Iterable[FilledOrder]) -> Dict[OrderType, TypeSummary]:
    """
    Compute count and rounded means per order type.

    Args:
        orders: Filled orders of one fetch cycle (may be empty)

    Returns:
        Summary per present type, in OrderType declaration order.
        An empty input yields an empty dict.

    Raises:
        ComputationError: If a record cannot take part in the arithmetic
    """
    summaries: Dict[OrderType, TypeSummary] = {}
    for order_type, group in group_by_type(orders).items():
        try:
            summaries[order_type] = _summarize_group(order_type, group)
        except (TypeError, InvalidOperation) as e:
            raise ComputationError(
                f"Cannot summarize {order_type.label} orders: {e}"
            ) from e
    return summaries
