"""
Ranking Selector Domain Service

Picks the top-N orders of each side by quantity.

Direction per side:
- BUY: largest quantities first
- SELL: smallest quantities first

Ties keep their relative input order (sorting is stable in both
directions), so the first-seen order wins at the N boundary.
"""
from __future__ import annotations
from enum import Enum
from typing import Dict, List, Mapping, Sequence

from order_stats.domain.entities.order import FilledOrder, OrderSide
from order_stats.domain.value_objects.statistics import RankedOrder, SideSelection


class RankDirection(Enum):
    """Sort direction for a side."""
    LARGEST_FIRST = "biggest"
    SMALLEST_FIRST = "smallest"


SIDE_DIRECTIONS: Dict[OrderSide, RankDirection] = {
    OrderSide.BUY: RankDirection.LARGEST_FIRST,
    OrderSide.SELL: RankDirection.SMALLEST_FIRST,
}


def _validate_limit(limit: int) -> None:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValueError(f"limit must be an integer, got {limit!r}")
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")


def rank_orders(
    orders: Sequence[FilledOrder],
    direction: RankDirection,
    limit: int,
) -> List[FilledOrder]:
    """
    Sort by quantity in the given direction and keep the first ``limit``.

    Returns the whole group, unpadded, when it has fewer than ``limit`` orders.
    """
    _validate_limit(limit)
    # sorted() keeps equal keys in input order even with reverse=True
    ranked = sorted(
        orders,
        key=lambda order: order.quantity,
        reverse=direction is RankDirection.LARGEST_FIRST,
    )
    return ranked[:limit]


def select_top_orders(
    side_groups: Mapping[OrderSide, Sequence[FilledOrder]],
    limit: int,
) -> Dict[OrderSide, SideSelection]:
    """
    Select the top ``limit`` orders for every side.

    Args:
        side_groups: Orders partitioned by side (missing sides count as empty)
        limit: Non-negative N; 0 selects nothing

    Returns:
        One SideSelection per OrderSide, in declaration order

    Raises:
        ValueError: If limit is not a non-negative integer
    """
    _validate_limit(limit)

    selections: Dict[OrderSide, SideSelection] = {}
    for side in OrderSide:
        group = side_groups.get(side, ())
        top = rank_orders(group, SIDE_DIRECTIONS[side], limit)
        selections[side] = SideSelection(
            side=side,
            count=len(group),
            limit=limit,
            orders=tuple(RankedOrder.from_order(order) for order in top),
        )
    return selections
