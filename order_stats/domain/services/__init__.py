"""Domain services."""
from order_stats.domain.services.statistics_aggregator import (
    group_by_side,
    group_by_type,
    summarize_by_type,
)
from order_stats.domain.services.ranking_selector import (
    SIDE_DIRECTIONS,
    RankDirection,
    select_top_orders,
)

__all__ = [
    "group_by_side",
    "group_by_type",
    "summarize_by_type",
    "SIDE_DIRECTIONS",
    "RankDirection",
    "select_top_orders",
]
