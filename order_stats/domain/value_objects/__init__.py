"""Domain value objects."""
from order_stats.domain.value_objects.statistics import (
    RankedOrder,
    SideSelection,
    TypeSummary,
    round_half_up,
)

__all__ = [
    "RankedOrder",
    "SideSelection",
    "TypeSummary",
    "round_half_up",
]
