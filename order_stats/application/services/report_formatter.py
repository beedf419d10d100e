"""
Report Formatter

Renders type summaries and side selections into the text report published
each cycle. Sections follow the enum declaration order of OrderType and
OrderSide, so the layout is stable between runs.
"""
from typing import List, Mapping

from order_stats.domain.entities.order import OrderSide, OrderType
from order_stats.domain.services.ranking_selector import SIDE_DIRECTIONS
from order_stats.domain.value_objects.statistics import RankedOrder, SideSelection, TypeSummary

REPORT_TITLE = "Filled orders statistics"
TYPE_HEADING = "== By type =="
SIDE_HEADING = "== By side =="
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_ranked_order(order: RankedOrder) -> str:
    """One line per selected order: symbol/ quantity/ fill time."""
    return f"{order.symbol}/ {order.quantity}/ {order.filled_at.strftime(TIMESTAMP_FORMAT)}"


def _format_type_section(summary: TypeSummary) -> List[str]:
    lines = [f"{summary.order_type.label} Orders:"]
    if summary.order_type is OrderType.MARKET:
        lines.append(f"\tAverage price: {summary.mean_avg_price}")
    else:
        lines.append(f"\tAverage market price: {summary.mean_avg_price}")
        lines.append(
            f"\tAverage {summary.order_type.value} price: {summary.mean_type_price}"
        )
    lines.append(f"\tAverage quantity: {summary.mean_quantity}")
    lines.append(f"\tOrders number: {summary.count}")
    return lines


def _format_side_section(selection: SideSelection) -> List[str]:
    side_name = selection.side.value.upper()
    direction = SIDE_DIRECTIONS[selection.side].value
    lines = [
        f"{side_name} orders number: {selection.count}",
        f"Top {selection.limit} {direction} quantity {side_name} orders:",
    ]
    lines.extend(f"\t{format_ranked_order(order)}" for order in selection.orders)
    return lines


def format_report(
    type_summaries: Mapping[OrderType, TypeSummary],
    side_selections: Mapping[OrderSide, SideSelection],
) -> str:
    """
    Build the report text.

    Args:
        type_summaries: Output of summarize_by_type (absent types are skipped)
        side_selections: Output of select_top_orders (empty sides are skipped)

    Returns:
        Report string; with no orders only the title and headings remain
    """
    lines = [REPORT_TITLE, TYPE_HEADING]
    for order_type in OrderType:
        summary = type_summaries.get(order_type)
        if summary is not None:
            lines.extend(_format_type_section(summary))

    lines.append(SIDE_HEADING)
    for side in OrderSide:
        selection = side_selections.get(side)
        if selection is not None and not selection.is_empty:
            lines.extend(_format_side_section(selection))

    return "\n".join(lines)
