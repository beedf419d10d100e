"""
Application Services Layer
"""
from order_stats.application.services.report_formatter import format_report
from order_stats.application.services.stats_worker import (
    CancellationToken,
    StatsWorker,
    WorkerState,
)

__all__ = [
    "format_report",
    "CancellationToken",
    "StatsWorker",
    "WorkerState",
]
