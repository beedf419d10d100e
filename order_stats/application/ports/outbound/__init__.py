# Outbound ports (external system interfaces)
from order_stats.application.ports.outbound.order_repository_port import (
    OrderFilter,
    OrderRepositoryPort,
)
from order_stats.application.ports.outbound.report_publisher_port import ReportPublisherPort
from order_stats.application.ports.outbound.stats_metrics_port import (
    NullStatsMetrics,
    StatsMetricsPort,
)

__all__ = [
    "OrderFilter",
    "OrderRepositoryPort",
    "ReportPublisherPort",
    "StatsMetricsPort",
    "NullStatsMetrics",
]
