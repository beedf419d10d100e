"""Report publisher adapters."""
from order_stats.infrastructure.adapters.publishing.logging_publisher import LoggingReportPublisher

__all__ = ["LoggingReportPublisher"]
