"""
LoggingReportPublisher - Publishes reports to the application log.
"""
import logging
from typing import Optional

from order_stats.application.ports.outbound.report_publisher_port import ReportPublisherPort

logger = logging.getLogger(__name__)


class LoggingReportPublisher(ReportPublisherPort):
    """Writes each report as one log record."""

    def __init__(self, target: Optional[logging.Logger] = None, level: int = logging.INFO):
        """
        Args:
            target: Logger to write to (module logger if None)
            level: Log level for reports
        """
        self._logger = target or logger
        self._level = level

    async def publish(self, report: str) -> None:
        self._logger.log(self._level, "\n%s", report)
