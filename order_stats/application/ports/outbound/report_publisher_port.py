"""
ReportPublisherPort - Interface for emitting statistics reports.
"""
from abc import ABC, abstractmethod


class ReportPublisherPort(ABC):
    """Receives one formatted report per worker cycle."""

    @abstractmethod
    async def publish(self, report: str) -> None:
        """
        Publish a report.

        Args:
            report: Formatted report text
        """
        pass
