"""
StatsMetricsPort - Interface for recording worker metrics.
"""
from abc import ABC, abstractmethod


class StatsMetricsPort(ABC):
    """Receives cycle outcomes and worker status from the statistics worker."""

    @abstractmethod
    def record_cycle(self, outcome: str, duration_seconds: float) -> None:
        """
        Record one finished cycle.

        Args:
            outcome: 'success' or 'failure'
            duration_seconds: Wall time of the cycle
        """
        pass

    @abstractmethod
    def set_worker_running(self, running: bool) -> None:
        pass

    @abstractmethod
    def set_last_cycle_orders(self, count: int) -> None:
        pass


class NullStatsMetrics(StatsMetricsPort):
    """Discards everything. Used when no metrics backend is wired."""

    def record_cycle(self, outcome: str, duration_seconds: float) -> None:
        pass

    def set_worker_running(self, running: bool) -> None:
        pass

    def set_last_cycle_orders(self, count: int) -> None:
        pass
