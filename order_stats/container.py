"""
Dependency Injection Container.

Wires settings to the order repository, the report publisher and the
statistics worker.

Usage:
    # Production
    container = Container(settings=load_settings())
    worker = container.get_stats_worker()

    # Testing
    container = Container.create_for_testing()
    # or with custom adapters
    container = Container(order_repository=mock_repository)
"""
from typing import Iterable, Optional

from order_stats.application.ports.outbound.order_repository_port import OrderRepositoryPort
from order_stats.application.ports.outbound.report_publisher_port import ReportPublisherPort
from order_stats.application.ports.outbound.stats_metrics_port import StatsMetricsPort
from order_stats.application.services.stats_worker import StatsWorker
from order_stats.config.settings import Settings
from order_stats.domain.entities.order import FilledOrder


class Container:
    """
    Dependency Injection Container.

    Port instances are created lazily and cached.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        order_repository: Optional[OrderRepositoryPort] = None,
        report_publisher: Optional[ReportPublisherPort] = None,
        stats_metrics: Optional[StatsMetricsPort] = None,
    ):
        """
        Initialize container with optional port overrides.

        Args:
            settings: Application settings (loaded from the environment if None)
            order_repository: Order repository implementation (SQL if None)
            report_publisher: Report publisher implementation (logging if None)
            stats_metrics: Metrics recorder (Prometheus if None)
        """
        self._settings = settings
        self._order_repository = order_repository
        self._report_publisher = report_publisher
        self._stats_metrics = stats_metrics

    @classmethod
    def create_for_testing(
        cls,
        orders: Optional[Iterable[FilledOrder]] = None,
        settings: Optional[Settings] = None,
    ) -> "Container":
        """
        Create container with in-memory adapters.

        Args:
            orders: Seed orders for the in-memory repository
            settings: Settings override

        Returns:
            Container with test adapters
        """
        from order_stats.infrastructure.adapters.persistence.memory_order_repository import (
            InMemoryOrderRepository,
        )

        return cls(
            settings=settings or Settings(STATS_PUBLISHING_PERIOD_SECONDS=1.0),
            order_repository=InMemoryOrderRepository(orders),
        )

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            from order_stats.config.settings import load_settings
            self._settings = load_settings()
        return self._settings

    def get_order_repository(self) -> OrderRepositoryPort:
        """Get the order repository (SQLAlchemy by default)."""
        if self._order_repository is None:
            from order_stats.infrastructure.adapters.persistence.sqlalchemy_order_repository import (
                SqlAlchemyOrderRepository,
            )
            self._order_repository = SqlAlchemyOrderRepository.from_settings(self.settings)
        return self._order_repository

    def get_report_publisher(self) -> ReportPublisherPort:
        """Get the report publisher (logging by default)."""
        if self._report_publisher is None:
            from order_stats.infrastructure.adapters.publishing.logging_publisher import (
                LoggingReportPublisher,
            )
            self._report_publisher = LoggingReportPublisher()
        return self._report_publisher

    def get_stats_metrics(self) -> StatsMetricsPort:
        """Get the metrics recorder (Prometheus by default)."""
        if self._stats_metrics is None:
            from order_stats.infrastructure.monitoring.metrics import PrometheusStatsMetrics
            self._stats_metrics = PrometheusStatsMetrics()
        return self._stats_metrics

    def get_stats_worker(self) -> StatsWorker:
        """
        Create a statistics worker.

        A worker runs once, so every call returns a new instance sharing
        the cached ports.
        """
        return StatsWorker(
            repository=self.get_order_repository(),
            publisher=self.get_report_publisher(),
            period_seconds=self.settings.STATS_PUBLISHING_PERIOD_SECONDS,
            top_orders_limit=self.settings.STATS_TOP_ORDERS_LIMIT,
            metrics=self.get_stats_metrics(),
        )
