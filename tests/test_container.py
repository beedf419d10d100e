"""
Container wiring tests.
"""
import pytest
from unittest.mock import MagicMock

from order_stats.application.ports.outbound.stats_metrics_port import StatsMetricsPort
from order_stats.application.services.stats_worker import StatsWorker, WorkerState
from order_stats.config.settings import Settings
from order_stats.container import Container
from order_stats.infrastructure.adapters.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from order_stats.infrastructure.adapters.persistence.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from order_stats.infrastructure.adapters.publishing.logging_publisher import LoggingReportPublisher
from order_stats.infrastructure.monitoring.metrics import PrometheusStatsMetrics
from tests.helpers import RecordingPublisher

pytestmark = pytest.mark.unit


class TestContainer:

    def test_create_for_testing_uses_memory_repository(self, sample_orders):
        container = Container.create_for_testing(sample_orders)

        repository = container.get_order_repository()

        assert isinstance(repository, InMemoryOrderRepository)
        assert container.settings.STATS_PUBLISHING_PERIOD_SECONDS == 1.0

    def test_default_adapters(self):
        container = Container(settings=Settings(STATS_DB_ORDERS_TABLE="executed_orders"))

        repository = container.get_order_repository()

        assert isinstance(repository, SqlAlchemyOrderRepository)
        assert repository.table_name == "executed_orders"
        assert isinstance(container.get_report_publisher(), LoggingReportPublisher)
        assert isinstance(container.get_stats_metrics(), PrometheusStatsMetrics)

    def test_ports_are_cached(self):
        container = Container.create_for_testing()

        assert container.get_order_repository() is container.get_order_repository()
        assert container.get_report_publisher() is container.get_report_publisher()
        assert container.get_stats_metrics() is container.get_stats_metrics()

    def test_worker_built_from_settings(self):
        settings = Settings(STATS_PUBLISHING_PERIOD_SECONDS=5.0, STATS_TOP_ORDERS_LIMIT=2)
        container = Container.create_for_testing(settings=settings)

        worker = container.get_stats_worker()

        assert isinstance(worker, StatsWorker)
        assert worker.state is WorkerState.IDLE
        assert worker._period_seconds == 5.0
        assert worker._top_orders_limit == 2

    def test_each_worker_is_new(self):
        container = Container.create_for_testing()
        assert container.get_stats_worker() is not container.get_stats_worker()

    @pytest.mark.asyncio
    async def test_overrides_are_wired_into_worker(self, sample_orders):
        publisher = RecordingPublisher()
        metrics = MagicMock(spec=StatsMetricsPort)
        container = Container(
            settings=Settings(STATS_PUBLISHING_PERIOD_SECONDS=1.0),
            order_repository=InMemoryOrderRepository(sample_orders),
            report_publisher=publisher,
            stats_metrics=metrics,
        )
        worker = container.get_stats_worker()
        await container.get_order_repository().connect()

        await worker.run_cycle()

        assert len(publisher.reports) == 1
        metrics.record_cycle.assert_called_once()
