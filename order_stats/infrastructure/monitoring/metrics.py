"""
Prometheus metrics for the statistics worker.
"""
import logging

from prometheus_client import Counter, Gauge, Histogram, Info

from order_stats import __version__
from order_stats.application.ports.outbound.stats_metrics_port import StatsMetricsPort

logger = logging.getLogger(__name__)

app_info = Info('order_stats_info', 'Order statistics service information')
app_info.info({
    'version': __version__,
    'name': 'order-stats',
})

stats_cycles_total = Counter(
    'stats_cycles_total',
    'Total statistics cycles by outcome',
    ['outcome']
)

stats_cycle_duration_seconds = Histogram(
    'stats_cycle_duration_seconds',
    'Duration of one fetch-compute-publish cycle in seconds',
    buckets=[0.01, 0.05, 0.1, 0.5, 1, 5, 10, 30]
)

stats_worker_running = Gauge(
    'stats_worker_running',
    'Statistics worker running status (1=running, 0=stopped)'
)

stats_last_cycle_orders = Gauge(
    'stats_last_cycle_orders',
    'Number of filled orders processed by the last successful cycle'
)


def record_cycle(outcome: str, duration_seconds: float) -> None:
    """
    Record one finished cycle.

    Args:
        outcome: 'success' or 'failure'
        duration_seconds: Wall time of the cycle
    """
    stats_cycles_total.labels(outcome=outcome).inc()
    stats_cycle_duration_seconds.observe(duration_seconds)


def set_worker_running(running: bool) -> None:
    stats_worker_running.set(1 if running else 0)
    logger.debug(f"Worker running metric set to {running}")


def set_last_cycle_orders(count: int) -> None:
    stats_last_cycle_orders.set(count)


class PrometheusStatsMetrics(StatsMetricsPort):
    """StatsMetricsPort backed by the module-level Prometheus collectors."""

    def record_cycle(self, outcome: str, duration_seconds: float) -> None:
        record_cycle(outcome, duration_seconds)

    def set_worker_running(self, running: bool) -> None:
        set_worker_running(running)

    def set_last_cycle_orders(self, count: int) -> None:
        set_last_cycle_orders(count)
