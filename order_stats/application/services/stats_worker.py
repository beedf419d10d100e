"""
StatsWorker - Periodic filled order statistics.

The worker owns one order repository connection and repeats
fetch -> aggregate -> rank -> format -> publish, sleeping for a fixed
period between cycles, until it is cancelled.

State machine:
    IDLE -> RUNNING -> (FETCHING -> COMPUTING -> PUBLISHING -> SLEEPING)*
         -> CANCELLED -> CLOSED

Failure policy:
- Errors inside a cycle are logged as warnings; the next scheduled cycle
  is the retry.
- A failure while closing the repository is raised to the caller of run().
- cancel() abandons an in-flight cycle; nothing is published for it.

Usage:
    worker = StatsWorker(repository, publisher, period_seconds=60)
    task = asyncio.create_task(worker.run())
    ...
    worker.cancel()
    await task
"""
import asyncio
import logging
from enum import Enum
from time import monotonic
from typing import Optional

from order_stats.application.ports.outbound.order_repository_port import (
    OrderFilter,
    OrderRepositoryPort,
)
from order_stats.application.ports.outbound.report_publisher_port import ReportPublisherPort
from order_stats.application.ports.outbound.stats_metrics_port import (
    NullStatsMetrics,
    StatsMetricsPort,
)
from order_stats.application.services.report_formatter import format_report
from order_stats.domain.services.ranking_selector import select_top_orders
from order_stats.domain.services.statistics_aggregator import group_by_side, summarize_by_type
from order_stats.exceptions import RepositoryError

logger = logging.getLogger(__name__)

DEFAULT_TOP_ORDERS_LIMIT = 5


class WorkerState(Enum):
    """Lifecycle state of the statistics worker."""
    IDLE = "idle"
    RUNNING = "running"
    FETCHING = "fetching"
    COMPUTING = "computing"
    PUBLISHING = "publishing"
    SLEEPING = "sleeping"
    CANCELLED = "cancelled"
    CLOSED = "closed"


class CancellationToken:
    """
    Cancellation signal shared between the worker and its owner.

    wait() doubles as the interruptible sleep: it returns as soon as
    cancel() is called instead of running out the timeout.
    """

    def __init__(self):
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    async def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for cancellation.

        Args:
            timeout: Seconds to wait at most (None waits forever)

        Returns:
            True if cancelled, False if the timeout elapsed first
        """
        if self.is_cancelled:
            return True
        try:
            await asyncio.wait_for(self._event.wait(), timeout)
        except asyncio.TimeoutError:
            return False
        return True


class StatsWorker:
    """
    Periodic statistics worker.

    Drives the statistics cycle on a fixed delay and guarantees the
    repository is closed exactly once on every exit path.
    """

    def __init__(
        self,
        repository: OrderRepositoryPort,
        publisher: ReportPublisherPort,
        period_seconds: float,
        top_orders_limit: int = DEFAULT_TOP_ORDERS_LIMIT,
        order_filter: Optional[OrderFilter] = None,
        token: Optional[CancellationToken] = None,
        metrics: Optional[StatsMetricsPort] = None,
    ):
        """
        Initialize StatsWorker.

        Args:
            repository: Order repository (not yet connected)
            publisher: Receives one report per successful cycle
            period_seconds: Delay between cycles
            top_orders_limit: N for the per-side top-N selection
            order_filter: Optional predicate passed to every fetch
            token: Cancellation token (a new one is created if None)
            metrics: Metrics recorder (metrics are discarded if None)
        """
        if period_seconds < 0:
            raise ValueError(f"period_seconds must be non-negative, got {period_seconds}")
        if isinstance(top_orders_limit, bool) or not isinstance(top_orders_limit, int) \
                or top_orders_limit < 0:
            raise ValueError(f"top_orders_limit must be a non-negative integer, got {top_orders_limit!r}")

        self._repository = repository
        self._publisher = publisher
        self._period_seconds = period_seconds
        self._top_orders_limit = top_orders_limit
        self._order_filter = order_filter
        self._token = token or CancellationToken()
        self._metrics = metrics or NullStatsMetrics()

        self._state = WorkerState.IDLE
        self._closed = False
        self.cycles_completed = 0
        self.cycles_failed = 0

    @property
    def state(self) -> WorkerState:
        return self._state

    @property
    def token(self) -> CancellationToken:
        return self._token

    def cancel(self) -> None:
        """Request shutdown. Wakes the worker if it is sleeping."""
        if not self._token.is_cancelled:
            logger.info("Statistics worker cancellation requested")
        self._token.cancel()

    async def run(self) -> None:
        """
        Run cycles until cancelled, then close the repository.

        Raises:
            RuntimeError: If the worker was already started
            RepositoryError: If connecting or closing the repository fails
            asyncio.CancelledError: Re-raised after shutdown when the
                surrounding task was cancelled
        """
        if self._state is not WorkerState.IDLE:
            raise RuntimeError(f"Statistics worker already started (state={self._state.value})")

        await self._repository.connect()
        self._state = WorkerState.RUNNING
        self._metrics.set_worker_running(True)
        logger.info(
            f"Statistics worker started (period={self._period_seconds}s, "
            f"top={self._top_orders_limit})"
        )

        try:
            while not self._token.is_cancelled:
                if not await self._run_cycle_until_cancelled():
                    break
                self._state = WorkerState.SLEEPING
                if await self._token.wait(self._period_seconds):
                    break
        except asyncio.CancelledError:
            self._token.cancel()
            raise
        finally:
            await self._shutdown()

    async def _run_cycle_until_cancelled(self) -> bool:
        """
        Run one cycle, abandoning it as soon as cancellation is requested.

        Returns:
            True if the cycle ran to completion, False if it was abandoned
        """
        cycle = asyncio.create_task(self.run_cycle())
        cancelled = asyncio.create_task(self._token.wait())
        try:
            await asyncio.wait({cycle, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (cycle, cancelled):
                task.cancel()
            # run_cycle() only lets CancelledError escape
            await asyncio.gather(cycle, cancelled, return_exceptions=True)

        if cycle.cancelled():
            logger.info(f"Statistics cycle abandoned during {self._state.value}")
            return False
        return True

    async def run_cycle(self) -> Optional[str]:
        """
        Run one fetch -> compute -> publish pass.

        Returns:
            The published report, or None if the cycle failed
        """
        started = monotonic()
        try:
            self._state = WorkerState.FETCHING
            orders = await self._repository.fetch_filled_orders(self._order_filter)

            self._state = WorkerState.COMPUTING
            report = format_report(
                summarize_by_type(orders),
                select_top_orders(group_by_side(orders), self._top_orders_limit),
            )

            self._state = WorkerState.PUBLISHING
            await self._publisher.publish(report)

        except Exception as e:
            self.cycles_failed += 1
            self._metrics.record_cycle("failure", monotonic() - started)
            logger.warning(f"Unable to produce order statistics, due to: {e}")
            return None

        self.cycles_completed += 1
        self._metrics.record_cycle("success", monotonic() - started)
        self._metrics.set_last_cycle_orders(len(orders))
        return report

    async def _shutdown(self) -> None:
        """Single exit path: close the repository once."""
        self._state = WorkerState.CANCELLED
        self._metrics.set_worker_running(False)
        if self._closed:
            return
        self._closed = True

        try:
            await self._repository.close()
        except RepositoryError as e:
            logger.error(f"Unable to close the order repository: {e}")
            raise
        except Exception as e:
            logger.error(f"Unable to close the order repository: {e}")
            raise RepositoryError("close", str(e)) from e
        finally:
            self._state = WorkerState.CLOSED
            logger.info(
                f"Statistics worker stopped (cycles completed={self.cycles_completed}, "
                f"failed={self.cycles_failed})"
            )
