"""
StatsRunner - Command line entry point for the statistics worker.

Runs the periodic worker until SIGINT/SIGTERM (or an optional duration)
cancels it.

Usage:
    order-stats --period 30 --top 5
    order-stats --duration 60
"""
import argparse
import asyncio
import logging
import signal
import sys
from pathlib import Path
from typing import Optional, Sequence

from order_stats.application.services.stats_worker import StatsWorker
from order_stats.config.settings import Settings, load_settings
from order_stats.container import Container
from order_stats.exceptions import ConfigurationError, RepositoryError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def configure_logging(level: str, log_dir: Optional[str] = None) -> None:
    """Log to stderr and, when log_dir is set, to <log_dir>/stats.log."""
    handlers = [logging.StreamHandler()]
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path / 'stats.log', encoding='utf-8'))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def configure_sentry(settings: Settings) -> None:
    if not (settings.SENTRY_ENABLED and settings.SENTRY_DSN):
        return

    import sentry_sdk
    from sentry_sdk.integrations.logging import LoggingIntegration

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=0.0,
        integrations=[
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR
            ),
        ],
    )
    logger.info("Sentry initialized")


def start_metrics_server(settings: Settings) -> None:
    if not settings.METRICS_ENABLED:
        return

    from prometheus_client import start_http_server

    start_http_server(settings.METRICS_PORT)
    logger.info(f"Metrics exposed on port {settings.METRICS_PORT}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='order-stats',
        description='Periodically publish statistics about filled orders'
    )
    parser.add_argument('--period', type=float, default=None,
                        help='Seconds between cycles (STATS_PUBLISHING_PERIOD_SECONDS)')
    parser.add_argument('--top', type=int, default=None,
                        help='Top N orders per side (STATS_TOP_ORDERS_LIMIT)')
    parser.add_argument('--duration', type=float, default=None,
                        help='Stop after this many seconds (STATS_RUN_DURATION_SECONDS)')
    parser.add_argument('--log-level', default=None,
                        help='Log level (LOG_LEVEL)')
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.period is not None:
        overrides['STATS_PUBLISHING_PERIOD_SECONDS'] = args.period
    if args.top is not None:
        overrides['STATS_TOP_ORDERS_LIMIT'] = args.top
    if args.duration is not None:
        overrides['STATS_RUN_DURATION_SECONDS'] = args.duration
    if args.log_level is not None:
        overrides['LOG_LEVEL'] = args.log_level
    return load_settings(**overrides)


def install_signal_handlers(worker: StatsWorker) -> None:
    """Route SIGINT/SIGTERM to worker.cancel()."""
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, worker.cancel)
        except NotImplementedError:
            # Windows event loops have no add_signal_handler
            signal.signal(sig, lambda signum, frame: loop.call_soon_threadsafe(worker.cancel))


async def run_worker(worker: StatsWorker, duration_seconds: Optional[float] = None) -> None:
    """
    Run the worker, cancelling it after ``duration_seconds`` when given.

    Raises:
        RepositoryError: If the repository could not be opened or closed
    """
    install_signal_handlers(worker)

    timer: Optional[asyncio.TimerHandle] = None
    if duration_seconds is not None:
        timer = asyncio.get_running_loop().call_later(duration_seconds, worker.cancel)
        logger.info(f"Worker will stop after {duration_seconds}s")

    try:
        await worker.run()
    finally:
        if timer is not None:
            timer.cancel()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console script entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = settings_from_args(args)
    except ConfigurationError as e:
        print(e.message, file=sys.stderr)
        return 2

    configure_logging(settings.LOG_LEVEL, settings.LOG_DIR)
    configure_sentry(settings)
    start_metrics_server(settings)

    container = Container(settings=settings)
    worker = container.get_stats_worker()

    logger.info("=" * 60)
    logger.info(f"{settings.PROJECT_NAME} worker starting")
    logger.info("=" * 60)

    try:
        asyncio.run(run_worker(worker, settings.STATS_RUN_DURATION_SECONDS))
    except RepositoryError as e:
        logger.error(f"Statistics worker failed: {e.message}", exc_info=True)
        if settings.SENTRY_ENABLED and settings.SENTRY_DSN:
            import sentry_sdk
            with sentry_sdk.new_scope() as scope:
                scope.set_tag("component", "stats_worker")
                scope.set_context("worker_info", {
                    "cycles_completed": worker.cycles_completed,
                    "cycles_failed": worker.cycles_failed,
                })
                sentry_sdk.capture_exception(e)
        return 1

    logger.info(f"{settings.PROJECT_NAME} worker stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
