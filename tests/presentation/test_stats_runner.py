"""
StatsRunner CLI tests.
"""
import asyncio
import logging
import pytest
from unittest.mock import patch

from order_stats.application.services.stats_worker import StatsWorker, WorkerState
from order_stats.exceptions import RepositoryError
from order_stats.infrastructure.adapters.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from order_stats.presentation.cli import stats_runner
from tests.helpers import RecordingPublisher

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    for key in ("STATS_PUBLISHING_PERIOD_SECONDS", "STATS_TOP_ORDERS_LIMIT",
                "STATS_RUN_DURATION_SECONDS", "METRICS_ENABLED", "SENTRY_ENABLED"):
        monkeypatch.delenv(key, raising=False)


class TestArguments:

    def test_parser_defaults(self):
        args = stats_runner.build_parser().parse_args([])
        assert args.period is None
        assert args.top is None
        assert args.duration is None

    def test_arguments_override_settings(self):
        args = stats_runner.build_parser().parse_args(
            ["--period", "5", "--top", "2", "--duration", "30", "--log-level", "debug"]
        )

        settings = stats_runner.settings_from_args(args)

        assert settings.STATS_PUBLISHING_PERIOD_SECONDS == 5.0
        assert settings.STATS_TOP_ORDERS_LIMIT == 2
        assert settings.STATS_RUN_DURATION_SECONDS == 30.0
        assert settings.LOG_LEVEL == "DEBUG"

    def test_invalid_configuration_exits_with_2(self):
        assert stats_runner.main(["--period", "0"]) == 2


class TestRunWorker:

    @pytest.mark.asyncio
    async def test_duration_cancels_worker(self, memory_repository):
        worker = StatsWorker(memory_repository, RecordingPublisher(), period_seconds=60)

        with patch.object(stats_runner, "install_signal_handlers"):
            await asyncio.wait_for(stats_runner.run_worker(worker, duration_seconds=0.05), timeout=2.0)

        assert worker.state is WorkerState.CLOSED
        assert memory_repository.close_calls == 1


class TestMain:

    @pytest.fixture(autouse=True)
    def restore_root_logging(self):
        """main() reconfigures the root logger; put it back afterwards."""
        root = logging.getLogger()
        level = root.level
        yield
        for handler in list(root.handlers):
            if type(handler) in (logging.StreamHandler, logging.FileHandler):
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)

    def _patched_container(self, repository):
        """Worker over the given repository plus a patch serving it from Container."""
        worker = StatsWorker(repository, RecordingPublisher(), period_seconds=60)
        return worker, patch.object(stats_runner, "Container")

    def test_main_runs_until_duration(self, memory_repository, tmp_path):
        worker, container_patch = self._patched_container(memory_repository)

        with container_patch as container_cls:
            container_cls.return_value.get_stats_worker.return_value = worker
            exit_code = stats_runner.main(["--duration", "0.05"])

        assert exit_code == 0
        assert worker.cycles_completed == 1
        assert memory_repository.close_calls == 1
        assert (tmp_path / "logs" / "stats.log").exists()

    def test_main_returns_1_when_close_fails(self, memory_repository):
        memory_repository.close_error = RepositoryError("close", "leaked")
        worker, container_patch = self._patched_container(memory_repository)

        with container_patch as container_cls:
            container_cls.return_value.get_stats_worker.return_value = worker
            exit_code = stats_runner.main(["--duration", "0.05"])

        assert exit_code == 1

    def test_main_returns_1_when_store_unreachable(self):
        repository = InMemoryOrderRepository()

        async def refuse():
            raise RepositoryError("connect", "refused")

        repository.connect = refuse
        worker, container_patch = self._patched_container(repository)

        with container_patch as container_cls:
            container_cls.return_value.get_stats_worker.return_value = worker
            exit_code = stats_runner.main([])

        assert exit_code == 1
        assert repository.close_calls == 0
