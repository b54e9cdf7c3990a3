"""Pytest configuration and fixtures."""

import logging

import pytest

from taskforge.agents.protocol import PerformanceStats, Worker, WorkerCategory
from taskforge.agents.registry import WorkerRegistry
from taskforge.config.manager import ConfigManager
from taskforge.execution.simulated import SimulatedExecutor
from taskforge.output.formatter import reset_formatter


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config lookups away from the real home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)
    ConfigManager.reset()
    reset_formatter()
    yield home
    ConfigManager.reset()
    reset_formatter()
    package_logger = logging.getLogger("taskforge")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def registry():
    """The default seeded registry."""
    return WorkerRegistry()


@pytest.fixture
def instant_executor():
    """Simulated executor that does not sleep."""
    return SimulatedExecutor(time_scale=0)


def make_worker(
    worker_id: str,
    category: WorkerCategory,
    success_rate: float = 100.0,
    avg_ms: float = 1000.0,
    tasks: int = 0,
) -> Worker:
    """Build a fixture worker with the given statistics."""
    return Worker(
        id=worker_id,
        name=worker_id.replace("_", " ").title(),
        category=category,
        performance=PerformanceStats(
            tasks_completed=tasks,
            success_rate=success_rate,
            avg_execution_time_ms=avg_ms,
        ),
    )


@pytest.fixture
def worker_factory():
    return make_worker
