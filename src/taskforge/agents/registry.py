"""Worker registry holding the fixed set of workers and their mutable records."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from taskforge.agents.protocol import (
    PerformanceStats,
    Worker,
    WorkerCategory,
    WorkerStatus,
    utcnow,
)
from taskforge.config.defaults import DEFAULT_WORKERS

logger = logging.getLogger(__name__)


class UnknownWorkerError(KeyError):
    """Raised when a worker id is not in the registry."""


@dataclass
class RegistryStats:
    """Aggregate view over all workers."""

    total: int
    active: int
    idle: int
    completed: int
    error: int
    avg_success_rate: float
    total_tasks_completed: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "active": self.active,
            "idle": self.idle,
            "completed": self.completed,
            "error": self.error,
            "avgSuccessRate": self.avg_success_rate,
            "totalTasksCompleted": self.total_tasks_completed,
        }


def default_workers() -> list[Worker]:
    """Build the seed worker set: one idle worker per category."""
    workers = []
    for index, (category, name, avg_time_ms, capabilities) in enumerate(DEFAULT_WORKERS):
        workers.append(
            Worker(
                id=f"worker_{category}_{index + 1}",
                name=name,
                category=WorkerCategory(category),
                capabilities=list(capabilities),
                performance=PerformanceStats(avg_execution_time_ms=float(avg_time_ms)),
            )
        )
    return workers


class WorkerRegistry:
    """Owns the worker records.

    Readers only ever receive snapshots. The write methods (``transition`` and
    ``update_performance``) are the dispatcher's update path.
    """

    def __init__(self, workers: Iterable[Worker] | None = None) -> None:
        self._workers: dict[str, Worker] = {}
        for worker in default_workers() if workers is None else workers:
            if worker.id in self._workers:
                raise ValueError(f"Duplicate worker id: {worker.id}")
            self._workers[worker.id] = worker.snapshot()

    def __len__(self) -> int:
        return len(self._workers)

    def __contains__(self, worker_id: object) -> bool:
        return worker_id in self._workers

    def list_all(self) -> list[Worker]:
        """Get all workers, in registration order."""
        return [w.snapshot() for w in self._workers.values()]

    def list_by_category(self, category: WorkerCategory) -> list[Worker]:
        """Get workers of one category."""
        return [w.snapshot() for w in self._workers.values() if w.category is category]

    def list_idle(self) -> list[Worker]:
        """Get workers currently idle."""
        return [w.snapshot() for w in self._workers.values() if w.is_idle]

    def get(self, worker_id: str) -> Worker:
        """Get a worker by id."""
        return self._live(worker_id).snapshot()

    def transition(
        self,
        worker_id: str,
        status: WorkerStatus,
        current_task: str | None = None,
    ) -> Worker:
        """Move a worker to a new status and stamp its last activity.

        ``current_task`` is only kept while the worker is working.
        """
        worker = self._live(worker_id)
        previous = worker.status
        worker.status = status
        worker.current_task = current_task if status is WorkerStatus.WORKING else None
        worker.last_active = utcnow()
        logger.debug("Worker %s: %s -> %s", worker_id, previous.value, status.value)
        return worker.snapshot()

    def update_performance(
        self,
        worker_id: str,
        updater: Callable[[PerformanceStats], PerformanceStats],
    ) -> Worker:
        """Replace a worker's statistics with ``updater(current)``."""
        worker = self._live(worker_id)
        worker.performance = updater(PerformanceStats(**vars(worker.performance)))
        return worker.snapshot()

    def stats(self) -> RegistryStats:
        """Aggregate status counts and performance across all workers."""
        workers = list(self._workers.values())
        by_status = {status: 0 for status in WorkerStatus}
        for worker in workers:
            by_status[worker.status] += 1

        total = len(workers)
        avg_success_rate = (
            sum(w.performance.success_rate for w in workers) / total if total else 0.0
        )
        return RegistryStats(
            total=total,
            active=by_status[WorkerStatus.WORKING],
            idle=by_status[WorkerStatus.IDLE],
            completed=by_status[WorkerStatus.COMPLETED],
            error=by_status[WorkerStatus.ERROR],
            avg_success_rate=avg_success_rate,
            total_tasks_completed=sum(w.performance.tasks_completed for w in workers),
        )

    def _live(self, worker_id: str) -> Worker:
        try:
            return self._workers[worker_id]
        except KeyError:
            raise UnknownWorkerError(worker_id) from None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} workers={len(self._workers)}>"
