"""Per-worker rolling statistics."""
import logging

from taskforge.agents.protocol import PerformanceStats, Worker
from taskforge.agents.registry import WorkerRegistry

logger = logging.getLogger(__name__)


def running_mean(previous: float, count: int, sample: float) -> float:
    """Fold one sample into a mean over ``count`` samples (``count`` includes it)."""
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    return (previous * (count - 1) + sample) / count


class PerformanceTracker:
    """Applies task outcomes to worker statistics"""

    def __init__(self, registry: WorkerRegistry):
        self.registry = registry

    def record_outcome(self, worker_id: str, success: bool, execution_time_ms: float) -> Worker:
        """Count one finished task and recompute success rate and average time.

        The count is incremented first; the previous averages are then weighted
        by ``n - 1`` where ``n`` is the new count.
        """
        if execution_time_ms < 0:
            raise ValueError(f"execution_time_ms must be non-negative, got {execution_time_ms}")

        def apply(stats: PerformanceStats) -> PerformanceStats:
            n = stats.tasks_completed + 1
            return PerformanceStats(
                tasks_completed=n,
                success_rate=running_mean(stats.success_rate, n, 100.0 if success else 0.0),
                avg_execution_time_ms=running_mean(stats.avg_execution_time_ms, n, execution_time_ms),
            )

        worker = self.registry.update_performance(worker_id, apply)
        logger.debug(
            "Worker %s: tasks=%d success_rate=%.2f avg_ms=%.1f",
            worker_id,
            worker.performance.tasks_completed,
            worker.performance.success_rate,
            worker.performance.avg_execution_time_ms,
        )
        return worker
