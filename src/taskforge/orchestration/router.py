"""Routing of task categories to eligible workers and candidate ranking."""

import logging

from taskforge.agents.protocol import PerformanceStats, Worker, WorkerCategory
from taskforge.orchestration.models import TaskCategory, parse_category

logger = logging.getLogger(__name__)

# Stands in for a zero average execution time so the score stays finite.
SCORE_EPSILON_MS = 1e-6

ELIGIBLE_WORKER_CATEGORIES: dict[TaskCategory, frozenset[WorkerCategory]] = {
    TaskCategory.CODE_GENERATION: frozenset(
        {WorkerCategory.FRONTEND, WorkerCategory.BACKEND, WorkerCategory.API}
    ),
    TaskCategory.ANALYSIS: frozenset(
        {WorkerCategory.TESTING, WorkerCategory.SECURITY, WorkerCategory.PERFORMANCE}
    ),
    TaskCategory.TESTING: frozenset({WorkerCategory.TESTING, WorkerCategory.SECURITY}),
    TaskCategory.DEPLOYMENT: frozenset(
        {WorkerCategory.DEPLOYMENT, WorkerCategory.MONITORING}
    ),
    TaskCategory.OPTIMIZATION: frozenset(
        {WorkerCategory.PERFORMANCE, WorkerCategory.SECURITY}
    ),
}

_unmapped = set(TaskCategory) - set(ELIGIBLE_WORKER_CATEGORIES)
if _unmapped:
    raise RuntimeError(
        f"Task categories without eligible workers: {sorted(c.value for c in _unmapped)}"
    )


def performance_score(stats: PerformanceStats) -> float:
    """Success rate per second of average execution time. Higher is better."""
    avg_ms = stats.avg_execution_time_ms if stats.avg_execution_time_ms > 0 else SCORE_EPSILON_MS
    return stats.success_rate / (avg_ms / 1000)


class TaskRouter:
    """Maps task categories to worker categories and ranks candidates."""

    def __init__(
        self,
        table: dict[TaskCategory, frozenset[WorkerCategory]] | None = None,
    ) -> None:
        self.table = ELIGIBLE_WORKER_CATEGORIES if table is None else table

    def eligible_categories(self, category: TaskCategory | str) -> frozenset[WorkerCategory]:
        """Get the worker categories that may take a task category.

        A category outside the closed set has no eligible workers.
        """
        if not isinstance(category, TaskCategory):
            category = parse_category(category)
        if not isinstance(category, TaskCategory):
            logger.warning("Unknown task category %r, no eligible workers", category)
            return frozenset()
        return self.table.get(category, frozenset())

    def rank(self, candidates: list[Worker]) -> list[Worker]:
        """Order candidates best first. Ties keep their given order."""
        return sorted(candidates, key=lambda w: performance_score(w.performance), reverse=True)

    def select(self, candidates: list[Worker]) -> Worker | None:
        """Pick the best candidate, if any."""
        ranked = self.rank(candidates)
        return ranked[0] if ranked else None
