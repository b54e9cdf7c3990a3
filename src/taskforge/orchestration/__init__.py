"""Core dispatch logic."""
from taskforge.orchestration.models import (
    InvalidTaskError,
    Priority,
    TaskCategory,
    TaskRequest,
    TaskResponse,
)
from taskforge.orchestration.performance import PerformanceTracker, running_mean
from taskforge.orchestration.router import (
    ELIGIBLE_WORKER_CATEGORIES,
    TaskRouter,
    performance_score,
)

__all__ = [
    "ELIGIBLE_WORKER_CATEGORIES",
    "InvalidTaskError",
    "PerformanceTracker",
    "Priority",
    "TaskCategory",
    "TaskRequest",
    "TaskResponse",
    "TaskRouter",
    "performance_score",
    "running_mean",
]
