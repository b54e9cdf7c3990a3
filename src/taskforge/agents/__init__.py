"""Workers and the registry that owns them."""

from taskforge.agents.protocol import (
    PerformanceStats,
    Worker,
    WorkerCategory,
    WorkerStatus,
)
from taskforge.agents.registry import RegistryStats, UnknownWorkerError, WorkerRegistry

__all__ = [
    "PerformanceStats",
    "RegistryStats",
    "UnknownWorkerError",
    "Worker",
    "WorkerCategory",
    "WorkerRegistry",
    "WorkerStatus",
]
