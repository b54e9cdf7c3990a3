"""Worker model - the records held by the worker registry."""

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class WorkerCategory(Enum):
    """Closed set of worker specializations."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    API = "api"
    TESTING = "testing"
    SECURITY = "security"
    PERFORMANCE = "performance"
    DOCUMENTATION = "documentation"
    DEPLOYMENT = "deployment"
    MONITORING = "monitoring"


class WorkerStatus(Enum):
    """Worker lifecycle: idle -> working -> completed|error -> idle."""

    IDLE = "idle"
    WORKING = "working"
    COMPLETED = "completed"
    ERROR = "error"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PerformanceStats:
    """Rolling statistics for a single worker."""

    tasks_completed: int = 0
    success_rate: float = 100.0  # 0-100
    avg_execution_time_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "tasksCompleted": self.tasks_completed,
            "successRate": self.success_rate,
            "avgExecutionTime": self.avg_execution_time_ms,
        }


@dataclass
class Worker:
    """A named worker with a fixed category, assigned one task at a time."""

    id: str
    name: str
    category: WorkerCategory
    capabilities: list[str] = field(default_factory=list)
    status: WorkerStatus = WorkerStatus.IDLE
    current_task: str | None = None
    last_active: datetime = field(default_factory=utcnow)
    performance: PerformanceStats = field(default_factory=PerformanceStats)

    @property
    def is_idle(self) -> bool:
        return self.status is WorkerStatus.IDLE

    def snapshot(self) -> "Worker":
        """Return a detached copy safe to hand out to readers."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase wire shape."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.category.value,
            "status": self.status.value,
            "capabilities": list(self.capabilities),
            "lastActive": self.last_active.isoformat(),
            "performance": self.performance.to_dict(),
        }
        if self.current_task is not None:
            data["currentTask"] = self.current_task
        return data
