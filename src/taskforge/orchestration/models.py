"""Task request/response models for dispatch."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

NO_WORKER_ERROR = "no suitable worker available"


class TaskCategory(Enum):
    """Kinds of work a caller may request."""
    CODE_GENERATION = "code-generation"
    ANALYSIS = "analysis"
    TESTING = "testing"
    DEPLOYMENT = "deployment"
    OPTIMIZATION = "optimization"


class Priority(Enum):
    """Caller-assigned priority. Informational only."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class InvalidTaskError(ValueError):
    """Malformed task request payload."""


def parse_category(value: str) -> "TaskCategory | str":
    """Resolve a category tag, keeping unknown tags as plain strings."""
    try:
        return TaskCategory(value)
    except ValueError:
        return value


@dataclass
class TaskRequest:
    """A unit of work to dispatch"""
    category: TaskCategory | str  # raw string when outside the closed set
    requirements: str
    priority: Priority = Priority.MEDIUM
    project_id: str = ""
    context: Any = None

    @property
    def label(self) -> str:
        """Text recorded as the worker's current task"""
        if isinstance(self.category, TaskCategory):
            return self.category.value
        return str(self.category)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "TaskRequest":
        """Parse the wire request shape.

        Expected keys: type, projectId, requirements, priority, context (optional).
        """
        if not isinstance(payload, dict):
            raise InvalidTaskError("Task request must be an object")

        task_type = payload.get("type")
        if not isinstance(task_type, str) or not task_type:
            raise InvalidTaskError("Task request 'type' must be a non-empty string")

        requirements = payload.get("requirements")
        if not isinstance(requirements, str):
            raise InvalidTaskError("Task request 'requirements' must be a string")

        project_id = payload.get("projectId")
        if not isinstance(project_id, str):
            raise InvalidTaskError("Task request 'projectId' must be a string")

        raw_priority = payload.get("priority", Priority.MEDIUM.value)
        try:
            priority = Priority(raw_priority)
        except ValueError:
            raise InvalidTaskError(f"Unknown priority: {raw_priority!r}") from None

        return cls(
            category=parse_category(task_type),
            requirements=requirements,
            priority=priority,
            project_id=project_id,
            context=payload.get("context"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.label,
            "projectId": self.project_id,
            "requirements": self.requirements,
            "priority": self.priority.value,
        }
        if self.context is not None:
            data["context"] = self.context
        return data


@dataclass
class TaskResponse:
    """Result returned to the dispatch caller"""
    success: bool
    agent_id: str
    execution_time_ms: float = 0.0
    data: Any = None
    error: str | None = None
    recommendations: list[str] | None = None

    @classmethod
    def no_worker(cls) -> "TaskResponse":
        return cls(success=False, agent_id="", error=NO_WORKER_ERROR)

    @classmethod
    def failure(cls, agent_id: str, error: str) -> "TaskResponse":
        return cls(success=False, agent_id=agent_id, error=error)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire response shape, omitting unset optional fields"""
        data: dict[str, Any] = {"success": self.success}
        if self.data is not None:
            data["data"] = self.data
        if self.error is not None:
            data["error"] = self.error
        data["executionTime"] = self.execution_time_ms
        data["agentId"] = self.agent_id
        if self.recommendations is not None:
            data["recommendations"] = list(self.recommendations)
        return data
