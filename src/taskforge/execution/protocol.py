"""Execution capability interface - the black box a dispatched task runs in"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from taskforge.agents.protocol import Worker
from taskforge.orchestration.models import TaskRequest


@dataclass
class ExecutionResult:
    """Outcome of a single execution attempt"""
    success: bool
    data: Any = None
    error: str | None = None
    recommendations: list[str] = field(default_factory=list)

    @classmethod
    def failed(cls, error: str) -> "ExecutionResult":
        return cls(success=False, error=error)


class TaskExecutor(ABC):
    """Runs one task on behalf of a worker"""

    @abstractmethod
    async def execute(self, worker: Worker, request: TaskRequest) -> ExecutionResult:
        """Execute the task once and report success or failure"""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Verify executor is available and working"""
        pass
