"""Execution capabilities a dispatched task can run on"""
from .protocol import ExecutionResult, TaskExecutor
from .simulated import SimulatedExecutor
from .llm_executor import LLMExecutor
from .factory import ExecutorUnavailableError, create_executor

__all__ = [
    "ExecutionResult",
    "TaskExecutor",
    "SimulatedExecutor",
    "LLMExecutor",
    "ExecutorUnavailableError",
    "create_executor",
]
