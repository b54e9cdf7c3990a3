"""Builds the configured execution capability"""
import logging

from taskforge.config.schema import TaskforgeConfig
from taskforge.execution.llm_executor import LLMExecutor
from taskforge.execution.protocol import TaskExecutor
from taskforge.execution.simulated import SimulatedExecutor
from taskforge.llm.client import LLMClientFactory

logger = logging.getLogger(__name__)


class ExecutorUnavailableError(RuntimeError):
    """The configured executor cannot be built in this environment"""


def create_executor(config: TaskforgeConfig, kind: str | None = None) -> TaskExecutor:
    """Create the executor named by ``kind`` or by ``config.dispatch.executor``"""
    kind = kind or config.dispatch.executor

    if kind == "simulated":
        return SimulatedExecutor(
            time_scale=config.simulation.time_scale,
            processing_times_ms=config.simulation.processing_times_ms,
        )

    if kind == "llm":
        client = LLMClientFactory.create(config.llm)
        if client is None:
            raise ExecutorUnavailableError(
                "LLM executor requires ANTHROPIC_API_KEY or OPENAI_API_KEY"
            )
        return LLMExecutor(
            client,
            model=config.llm.model,
            temperature=config.llm.temperature,
            max_tokens=config.llm.max_tokens,
        )

    raise ValueError(f"Unknown executor: {kind}")
