"""Simulated execution: a category-specific delay and a canned payload"""
import asyncio
import copy
import logging
from typing import Any

from taskforge.agents.protocol import Worker
from taskforge.config.defaults import (
    DEFAULT_FALLBACK_PAYLOAD,
    DEFAULT_FALLBACK_PROCESSING_TIME_MS,
    DEFAULT_FALLBACK_RECOMMENDATIONS,
    DEFAULT_PROCESSING_TIMES_MS,
    DEFAULT_RECOMMENDATIONS,
    DEFAULT_TASK_PAYLOADS,
)
from taskforge.execution.protocol import ExecutionResult, TaskExecutor
from taskforge.orchestration.models import TaskRequest

logger = logging.getLogger(__name__)


class SimulatedExecutor(TaskExecutor):
    """Pretends to do the work: sleeps, then returns mock results"""

    def __init__(
        self,
        time_scale: float = 1.0,
        processing_times_ms: dict[str, int] | None = None,
    ):
        if time_scale < 0:
            raise ValueError("time_scale must be non-negative")
        self.time_scale = time_scale
        self.processing_times_ms = dict(DEFAULT_PROCESSING_TIMES_MS)
        if processing_times_ms:
            self.processing_times_ms.update(processing_times_ms)

    def processing_time_ms(self, request: TaskRequest) -> float:
        """Simulated duration for a request, after scaling"""
        base = self.processing_times_ms.get(request.label, DEFAULT_FALLBACK_PROCESSING_TIME_MS)
        return base * self.time_scale

    async def execute(self, worker: Worker, request: TaskRequest) -> ExecutionResult:
        delay_ms = self.processing_time_ms(request)
        logger.debug("Simulating %s on %s for %.0fms", request.label, worker.id, delay_ms)
        await asyncio.sleep(delay_ms / 1000)

        return ExecutionResult(
            success=True,
            data=self._build_payload(request),
            recommendations=list(
                DEFAULT_RECOMMENDATIONS.get(request.label, DEFAULT_FALLBACK_RECOMMENDATIONS)
            ),
        )

    async def health_check(self) -> bool:
        return True  # Simulation is always available

    def _build_payload(self, request: TaskRequest) -> dict[str, Any]:
        return copy.deepcopy(DEFAULT_TASK_PAYLOADS.get(request.label, DEFAULT_FALLBACK_PAYLOAD))
