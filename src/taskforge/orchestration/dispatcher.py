"""Task dispatcher - matches a task to a worker, runs it, records the outcome"""
import asyncio
import logging
import time

from taskforge.agents.protocol import Worker, WorkerCategory, WorkerStatus
from taskforge.agents.registry import WorkerRegistry
from taskforge.execution.protocol import ExecutionResult, TaskExecutor
from taskforge.orchestration.models import TaskRequest, TaskResponse
from taskforge.orchestration.performance import PerformanceTracker
from taskforge.orchestration.router import TaskRouter

logger = logging.getLogger(__name__)

_FINISHED = (WorkerStatus.COMPLETED, WorkerStatus.ERROR)


class TaskDispatcher:
    """Dispatches task requests to the best idle eligible worker.

    The dispatcher is the only writer of worker records. Selection and claiming
    run under one lock, so concurrent dispatch calls never claim the same
    worker. Execution runs outside the lock and is attempted exactly once.
    """

    def __init__(
        self,
        registry: WorkerRegistry,
        executor: TaskExecutor,
        router: TaskRouter | None = None,
        tracker: PerformanceTracker | None = None,
        execution_timeout: float | None = None,
    ):
        self.registry = registry
        self.executor = executor
        self.router = router or TaskRouter()
        self.tracker = tracker or PerformanceTracker(registry)
        self.execution_timeout = execution_timeout
        self._lock = asyncio.Lock()

    async def dispatch(self, request: TaskRequest) -> TaskResponse:
        """Run a task on the best available worker.

        Returns a failed response with an empty agent id when no eligible
        worker is idle; that case leaves every worker untouched.
        """
        if not isinstance(request, TaskRequest):
            raise TypeError(f"Expected TaskRequest, got {type(request).__name__}")

        worker = await self._claim_worker(request)
        if worker is None:
            logger.warning("No idle worker for task %r", request.label)
            return TaskResponse.no_worker()

        logger.info("Dispatching %r to %s (%s)", request.label, worker.id, worker.name)

        started = time.monotonic()
        try:
            result = await self._execute(worker, request)
        except asyncio.CancelledError:
            self._finish(worker.id, False, _elapsed_ms(started))
            raise
        except Exception as e:
            logger.warning("Execution on %s raised: %s", worker.id, e, exc_info=True)
            result = ExecutionResult.failed(str(e) or e.__class__.__name__)
        elapsed_ms = _elapsed_ms(started)

        self._finish(worker.id, result.success, elapsed_ms)

        if not result.success:
            error = result.error or "Unknown error occurred"
            logger.warning("Task %r failed on %s: %s", request.label, worker.id, error)
            return TaskResponse.failure(worker.id, error)

        return TaskResponse(
            success=True,
            agent_id=worker.id,
            execution_time_ms=elapsed_ms,
            data=result.data,
            recommendations=list(result.recommendations),
        )

    async def _claim_worker(self, request: TaskRequest) -> Worker | None:
        """Select the best idle eligible worker and mark it working"""
        async with self._lock:
            eligible = self.router.eligible_categories(request.category)
            if not eligible:
                return None

            self._release_finished(eligible)

            candidates = [w for w in self.registry.list_idle() if w.category in eligible]
            chosen = self.router.select(candidates)
            if chosen is None:
                return None

            return self.registry.transition(chosen.id, WorkerStatus.WORKING, request.label)

    def _release_finished(self, eligible: frozenset[WorkerCategory]) -> None:
        """Return eligible workers left in completed/error to idle"""
        for worker in self.registry.list_all():
            if worker.category in eligible and worker.status in _FINISHED:
                self.registry.transition(worker.id, WorkerStatus.IDLE)

    async def _execute(self, worker: Worker, request: TaskRequest) -> ExecutionResult:
        if self.execution_timeout is None:
            return await self.executor.execute(worker, request)
        try:
            return await asyncio.wait_for(
                self.executor.execute(worker, request),
                timeout=self.execution_timeout,
            )
        except asyncio.TimeoutError:
            return ExecutionResult.failed("Task exceeded maximum duration")

    def _finish(self, worker_id: str, success: bool, elapsed_ms: float) -> None:
        self.registry.transition(
            worker_id, WorkerStatus.COMPLETED if success else WorkerStatus.ERROR
        )
        self.tracker.record_outcome(worker_id, success, elapsed_ms)


def _elapsed_ms(started: float) -> float:
    return (time.monotonic() - started) * 1000
