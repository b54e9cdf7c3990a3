"""Tests for SimulatedExecutor"""
from unittest.mock import AsyncMock, patch

import pytest

from taskforge.agents.protocol import Worker, WorkerCategory
from taskforge.execution.simulated import SimulatedExecutor
from taskforge.orchestration.models import TaskCategory, TaskRequest


@pytest.fixture
def worker():
    return Worker(id="w", name="W", category=WorkerCategory.BACKEND)


def request_for(category) -> TaskRequest:
    return TaskRequest(category=category, requirements="x")


def test_processing_times():
    executor = SimulatedExecutor()

    assert executor.processing_time_ms(request_for(TaskCategory.CODE_GENERATION)) == 5000
    assert executor.processing_time_ms(request_for(TaskCategory.DEPLOYMENT)) == 10000
    assert executor.processing_time_ms(request_for("unknown")) == 3000


def test_processing_times_scaled_and_overridden():
    executor = SimulatedExecutor(time_scale=0.5, processing_times_ms={"analysis": 100})

    assert executor.processing_time_ms(request_for(TaskCategory.ANALYSIS)) == 50
    assert executor.processing_time_ms(request_for(TaskCategory.TESTING)) == 3500


def test_negative_time_scale_rejected():
    with pytest.raises(ValueError):
        SimulatedExecutor(time_scale=-1)


@pytest.mark.asyncio
async def test_execute_sleeps_for_scaled_time(worker):
    executor = SimulatedExecutor(time_scale=0.001)

    with patch("taskforge.execution.simulated.asyncio.sleep", new=AsyncMock()) as sleep:
        await executor.execute(worker, request_for(TaskCategory.TESTING))

    sleep.assert_awaited_once_with(pytest.approx(0.007))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "category,key",
    [
        (TaskCategory.CODE_GENERATION, "files"),
        (TaskCategory.ANALYSIS, "codeQuality"),
        (TaskCategory.TESTING, "testCoverage"),
        (TaskCategory.DEPLOYMENT, "environment"),
        (TaskCategory.OPTIMIZATION, "performanceGain"),
    ],
)
async def test_execute_payload_per_category(worker, category, key):
    result = await SimulatedExecutor(time_scale=0).execute(worker, request_for(category))

    assert result.success is True
    assert key in result.data
    assert len(result.recommendations) == 3


@pytest.mark.asyncio
async def test_execute_unknown_category_fallback(worker):
    result = await SimulatedExecutor(time_scale=0).execute(worker, request_for("mystery"))

    assert result.data == {"status": "completed"}
    assert result.recommendations == ["Task completed successfully"]


@pytest.mark.asyncio
async def test_payload_is_a_fresh_copy(worker):
    executor = SimulatedExecutor(time_scale=0)

    first = await executor.execute(worker, request_for(TaskCategory.CODE_GENERATION))
    first.data["files"].clear()
    second = await executor.execute(worker, request_for(TaskCategory.CODE_GENERATION))

    assert len(second.data["files"]) == 2


@pytest.mark.asyncio
async def test_health_check():
    assert await SimulatedExecutor().health_check() is True
