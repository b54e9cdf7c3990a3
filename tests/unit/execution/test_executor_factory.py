"""Tests for create_executor"""
import os
from unittest.mock import patch

import pytest

from taskforge.config.schema import TaskforgeConfig
from taskforge.execution.factory import ExecutorUnavailableError, create_executor
from taskforge.execution.llm_executor import LLMExecutor
from taskforge.execution.simulated import SimulatedExecutor


def test_default_is_simulated():
    config = TaskforgeConfig.model_validate({"simulation": {"time_scale": 0.25}})

    executor = create_executor(config)

    assert isinstance(executor, SimulatedExecutor)
    assert executor.time_scale == 0.25


def test_llm_executor_from_config():
    config = TaskforgeConfig.model_validate(
        {"dispatch": {"executor": "llm"}, "llm": {"model": "gpt-4o-mini", "max_tokens": 200}}
    )

    with patch.dict(os.environ, {"OPENAI_API_KEY": "test-key"}):
        with patch("taskforge.llm.client.openai"):
            executor = create_executor(config)

    assert isinstance(executor, LLMExecutor)
    assert executor.model == "gpt-4o-mini"
    assert executor.max_tokens == 200


def test_llm_executor_without_key():
    config = TaskforgeConfig.default()

    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ExecutorUnavailableError):
            create_executor(config, "llm")


def test_unknown_executor():
    with pytest.raises(ValueError):
        create_executor(TaskforgeConfig.default(), "quantum")
