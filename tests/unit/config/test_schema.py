# tests/unit/config/test_schema.py
"""Tests for configuration schema."""
import pytest
from pydantic import ValidationError

from taskforge.config.schema import DispatchConfig, LLMConfig, SimulationConfig, TaskforgeConfig


def test_dispatch_config_defaults():
    """Test DispatchConfig has correct defaults."""
    config = DispatchConfig()

    assert config.executor == "simulated"
    assert config.execution_timeout is None


def test_simulation_config_defaults():
    """Test SimulationConfig carries the per-category processing times."""
    config = SimulationConfig()

    assert config.time_scale == 1.0
    assert config.processing_times_ms["deployment"] == 10000


def test_simulation_config_rejects_negative_scale():
    with pytest.raises(ValidationError):
        SimulationConfig(time_scale=-0.5)


def test_llm_config_defaults():
    config = LLMConfig()

    assert config.provider is None
    assert config.temperature == 0.7
    assert config.max_tokens == 1000
    assert config.extra_headers == {}


def test_unknown_executor_rejected():
    with pytest.raises(ValidationError):
        TaskforgeConfig.model_validate({"dispatch": {"executor": "cloud"}})


def test_global_alias_round_trip():
    """Test the 'global' section is read and written by alias."""
    config = TaskforgeConfig.model_validate({"global": {"verbose": True}})

    assert config.global_.verbose is True
    assert config.model_dump(by_alias=True)["global"]["verbose"] is True
