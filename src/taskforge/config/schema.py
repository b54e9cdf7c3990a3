"""Configuration schema using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from taskforge.config.defaults import (
    DEFAULT_LLM_MAX_TOKENS,
    DEFAULT_LLM_MODEL,
    DEFAULT_LLM_TEMPERATURE,
    DEFAULT_PROCESSING_TIMES_MS,
)


class GlobalConfig(BaseModel):
    """Global taskforge configuration."""

    color: bool = True
    verbose: bool = False
    log_level: str = "WARNING"


class DispatchConfig(BaseModel):
    """Dispatcher configuration."""

    executor: Literal["simulated", "llm"] = "simulated"
    execution_timeout: float | None = None  # seconds, None waits forever


class SimulationConfig(BaseModel):
    """Simulated executor configuration."""

    time_scale: float = Field(default=1.0, ge=0.0)
    processing_times_ms: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_PROCESSING_TIMES_MS)
    )


class LLMConfig(BaseModel):
    """Hosted chat-completion provider configuration."""

    provider: str | None = None  # "anthropic" | "openai", inferred when unset
    model: str = DEFAULT_LLM_MODEL
    base_url: str | None = None
    temperature: float = DEFAULT_LLM_TEMPERATURE
    max_tokens: int = DEFAULT_LLM_MAX_TOKENS
    extra_headers: dict[str, str] = Field(default_factory=dict)


class TaskforgeConfig(BaseModel):
    """Root configuration model for taskforge."""

    model_config = ConfigDict(populate_by_name=True)

    global_: GlobalConfig = Field(default_factory=GlobalConfig, alias="global")
    dispatch: DispatchConfig = Field(default_factory=DispatchConfig)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)

    @classmethod
    def default(cls) -> "TaskforgeConfig":
        """Create default configuration."""
        return cls()


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_dir = Path.home() / ".config" / "taskforge"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file() -> Path:
    """Get the main configuration file path."""
    return get_config_dir() / "config.toml"
