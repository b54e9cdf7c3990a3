"""Configuration management."""

from taskforge.config.manager import ConfigManager
from taskforge.config.schema import TaskforgeConfig

__all__ = ["ConfigManager", "TaskforgeConfig"]
