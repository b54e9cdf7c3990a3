"""Configuration manager for loading and merging configs."""

from pathlib import Path
from typing import Any

import toml

from taskforge.config.schema import TaskforgeConfig, get_config_file

PROJECT_CONFIG_NAME = ".taskforge.toml"


class ConfigManager:
    """Manages configuration loading, merging, and access."""

    _config: TaskforgeConfig | None = None

    @classmethod
    def get_config(cls) -> TaskforgeConfig:
        """Get the current configuration, loading if necessary."""
        if cls._config is None:
            cls._config = cls.load_config()
        return cls._config

    @classmethod
    def load_config(cls) -> TaskforgeConfig:
        """Load configuration from all sources.

        Priority (highest to lowest):
        1. Project-level config (.taskforge.toml in cwd or parents)
        2. User config (~/.config/taskforge/config.toml)
        3. Default config
        """
        config_dict: dict[str, Any] = {}

        user_config_file = get_config_file()
        if user_config_file.exists():
            config_dict = cls._deep_merge(config_dict, toml.load(user_config_file))

        project_config_file = cls._find_project_config()
        if project_config_file is not None:
            config_dict = cls._deep_merge(config_dict, toml.load(project_config_file))

        if config_dict:
            return TaskforgeConfig.model_validate(config_dict)
        return TaskforgeConfig.default()

    @classmethod
    def reload(cls) -> TaskforgeConfig:
        """Force reload configuration from disk."""
        cls._config = cls.load_config()
        return cls._config

    @classmethod
    def reset(cls) -> None:
        """Drop the cached configuration."""
        cls._config = None

    @classmethod
    def _find_project_config(cls) -> Path | None:
        """Find project-level config file by searching up from cwd."""
        cwd = Path.cwd()
        for parent in [cwd, *cwd.parents]:
            config_file = parent / PROJECT_CONFIG_NAME
            if config_file.exists():
                return config_file
            # Stop at home directory
            if parent == Path.home():
                break
        return None

    @classmethod
    def _deep_merge(
        cls, base: dict[str, Any], override: dict[str, Any]
    ) -> dict[str, Any]:
        """Deep merge two dictionaries, with override taking precedence."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = cls._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    @classmethod
    def save_user_config(cls, config: TaskforgeConfig) -> None:
        """Save configuration to user config file."""
        config_file = get_config_file()
        config_dict = config.model_dump(by_alias=True, exclude_none=True)
        with open(config_file, "w") as f:
            toml.dump(config_dict, f)

    @classmethod
    def set_value(cls, key_path: str, value: Any) -> None:
        """Set a configuration value by dot-separated path.

        Example: set_value("simulation.time_scale", 0.1)
        """
        config_dict = cls.get_config().model_dump(by_alias=True)

        keys = key_path.split(".")
        current = config_dict
        for key in keys[:-1]:
            current = current.setdefault(key, {})
        current[keys[-1]] = value

        cls._config = TaskforgeConfig.model_validate(config_dict)
        cls.save_user_config(cls._config)

    @classmethod
    def get_value(cls, key_path: str, default: Any = None) -> Any:
        """Get a configuration value by dot-separated path."""
        current: Any = cls.get_config().model_dump(by_alias=True)
        for key in key_path.split("."):
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current
