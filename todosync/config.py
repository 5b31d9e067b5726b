"""Configuration management for todosync."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from todosync.exceptions import TodosyncConfigError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "http://localhost:8080"
DEFAULT_LOG_LEVEL = "WARNING"

# Environment variables checked for the API base, highest priority first
API_BASE_ENV_VARS = ("TODOSYNC_API_BASE", "API_BASE")


def normalize_api_base(api_base: str) -> str:
    """Strip trailing slashes so paths can be appended directly."""
    return api_base.rstrip("/")


@dataclass
class Config:
    api_base: str = DEFAULT_API_BASE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def config_path(cls) -> Path:
        return Path.home() / ".todosync" / "config.yaml"

    @classmethod
    def _load_config_file(cls) -> dict[str, Any]:
        """Load configuration from ~/.todosync/config.yaml."""
        config_path = cls.config_path()
        if not config_path.exists():
            return {}

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config file: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {config_path}: top level is not a mapping")
            return {}
        return data

    @classmethod
    def from_env(cls, api_base: str | None = None, log_level: str | None = None) -> "Config":
        """
        Load configuration from CLI arguments, environment and config file.

        Args:
            api_base: API base from CLI (overrides everything else)
            log_level: Log level from CLI

        Returns:
            Config instance

        Raises:
            TodosyncConfigError: If the config file holds a non-string api_base
                or the resolved API base is empty

        Priority for the API base:
            argument > TODOSYNC_API_BASE > API_BASE > config file > default
        """
        config_data = cls._load_config_file()

        resolved = api_base
        if not resolved:
            for name in API_BASE_ENV_VARS:
                value = os.getenv(name)
                if value:
                    resolved = value
                    break

        if not resolved:
            file_value = config_data.get("api_base")
            if file_value is not None and not isinstance(file_value, str):
                raise TodosyncConfigError(
                    f"api_base in {cls.config_path()} must be a string",
                    value=file_value,
                )
            resolved = file_value or DEFAULT_API_BASE

        normalized = normalize_api_base(resolved)
        if not normalized:
            raise TodosyncConfigError(f"API base {resolved!r} is empty once normalized")

        level = (
            log_level
            or os.getenv("TODOSYNC_LOG_LEVEL")
            or config_data.get("log_level")
            or DEFAULT_LOG_LEVEL
        )

        return cls(api_base=normalized, log_level=str(level).upper())
