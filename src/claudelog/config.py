"""
Configuration management for claudelog.

Settings are resolved in three layers, later layers winning:
- Built-in defaults
- An optional YAML config file
- CLAUDELOG_* environment variables
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

# Environment variable -> EnvConfig field
ENV_VARS = {
    "CLAUDELOG_REMINDER": "reminder",
    "CLAUDELOG_CLAUDE_PROJECTS_DIR": "projects_dir",
    "CLAUDELOG_LAST_RUN_FILE": "last_run_file",
    "CLAUDELOG_LOG_LEVEL": "log_level",
}

CONFIG_PATH_VAR = "CLAUDELOG_CONFIG"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConfigError(ValueError):
    """Raised when a config file cannot be used."""


@dataclass
class EnvConfig:
    """Resolved claudelog settings."""

    # One of "7d", "14d", "30d" or "never"
    reminder: str = "7d"
    projects_dir: Path = field(default_factory=lambda: Path.home() / ".claude" / "projects")
    last_run_file: Path = field(default_factory=lambda: Path.home() / ".claudelog-last-run")
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        return {key: str(value) if isinstance(value, Path) else value for key, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnvConfig":
        """Create config from a dictionary, ignoring unknown keys."""
        valid = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key not in valid or value is None:
                continue
            if key in ("projects_dir", "last_run_file"):
                value = Path(value).expanduser()
            else:
                value = str(value)
            kwargs[key] = value
        return cls(**kwargs)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def load_config(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> EnvConfig:
    """
    Load configuration from defaults, a YAML file and the environment.

    Args:
        path: YAML config file; falls back to $CLAUDELOG_CONFIG when None
        environ: Environment mapping (default: os.environ)

    Returns:
        Resolved EnvConfig

    Raises:
        ConfigError: If the config file is unreadable or not a mapping
    """
    env = os.environ if environ is None else environ

    data: dict[str, Any] = {}
    if path is None and env.get(CONFIG_PATH_VAR):
        path = env[CONFIG_PATH_VAR]
    if path is not None:
        data.update(_read_yaml(Path(path).expanduser()))

    for var, key in ENV_VARS.items():
        value = env.get(var)
        if value:
            data[key] = value

    return EnvConfig.from_dict(data)


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Configure root logging for CLI use."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


__all__ = [
    "CONFIG_PATH_VAR",
    "ConfigError",
    "ENV_VARS",
    "EnvConfig",
    "configure_logging",
    "load_config",
]
