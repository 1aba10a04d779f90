"""Configuration management for mtailf.

Defaults for the command-line flags are loaded from:
1. mtailf.toml (``$MTAILF_CONFIG`` or ``~/.mtailf/mtailf.toml``)
2. Environment variables (MTAILF_* prefix)
3. Built-in values

Environment variables override config file values, which override built-ins.
Flags given on the command line override all of them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import toml

from mtailf.core.constants import (
    DEFAULT_DELAY,
    DEFAULT_DELIMITER,
    DEFAULT_LINES,
    DEFAULT_SENTINEL,
)


@dataclass
class DefaultsConfig:
    """Fallback values for the follow flags."""

    lines: int = DEFAULT_LINES
    delay: float = DEFAULT_DELAY
    delimiter: str = DEFAULT_DELIMITER.decode("latin-1")
    sentinel: str = DEFAULT_SENTINEL.decode("latin-1")
    quiet: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = "WARNING"


@dataclass
class Config:
    """Main configuration container."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_path() -> Path:
    """Location of the TOML config file."""
    override = os.environ.get("MTAILF_CONFIG")
    if override:
        return Path(override)
    return Path.home() / ".mtailf" / "mtailf.toml"


def _get_env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        return value.lower() in ("1", "true", "yes", "on")
    return default


def _get_env_str(key: str, default: str) -> str:
    """Get non-empty string from environment variable."""
    return os.environ.get(key) or default


def _load_config_file() -> dict[str, Any]:
    """Load configuration from the TOML file; missing or broken files yield {}."""
    path = config_path()
    if not path.exists():
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            return toml.load(f)
    except (OSError, toml.TomlDecodeError):
        return {}


def _get_file_value(section: Any, key: str, default: Any, kind: type) -> Any:
    """Get a typed value from a config file section; mistyped values keep the default."""
    if not isinstance(section, dict):
        return default
    value = section.get(key, default)
    if kind in (bool, str):
        return value if isinstance(value, kind) else default
    if isinstance(value, bool):
        return default
    try:
        return kind(value)
    except (TypeError, ValueError):
        return default


def _apply_file_config(config: Config, file_config: dict[str, Any]) -> Config:
    defaults = file_config.get("defaults")
    config.defaults.lines = _get_file_value(defaults, "lines", config.defaults.lines, int)
    config.defaults.delay = _get_file_value(defaults, "delay", config.defaults.delay, float)
    config.defaults.delimiter = _get_file_value(
        defaults, "delimiter", config.defaults.delimiter, str
    )
    config.defaults.sentinel = _get_file_value(
        defaults, "sentinel", config.defaults.sentinel, str
    )
    config.defaults.quiet = _get_file_value(defaults, "quiet", config.defaults.quiet, bool)

    logging = file_config.get("logging")
    config.logging.log_level = _get_file_value(
        logging, "log_level", config.logging.log_level, str
    )

    return config


def _apply_env_overrides(config: Config) -> Config:
    config.defaults.lines = _get_env_int("MTAILF_LINES", config.defaults.lines)
    config.defaults.delay = _get_env_float("MTAILF_DELAY", config.defaults.delay)
    config.defaults.delimiter = _get_env_str("MTAILF_DELIMITER", config.defaults.delimiter)
    config.defaults.sentinel = _get_env_str("MTAILF_SENTINEL", config.defaults.sentinel)
    config.defaults.quiet = _get_env_bool("MTAILF_QUIET", config.defaults.quiet)
    config.logging.log_level = _get_env_str("MTAILF_LOG_LEVEL", config.logging.log_level)
    return config


def load_config() -> Config:
    """Load configuration from built-ins, file, and environment."""
    config = Config()

    file_config = _load_config_file()
    if file_config:
        config = _apply_file_config(config, file_config)

    return _apply_env_overrides(config)


_config: Config | None = None


def get_config() -> Config:
    """Get the cached configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    global _config
    _config = load_config()
    return _config


__all__ = [
    "Config",
    "DefaultsConfig",
    "LoggingConfig",
    "config_path",
    "load_config",
    "get_config",
    "reload_config",
]
