"""Application configuration helpers."""

from __future__ import annotations

from calendrical.common.logging import configure_logging

from .clock import ClockConfig, get_clock_config
from .env import env_name, optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import DEFAULT_LOG_LEVEL, LoggingConfig, get_logging_config

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "ClockConfig",
    "ConfigurationError",
    "LoggingConfig",
    "MissingConfigurationError",
    "configure_logging",
    "env_name",
    "get_clock_config",
    "get_logging_config",
    "optional_env_var",
    "require_env_vars",
]
