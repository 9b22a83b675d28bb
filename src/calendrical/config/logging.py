"""Logging level configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .env import env_name, optional_env_var
from .errors import ConfigurationError

DEFAULT_LOG_LEVEL = logging.INFO


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: int = DEFAULT_LOG_LEVEL


def get_logging_config() -> LoggingConfig:
    variable = env_name("log_level")
    raw = optional_env_var(variable)
    if raw is None:
        return LoggingConfig()
    level = logging.getLevelNamesMapping().get(raw.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {raw}", variable=variable)
    return LoggingConfig(level=level)
