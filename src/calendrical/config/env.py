"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

ENV_PREFIX = "CALENDRICAL_"


def env_name(key: str) -> str:
    """Prefixed variable name, e.g. ``timezone`` -> ``CALENDRICAL_TIMEZONE``."""
    return f"{ENV_PREFIX}{key.upper()}"


def optional_env_var(name: str) -> str | None:
    """Return the stripped value, treating unset and blank the same."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank."""
    values = {name: optional_env_var(name) for name in names}
    missing = sorted(name for name, value in values.items() if value is None)
    if missing:
        raise MissingConfigurationError(missing)
    return {name: value for name, value in values.items() if value is not None}
