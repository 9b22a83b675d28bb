"""Errors raised while reading calendrical settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A setting is present but unusable; ``variable`` names its source when known."""

    def __init__(self, message: str, *, variable: str | None = None) -> None:
        super().__init__(message)
        self.variable = variable


class MissingConfigurationError(ConfigurationError):
    """One or more required environment variables are unset or blank."""

    def __init__(self, names: list[str]) -> None:
        super().__init__(f"Missing configuration for: {', '.join(names)}")
        self.names = names
