"""Clock configuration: which time zone defines "today"."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from calendrical.domain.clock import system_clock

from .env import env_name, optional_env_var
from .errors import ConfigurationError

if TYPE_CHECKING:
    from datetime import tzinfo

    from calendrical.domain.clock import Clock


@dataclass(frozen=True, slots=True)
class ClockConfig:
    """``zone_name=None`` means the process-local time zone.

    ``source`` is the environment variable the name was read from, if any.
    """

    zone_name: str | None = None
    source: str | None = None

    @property
    def zone(self) -> tzinfo | None:
        if self.zone_name is None:
            return None
        try:
            return ZoneInfo(self.zone_name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigurationError(
                f"Unknown time zone: {self.zone_name}", variable=self.source
            ) from exc

    def clock(self) -> Clock:
        return system_clock(self.zone)


def get_clock_config(*, zone_name: str | None = None) -> ClockConfig:
    """Explicit ``zone_name`` wins over ``CALENDRICAL_TIMEZONE``."""
    if zone_name:
        config = ClockConfig(zone_name=zone_name)
    else:
        variable = env_name("timezone")
        config = ClockConfig(zone_name=optional_env_var(variable), source=variable)
    _ = config.zone
    return config
