"""Source of the current date."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import tzinfo


class Clock(Protocol):
    def __call__(self) -> date: ...


def system_clock(zone: tzinfo | None = None) -> Clock:
    """Clock reading the system time; ``zone=None`` uses the local time zone."""

    def _today() -> date:
        return datetime.now(zone).date()

    return _today


def fixed_clock(value: date) -> Clock:
    def _fixed() -> date:
        return value

    return _fixed


__all__ = ["Clock", "fixed_clock", "system_clock"]
