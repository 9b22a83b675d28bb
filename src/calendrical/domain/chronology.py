"""Calendar system identities.

Only the ISO/proleptic Gregorian system has behaviour here; other systems are
represented so that cross-calendar guards can name and reject them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from calendrical.domain.temporal import TemporalQueries

if TYPE_CHECKING:
    from calendrical.domain.temporal import TemporalAccessor


@dataclass(frozen=True, slots=True)
class CalendarSystem:
    name: str

    @property
    def is_iso(self) -> bool:
        return self == ISO

    def __str__(self) -> str:
        return self.name


ISO: Final[CalendarSystem] = CalendarSystem("ISO")


def calendar_system_of(temporal: TemporalAccessor) -> CalendarSystem:
    """Calendar system declared by ``temporal``; a temporal that declares none is ISO."""
    system = temporal.query(TemporalQueries.CALENDAR_SYSTEM)
    return ISO if system is None else system


__all__ = ["ISO", "CalendarSystem", "calendar_system_of"]
