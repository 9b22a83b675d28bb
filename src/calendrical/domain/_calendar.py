"""Proleptic Gregorian arithmetic on plain integers (internal helpers)."""

from __future__ import annotations

from typing import Final

_DAYS_PER_ERA: Final[int] = 146_097
_DAYS_0000_03_01_TO_1970: Final[int] = 719_468


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def to_epoch_day(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a valid ISO date (negative before the epoch)."""
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400
    shifted_month = month - 3 if month > 2 else month + 9
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * _DAYS_PER_ERA + day_of_era - _DAYS_0000_03_01_TO_1970


def from_epoch_day(epoch_day: int) -> tuple[int, int, int]:
    """Inverse of :func:`to_epoch_day`."""
    z = epoch_day + _DAYS_0000_03_01_TO_1970
    era = z // _DAYS_PER_ERA
    day_of_era = z - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def day_of_week(epoch_day: int) -> int:
    """ISO day-of-week, Monday=1 .. Sunday=7; the epoch was a Thursday."""
    return (epoch_day + 3) % 7 + 1
