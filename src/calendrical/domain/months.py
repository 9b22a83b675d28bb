"""Month-of-year with ISO month lengths."""

from __future__ import annotations

from enum import IntEnum

from calendrical.domain._calendar import is_leap
from calendrical.domain.fields import ChronoField

_SHORT_MONTHS = frozenset({4, 6, 9, 11})


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, month: int) -> Month:
        """Resolve a month number, raising ``FieldRangeError`` outside 1-12."""
        if isinstance(month, bool) or not isinstance(month, int):
            raise TypeError(f"Month must be an int, not {type(month).__name__}")
        return cls(ChronoField.MONTH_OF_YEAR.check_valid_value(month))

    def length(self, leap_year: bool) -> int:
        if self is Month.FEBRUARY:
            return 29 if leap_year else 28
        if self.value in _SHORT_MONTHS:
            return 30
        return 31

    def min_length(self) -> int:
        return self.length(leap_year=False)

    def max_length(self) -> int:
        """Longest possible length; February counts as 29."""
        return self.length(leap_year=True)

    def first_day_of_year(self, leap_year: bool) -> int:
        """Day-of-year on which this month starts."""
        days_before = sum(Month(number).length(leap_year) for number in range(1, self.value))
        return days_before + 1

    def plus(self, months: int) -> Month:
        return Month((self.value - 1 + months) % 12 + 1)


__all__ = ["Month", "is_leap"]
