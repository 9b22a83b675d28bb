"""Closed value ranges used to validate temporal fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from calendrical.domain.errors import FieldOverflowError, FieldRangeError

if TYPE_CHECKING:
    from calendrical.domain.fields import ChronoField

INT_MIN: Final[int] = -(2**31)
INT_MAX: Final[int] = 2**31 - 1


@dataclass(frozen=True, slots=True)
class ValueRange:
    """Inclusive range ``minimum .. smallest_maximum/largest_maximum``.

    A variable range has a maximum that depends on context (day-of-month is
    ``1 - 28/31``); a fixed range has ``smallest_maximum == largest_maximum``.
    """

    minimum: int
    smallest_maximum: int
    largest_maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.smallest_maximum:
            raise ValueError("Minimum value must be less than smallest maximum value")
        if self.smallest_maximum > self.largest_maximum:
            raise ValueError("Smallest maximum value must be less than largest maximum value")

    @classmethod
    def of(cls, minimum: int, maximum: int, largest_maximum: int | None = None) -> ValueRange:
        """``of(min, max)`` builds a fixed range, ``of(min, smallest, largest)`` a variable one."""
        if largest_maximum is None:
            return cls(minimum, maximum, maximum)
        return cls(minimum, maximum, largest_maximum)

    @property
    def is_fixed(self) -> bool:
        return self.smallest_maximum == self.largest_maximum

    @property
    def maximum(self) -> int:
        return self.largest_maximum

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.largest_maximum

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def is_int_value(self) -> bool:
        """Whether every value in the range fits a signed 32-bit integer."""
        return self.minimum >= INT_MIN and self.largest_maximum <= INT_MAX

    def is_valid_int_value(self, value: int) -> bool:
        return self.is_int_value() and self.contains(value)

    def clamp(self, value: int) -> int:
        return max(self.minimum, min(self.largest_maximum, value))

    def check_valid(self, value: int, field: ChronoField) -> int:
        if not self.contains(value):
            raise FieldRangeError(
                f"Invalid value for {field.display_name} (valid values {self}): {value}",
                field=field,
                value=value,
                valid_range=self,
            )
        return value

    def check_valid_int_value(self, value: int, field: ChronoField) -> int:
        if not self.is_int_value():
            raise FieldOverflowError(
                f"Invalid int value for {field.display_name}: {value}",
                field=field,
                value=value,
            )
        return self.check_valid(value, field)

    def __str__(self) -> str:
        text = f"{self.minimum} - {self.smallest_maximum}"
        if not self.is_fixed:
            text += f"/{self.largest_maximum}"
        return text


__all__ = ["INT_MAX", "INT_MIN", "ValueRange"]
