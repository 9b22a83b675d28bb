"""Error kinds raised by the calendrical domain.

Every error is a ``ValueError`` so callers that only care about "bad input"
can catch the builtin; the subclasses carry the structured details.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calendrical.domain.fields import ChronoField
    from calendrical.domain.value_range import ValueRange


class CalendricalError(ValueError):
    """Base class for all date/field errors."""


class FieldRangeError(CalendricalError):
    """A value lies outside the valid range of a field."""

    def __init__(
        self,
        message: str,
        *,
        field: ChronoField,
        value: int,
        valid_range: ValueRange | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
        self.valid_range = valid_range


class UnsupportedFieldError(CalendricalError):
    """The field is not recognised by the temporal value it was asked of."""

    def __init__(self, field: ChronoField) -> None:
        super().__init__(f"Unsupported field: {field.display_name}")
        self.field = field


class CalendarConversionError(CalendricalError):
    """A temporal value could not be obtained from, or applied to, another one."""


class FieldOverflowError(CalendricalError, OverflowError):
    """A value cannot be represented in the narrower integer width requested."""

    def __init__(self, message: str, *, field: ChronoField, value: int) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class DateParseError(CalendricalError):
    """Text could not be parsed; ``error_index`` points at the failing offset."""

    def __init__(self, message: str, *, text: str, error_index: int) -> None:
        super().__init__(message)
        self.text = text
        self.error_index = error_index


__all__ = [
    "CalendarConversionError",
    "CalendricalError",
    "DateParseError",
    "FieldOverflowError",
    "FieldRangeError",
    "UnsupportedFieldError",
]
