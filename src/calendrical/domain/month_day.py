"""Month-day: a recurring date such as ``--12-03`` that carries no year.

A ``MonthDay`` only stores ``month`` and ``day``. Every instance satisfies
``1 <= day <= max_length(month)``, where February is allowed 29 days. Whether
the combination exists in a *particular* year is a separate question answered
by :meth:`MonthDay.is_valid_year` and :meth:`MonthDay.resolve_year`.

Two operations correct the day silently instead of failing:

- :meth:`MonthDay.with_month` clamps the day to the new month's maximum.
- :meth:`MonthDay.at_year` uses February 28 for a February 29 month-day in a
  non-leap year.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from calendrical.domain._calendar import is_leap
from calendrical.domain.chronology import ISO, calendar_system_of
from calendrical.domain.errors import (
    CalendarConversionError,
    CalendricalError,
    FieldRangeError,
    UnsupportedFieldError,
)
from calendrical.domain.fields import ChronoField, TemporalKind
from calendrical.domain.formatting import MONTH_DAY_FORMATTER
from calendrical.domain.local_date import LocalDate
from calendrical.domain.months import Month
from calendrical.domain.temporal import TemporalAccessorMixin, TemporalQueries
from calendrical.domain.value_range import ValueRange

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import tzinfo

    from calendrical.domain.clock import Clock
    from calendrical.domain.formatting import DateFormatter
    from calendrical.domain.temporal import Temporal, TemporalAccessor, TemporalQuery

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, order=True)
class MonthDay(TemporalAccessorMixin):
    month: int
    day: int

    def __post_init__(self) -> None:
        month = Month.of(self.month)
        ChronoField.DAY_OF_MONTH.check_valid_value(self.day)
        if self.day > month.max_length():
            raise FieldRangeError(
                f"Illegal value for DayOfMonth field, value {self.day} "
                f"is not valid for month {month.name}",
                field=ChronoField.DAY_OF_MONTH,
                value=self.day,
                valid_range=ValueRange.of(1, month.max_length()),
            )
        # normalise Month members to plain ints so repr and hashing stay uniform
        object.__setattr__(self, "month", int(self.month))

    # -- factories ---------------------------------------------------------------------

    @classmethod
    def of(cls, month: Month | int, day: int) -> MonthDay:
        """Validated month-day; February 29 is accepted, April 31 is not."""
        return cls(Month.of(month), day)

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> MonthDay:
        """Extract month-of-year and day-of-month from any date-like value.

        Values from a non-ISO calendar are converted to a :class:`LocalDate`
        first. Any failure is reported as ``CalendarConversionError``.
        """
        if isinstance(temporal, MonthDay):
            return temporal
        source_type = type(temporal).__name__
        try:
            source = temporal
            if not calendar_system_of(source).is_iso:
                source = LocalDate.from_temporal(source)
            month = source.get(ChronoField.MONTH_OF_YEAR)
            day = source.get(ChronoField.DAY_OF_MONTH)
            return cls.of(month, day)
        except CalendricalError as exc:
            raise CalendarConversionError(
                f"Unable to obtain MonthDay from temporal of type {source_type}"
            ) from exc

    @classmethod
    def now(cls, *, clock: Clock | None = None, zone: tzinfo | None = None) -> MonthDay:
        today = LocalDate.now(clock=clock, zone=zone)
        return cls(today.month, today.day)

    @classmethod
    def parse(cls, text: str, formatter: DateFormatter | None = None) -> MonthDay:
        """Parse ``--MM-DD`` (or the layout of ``formatter``)."""
        return (formatter or MONTH_DAY_FORMATTER).parse_to(text, cls._from_fields)

    @classmethod
    def _from_fields(cls, values: Mapping[ChronoField, int]) -> MonthDay:
        return cls.of(values[ChronoField.MONTH_OF_YEAR], values[ChronoField.DAY_OF_MONTH])

    @classmethod
    def deserialize(cls, month: int, day: int) -> MonthDay:
        """Rebuild from serialized fields, validating them like :meth:`of`."""
        return cls.of(month, day)

    # -- field protocol ----------------------------------------------------------------

    def is_supported(self, field: ChronoField) -> bool:
        return field.is_supported_by(TemporalKind.MONTH_DAY)

    def range(self, field: ChronoField) -> ValueRange:
        if field is ChronoField.MONTH_OF_YEAR:
            return field.range()
        if field is ChronoField.DAY_OF_MONTH:
            month = self.month_enum
            return ValueRange.of(1, month.min_length(), month.max_length())
        return TemporalAccessorMixin.range(self, field)

    def get_raw(self, field: ChronoField) -> int:
        if field is ChronoField.DAY_OF_MONTH:
            return self.day
        if field is ChronoField.MONTH_OF_YEAR:
            return self.month
        raise UnsupportedFieldError(field)

    def with_field(self, field: ChronoField, value: int) -> MonthDay:
        if field is ChronoField.MONTH_OF_YEAR:
            return self.with_month(value)
        if field is ChronoField.DAY_OF_MONTH:
            return self.with_day_of_month(value)
        raise UnsupportedFieldError(field)

    # -- accessors ---------------------------------------------------------------------

    @property
    def month_enum(self) -> Month:
        return Month(self.month)

    @property
    def day_of_month(self) -> int:
        return self.day

    def is_valid_year(self, year: int) -> bool:
        """False only for February 29 combined with a non-leap year."""
        return not (self.day == 29 and self.month == Month.FEBRUARY and not is_leap(year))

    # -- copies ------------------------------------------------------------------------

    def with_month(self, month: Month | int) -> MonthDay:
        """Copy with the month changed; a day beyond the new month's maximum is clamped."""
        resolved = Month.of(month)
        if resolved == self.month:
            return self
        day = min(self.day, resolved.max_length())
        if day != self.day:
            log.debug("Clamped day %d to %d for month %s", self.day, day, resolved.name)
        return MonthDay(int(resolved), day)

    def with_day_of_month(self, day: int) -> MonthDay:
        """Copy with the day changed; the day must be valid for the current month."""
        if day == self.day:
            return self
        return MonthDay.of(self.month, day)

    def at_year(self, year: int) -> LocalDate:
        """Combine with ``year``; February 29 becomes February 28 in a non-leap year."""
        if self.is_valid_year(year):
            return LocalDate(year, self.month, self.day)
        log.debug("Using February 28 for %s in non-leap year %d", self, year)
        return LocalDate(year, self.month, 28)

    def resolve_year(self, year: int) -> YearResolution:
        """Combine with ``year`` without substituting a day.

        The outcome carries either the date or the leap-year error, so callers
        decide what an invalid combination means for them.
        """
        if self.is_valid_year(year):
            return YearResolution(self, year, date=LocalDate(year, self.month, self.day))
        error = FieldRangeError(
            f"Invalid date 'February 29' as '{year}' is not a leap year",
            field=ChronoField.DAY_OF_MONTH,
            value=self.day,
            valid_range=ValueRange.of(1, Month.FEBRUARY.min_length()),
        )
        return YearResolution(self, year, error=error)

    # -- queries and adjustment --------------------------------------------------------

    def query(self, query: TemporalQuery[Any]) -> Any:
        if query is TemporalQueries.CALENDAR_SYSTEM:
            return ISO
        return query.query_from(self)

    def adjust_into[T: Temporal](self, temporal: T) -> T:
        """Write month then day onto ``temporal``, clamping the day to its range.

        The month is set first because it changes the target's day-of-month
        range; the target's own year decides whether February has 29 days.
        """
        if not calendar_system_of(temporal).is_iso:
            raise CalendarConversionError("Adjustment only supported on ISO date-time")
        adjusted = temporal.with_field(ChronoField.MONTH_OF_YEAR, self.month)
        day_limit = adjusted.range(ChronoField.DAY_OF_MONTH).maximum
        return adjusted.with_field(ChronoField.DAY_OF_MONTH, min(day_limit, self.day))

    # -- comparison --------------------------------------------------------------------

    def compare_to(self, other: MonthDay) -> int:
        return (self.month - other.month) or (self.day - other.day)

    def is_after(self, other: MonthDay) -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: MonthDay) -> bool:
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return (self.month << 6) + self.day

    # -- text and serialization --------------------------------------------------------

    def __str__(self) -> str:
        return f"--{self.month:02d}-{self.day:02d}"

    def format(self, formatter: DateFormatter) -> str:
        return formatter.format(self)

    def serialize_fields(self) -> tuple[int, int]:
        return (self.month, self.day)

    def __composite_values__(self) -> tuple[int, int]:
        """For SQLAlchemy composite columns (adapter-side convenience)."""
        return (self.month, self.day)


@dataclass(frozen=True, slots=True)
class YearResolution:
    """Outcome of combining a month-day with a year: either ``date`` or ``error``."""

    month_day: MonthDay
    year: int
    date: LocalDate | None = None
    error: FieldRangeError | None = None

    def __post_init__(self) -> None:
        if (self.date is None) == (self.error is None):
            raise ValueError("YearResolution needs exactly one of date or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> LocalDate:
        if self.date is not None:
            return self.date
        if self.error is not None:
            raise self.error
        raise ValueError(f"No date resolved for {self.month_day} in {self.year}")


__all__ = ["MonthDay", "YearResolution"]
