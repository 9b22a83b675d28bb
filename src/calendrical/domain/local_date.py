"""A complete ISO date (year, month, day) implementing the temporal protocols."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any

from calendrical.domain import _calendar
from calendrical.domain.chronology import ISO, calendar_system_of
from calendrical.domain.clock import system_clock
from calendrical.domain.errors import (
    CalendarConversionError,
    FieldRangeError,
    UnsupportedFieldError,
)
from calendrical.domain.fields import ChronoField, TemporalKind
from calendrical.domain.formatting import ISO_LOCAL_DATE_FORMATTER
from calendrical.domain.months import Month
from calendrical.domain.temporal import TemporalAccessorMixin, TemporalQueries
from calendrical.domain.value_range import ValueRange

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import tzinfo

    from calendrical.domain.clock import Clock
    from calendrical.domain.formatting import DateFormatter
    from calendrical.domain.temporal import (
        Temporal,
        TemporalAccessor,
        TemporalAdjuster,
        TemporalQuery,
    )


@dataclass(frozen=True, slots=True, order=True)
class LocalDate(TemporalAccessorMixin):
    """Date without time zone in the proleptic Gregorian calendar.

    Unlike :class:`datetime.date` the year spans the full ``Year`` field range,
    including zero and negative (astronomical) years.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        ChronoField.YEAR.check_valid_value(self.year)
        month = Month.of(self.month)
        object.__setattr__(self, "month", int(month))
        ChronoField.DAY_OF_MONTH.check_valid_value(self.day)
        if self.day > month.length(_calendar.is_leap(self.year)):
            if self.day == 29:
                message = f"Invalid date 'February 29' as '{self.year}' is not a leap year"
            else:
                message = f"Invalid date '{month.name} {self.day}'"
            raise FieldRangeError(message, field=ChronoField.DAY_OF_MONTH, value=self.day)

    # -- factories ---------------------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: Month | int, day: int) -> LocalDate:
        return cls(year, month, day)

    @classmethod
    def from_date(cls, value: date) -> LocalDate:
        return cls(value.year, value.month, value.day)

    @classmethod
    def from_epoch_day(cls, epoch_day: int) -> LocalDate:
        ChronoField.EPOCH_DAY.check_valid_value(epoch_day)
        return cls(*_calendar.from_epoch_day(epoch_day))

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> LocalDate:
        if isinstance(temporal, LocalDate):
            return temporal
        result = temporal.query(TemporalQueries.LOCAL_DATE)
        if result is None:
            raise CalendarConversionError(
                f"Unable to obtain LocalDate from temporal of type {type(temporal).__name__}"
            )
        return result

    @classmethod
    def parse(cls, text: str, formatter: DateFormatter | None = None) -> LocalDate:
        """Parse ``yyyy-MM-dd`` (or the layout of ``formatter``)."""
        return (formatter or ISO_LOCAL_DATE_FORMATTER).parse_to(text, cls._from_fields)

    @classmethod
    def _from_fields(cls, values: Mapping[ChronoField, int]) -> LocalDate:
        return cls(
            values[ChronoField.YEAR],
            values[ChronoField.MONTH_OF_YEAR],
            values[ChronoField.DAY_OF_MONTH],
        )

    @classmethod
    def now(cls, *, clock: Clock | None = None, zone: tzinfo | None = None) -> LocalDate:
        """Current date from ``clock``, or from the system clock in ``zone``."""
        resolved_clock = clock or system_clock(zone)
        return cls.from_date(resolved_clock())

    # -- derived values ----------------------------------------------------------------

    @property
    def month_enum(self) -> Month:
        return Month(self.month)

    @property
    def is_leap_year(self) -> bool:
        return _calendar.is_leap(self.year)

    @property
    def length_of_month(self) -> int:
        return self.month_enum.length(self.is_leap_year)

    @property
    def length_of_year(self) -> int:
        return 366 if self.is_leap_year else 365

    @property
    def day_of_year(self) -> int:
        return self.month_enum.first_day_of_year(self.is_leap_year) + self.day - 1

    @property
    def day_of_week(self) -> int:
        return _calendar.day_of_week(self.to_epoch_day())

    def to_epoch_day(self) -> int:
        return _calendar.to_epoch_day(self.year, self.month, self.day)

    def to_date(self) -> date:
        """Convert to :class:`datetime.date`; only years 1-9999 are representable."""
        return date(self.year, self.month, self.day)

    # -- field protocol ----------------------------------------------------------------

    def is_supported(self, field: ChronoField) -> bool:
        return field.is_supported_by(TemporalKind.LOCAL_DATE)

    def range(self, field: ChronoField) -> ValueRange:
        if field is ChronoField.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month)
        if field is ChronoField.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year)
        if field is ChronoField.ALIGNED_WEEK_OF_MONTH:
            short_february = self.month == Month.FEBRUARY and not self.is_leap_year
            return ValueRange.of(1, 4 if short_february else 5)
        return TemporalAccessorMixin.range(self, field)

    def get_raw(self, field: ChronoField) -> int:
        match field:
            case ChronoField.DAY_OF_WEEK:
                return self.day_of_week
            case ChronoField.DAY_OF_MONTH:
                return self.day
            case ChronoField.DAY_OF_YEAR:
                return self.day_of_year
            case ChronoField.ALIGNED_WEEK_OF_MONTH:
                return (self.day - 1) // 7 + 1
            case ChronoField.MONTH_OF_YEAR:
                return self.month
            case ChronoField.QUARTER_OF_YEAR:
                return (self.month - 1) // 3 + 1
            case ChronoField.YEAR:
                return self.year
            case ChronoField.EPOCH_DAY:
                return self.to_epoch_day()
        raise UnsupportedFieldError(field)

    def with_field(self, field: ChronoField, value: int) -> LocalDate:
        field.check_valid_value(value)
        match field:
            case ChronoField.DAY_OF_WEEK:
                return self.plus_days(value - self.day_of_week)
            case ChronoField.DAY_OF_MONTH:
                return self.with_day_of_month(value)
            case ChronoField.DAY_OF_YEAR:
                return self.with_day_of_year(value)
            case ChronoField.ALIGNED_WEEK_OF_MONTH:
                return self.plus_days((value - self.get_raw(field)) * 7)
            case ChronoField.MONTH_OF_YEAR:
                return self.with_month(value)
            case ChronoField.QUARTER_OF_YEAR:
                return self.plus_months((value - self.get_raw(field)) * 3)
            case ChronoField.YEAR:
                return self.with_year(value)
            case ChronoField.EPOCH_DAY:
                return LocalDate.from_epoch_day(value)
        raise UnsupportedFieldError(field)

    def with_adjuster(self, adjuster: TemporalAdjuster) -> LocalDate:
        return adjuster.adjust_into(self)

    # -- copies ------------------------------------------------------------------------

    def _resolve_previous_valid(self, year: int, month: int, day: int) -> LocalDate:
        length = Month(month).length(_calendar.is_leap(year))
        return LocalDate(year, month, min(day, length))

    def with_year(self, year: int) -> LocalDate:
        """Copy with the year changed; Feb 29 becomes Feb 28 in a non-leap year."""
        if year == self.year:
            return self
        ChronoField.YEAR.check_valid_value(year)
        return self._resolve_previous_valid(year, self.month, self.day)

    def with_month(self, month: Month | int) -> LocalDate:
        """Copy with the month changed, clamping the day to the new month length."""
        resolved = Month.of(month)
        if resolved == self.month:
            return self
        return self._resolve_previous_valid(self.year, int(resolved), self.day)

    def with_day_of_month(self, day: int) -> LocalDate:
        if day == self.day:
            return self
        return LocalDate(self.year, self.month, day)

    def with_day_of_year(self, day_of_year: int) -> LocalDate:
        ChronoField.DAY_OF_YEAR.check_valid_value(day_of_year)
        if day_of_year > self.length_of_year:
            raise FieldRangeError(
                f"Invalid date 'DayOfYear 366' as '{self.year}' is not a leap year",
                field=ChronoField.DAY_OF_YEAR,
                value=day_of_year,
            )
        first_of_year = _calendar.to_epoch_day(self.year, 1, 1)
        return LocalDate.from_epoch_day(first_of_year + day_of_year - 1)

    def plus_days(self, days: int) -> LocalDate:
        if days == 0:
            return self
        return LocalDate.from_epoch_day(self.to_epoch_day() + days)

    def plus_months(self, months: int) -> LocalDate:
        if months == 0:
            return self
        month_count = self.year * 12 + (self.month - 1) + months
        year, month_index = divmod(month_count, 12)
        ChronoField.YEAR.check_valid_value(year)
        return self._resolve_previous_valid(year, month_index + 1, self.day)

    # -- queries and adjustment --------------------------------------------------------

    def query(self, query: TemporalQuery[Any]) -> Any:
        if query is TemporalQueries.CALENDAR_SYSTEM:
            return ISO
        if query is TemporalQueries.LOCAL_DATE:
            return self
        return query.query_from(self)

    def adjust_into[T: Temporal](self, temporal: T) -> T:
        if not calendar_system_of(temporal).is_iso:
            raise CalendarConversionError("Adjustment only supported on ISO date-time")
        return temporal.with_field(ChronoField.EPOCH_DAY, self.to_epoch_day())

    def format(self, formatter: DateFormatter) -> str:
        return formatter.format(self)

    def __str__(self) -> str:
        return ISO_LOCAL_DATE_FORMATTER.format(self)


__all__ = ["LocalDate"]
