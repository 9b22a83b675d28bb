"""Public domain surface: fields, ranges, temporal protocols and date values."""

from __future__ import annotations

from calendrical.domain.chronology import ISO, CalendarSystem, calendar_system_of
from calendrical.domain.clock import Clock, fixed_clock, system_clock
from calendrical.domain.errors import (
    CalendarConversionError,
    CalendricalError,
    DateParseError,
    FieldOverflowError,
    FieldRangeError,
    UnsupportedFieldError,
)
from calendrical.domain.field_value import FieldValue
from calendrical.domain.fields import (
    FIELD_REGISTRY,
    ChronoField,
    ChronoUnit,
    FieldDefinition,
    TemporalKind,
    definition,
    fields_supported_by,
)
from calendrical.domain.formatting import (
    ISO_LOCAL_DATE_FORMATTER,
    MONTH_DAY_FORMATTER,
    DateFormatter,
)
from calendrical.domain.local_date import LocalDate
from calendrical.domain.month_day import MonthDay, YearResolution
from calendrical.domain.months import Month, is_leap
from calendrical.domain.temporal import (
    Temporal,
    TemporalAccessor,
    TemporalAccessorMixin,
    TemporalAdjuster,
    TemporalQueries,
    TemporalQuery,
)
from calendrical.domain.value_range import ValueRange

__all__ = [  # noqa: RUF022
    # fields
    "FIELD_REGISTRY",
    "ChronoField",
    "ChronoUnit",
    "FieldDefinition",
    "TemporalKind",
    "definition",
    "fields_supported_by",
    "FieldValue",
    "ValueRange",
    # protocols
    "Temporal",
    "TemporalAccessor",
    "TemporalAccessorMixin",
    "TemporalAdjuster",
    "TemporalQueries",
    "TemporalQuery",
    # calendar
    "ISO",
    "CalendarSystem",
    "calendar_system_of",
    "Month",
    "is_leap",
    "Clock",
    "fixed_clock",
    "system_clock",
    # values
    "LocalDate",
    "MonthDay",
    "YearResolution",
    # text
    "DateFormatter",
    "ISO_LOCAL_DATE_FORMATTER",
    "MONTH_DAY_FORMATTER",
    # errors
    "CalendarConversionError",
    "CalendricalError",
    "DateParseError",
    "FieldOverflowError",
    "FieldRangeError",
    "UnsupportedFieldError",
]
