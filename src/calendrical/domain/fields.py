"""Registry of the named temporal fields.

The registry is built once at import and exposed read-only; field identity is
the ``ChronoField`` member, and everything else about a field (display name,
units, intrinsic range, which composite types support it) is looked up from
the table.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from calendrical.domain.value_range import ValueRange

if TYPE_CHECKING:
    from collections.abc import Mapping


class ChronoUnit(IntEnum):
    """Units ordered by their estimated duration."""

    DAYS = 1
    WEEKS = 2
    MONTHS = 3
    QUARTERS = 4
    YEARS = 5
    FOREVER = 6


class TemporalKind(StrEnum):
    """Composite temporal types that declare field support in the registry."""

    LOCAL_DATE = "local_date"
    MONTH_DAY = "month_day"


class ChronoField(StrEnum):
    DAY_OF_WEEK = "day_of_week"
    DAY_OF_MONTH = "day_of_month"
    DAY_OF_YEAR = "day_of_year"
    ALIGNED_WEEK_OF_MONTH = "aligned_week_of_month"
    MONTH_OF_YEAR = "month_of_year"
    QUARTER_OF_YEAR = "quarter_of_year"
    YEAR = "year"
    EPOCH_DAY = "epoch_day"

    @property
    def definition(self) -> FieldDefinition:
        return definition(self)

    @property
    def display_name(self) -> str:
        return definition(self).display_name

    def range(self) -> ValueRange:
        """Intrinsic range of the field, independent of any other field."""
        return definition(self).range

    def check_valid_value(self, value: int) -> int:
        return self.range().check_valid(value, self)

    def check_valid_int_value(self, value: int) -> int:
        return self.range().check_valid_int_value(value, self)

    def is_supported_by(self, kind: TemporalKind) -> bool:
        return kind in definition(self).supported_by


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    field: ChronoField
    display_name: str
    base_unit: ChronoUnit
    range_unit: ChronoUnit
    range: ValueRange
    supported_by: frozenset[TemporalKind]

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.base_unit, self.range_unit)


_ALL_KINDS = frozenset(TemporalKind)
_DATE_ONLY = frozenset({TemporalKind.LOCAL_DATE})

_YEAR_LIMIT: Final[int] = 999_999_999
_EPOCH_DAY_LIMIT: Final[int] = int(_YEAR_LIMIT * 365.25)


def _build_registry() -> Mapping[ChronoField, FieldDefinition]:
    entries = (
        FieldDefinition(
            ChronoField.DAY_OF_WEEK,
            "DayOfWeek",
            ChronoUnit.DAYS,
            ChronoUnit.WEEKS,
            ValueRange.of(1, 7),
            _DATE_ONLY,
        ),
        FieldDefinition(
            ChronoField.DAY_OF_MONTH,
            "DayOfMonth",
            ChronoUnit.DAYS,
            ChronoUnit.MONTHS,
            ValueRange.of(1, 28, 31),
            _ALL_KINDS,
        ),
        FieldDefinition(
            ChronoField.DAY_OF_YEAR,
            "DayOfYear",
            ChronoUnit.DAYS,
            ChronoUnit.YEARS,
            ValueRange.of(1, 365, 366),
            _DATE_ONLY,
        ),
        # week and quarter fields cannot be set consistently without a year
        FieldDefinition(
            ChronoField.ALIGNED_WEEK_OF_MONTH,
            "AlignedWeekOfMonth",
            ChronoUnit.WEEKS,
            ChronoUnit.MONTHS,
            ValueRange.of(1, 4, 5),
            _DATE_ONLY,
        ),
        FieldDefinition(
            ChronoField.MONTH_OF_YEAR,
            "MonthOfYear",
            ChronoUnit.MONTHS,
            ChronoUnit.YEARS,
            ValueRange.of(1, 12),
            _ALL_KINDS,
        ),
        FieldDefinition(
            ChronoField.QUARTER_OF_YEAR,
            "QuarterOfYear",
            ChronoUnit.QUARTERS,
            ChronoUnit.YEARS,
            ValueRange.of(1, 4),
            _DATE_ONLY,
        ),
        FieldDefinition(
            ChronoField.YEAR,
            "Year",
            ChronoUnit.YEARS,
            ChronoUnit.FOREVER,
            ValueRange.of(-_YEAR_LIMIT, _YEAR_LIMIT),
            _DATE_ONLY,
        ),
        FieldDefinition(
            ChronoField.EPOCH_DAY,
            "EpochDay",
            ChronoUnit.DAYS,
            ChronoUnit.FOREVER,
            ValueRange.of(-_EPOCH_DAY_LIMIT, _EPOCH_DAY_LIMIT),
            _DATE_ONLY,
        ),
    )
    return MappingProxyType({entry.field: entry for entry in entries})


FIELD_REGISTRY: Final[Mapping[ChronoField, FieldDefinition]] = _build_registry()


def definition(field: ChronoField) -> FieldDefinition:
    return FIELD_REGISTRY[field]


def fields_supported_by(kind: TemporalKind) -> frozenset[ChronoField]:
    return frozenset(field for field, entry in FIELD_REGISTRY.items() if kind in entry.supported_by)


__all__ = [
    "FIELD_REGISTRY",
    "ChronoField",
    "ChronoUnit",
    "FieldDefinition",
    "TemporalKind",
    "definition",
    "fields_supported_by",
]
