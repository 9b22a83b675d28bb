"""Capability protocols shared by every date-like value.

``TemporalAccessor`` is the read side (fields, ranges, queries), ``Temporal``
adds copy-with-one-field-replaced, ``TemporalAdjuster`` pushes a value's
fields onto another temporal and ``TemporalQuery`` extracts a derived
property. Queries and adjusters dispatch in both directions: a value may
answer a query itself (e.g. its calendar system) before falling back to
``query.query_from(value)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Self, runtime_checkable

from calendrical.domain.errors import UnsupportedFieldError
from calendrical.domain.fields import ChronoField

if TYPE_CHECKING:
    from calendrical.domain.chronology import CalendarSystem
    from calendrical.domain.local_date import LocalDate
    from calendrical.domain.value_range import ValueRange


@runtime_checkable
class TemporalAccessor(Protocol):
    """Read-only access to the fields of a date-like value."""

    def is_supported(self, field: ChronoField) -> bool: ...

    def range(self, field: ChronoField) -> ValueRange: ...

    def get(self, field: ChronoField) -> int: ...

    def get_raw(self, field: ChronoField) -> int: ...

    def query[R](self, query: TemporalQuery[R]) -> R: ...


@runtime_checkable
class Temporal(TemporalAccessor, Protocol):
    """A temporal that can produce a copy with one field replaced."""

    def with_field(self, field: ChronoField, value: int) -> Self: ...


@runtime_checkable
class TemporalAdjuster(Protocol):
    def adjust_into[T: Temporal](self, temporal: T) -> T: ...


class TemporalQuery[R](Protocol):
    def query_from(self, temporal: TemporalAccessor) -> R: ...


class _CalendarSystemQuery:
    """Answered by the temporal itself; anything that stays silent has none."""

    def query_from(self, temporal: TemporalAccessor) -> CalendarSystem | None:
        _ = temporal
        return None

    def __repr__(self) -> str:
        return "TemporalQueries.CALENDAR_SYSTEM"


class _LocalDateQuery:
    def query_from(self, temporal: TemporalAccessor) -> LocalDate | None:
        if not temporal.is_supported(ChronoField.EPOCH_DAY):
            return None
        from calendrical.domain.local_date import LocalDate  # noqa: PLC0415 # circular import

        return LocalDate.from_epoch_day(temporal.get_raw(ChronoField.EPOCH_DAY))

    def __repr__(self) -> str:
        return "TemporalQueries.LOCAL_DATE"


class TemporalQueries:
    """Well-known queries; compared by identity in ``query`` implementations."""

    CALENDAR_SYSTEM: TemporalQuery[CalendarSystem | None] = _CalendarSystemQuery()
    LOCAL_DATE: TemporalQuery[LocalDate | None] = _LocalDateQuery()


class TemporalAccessorMixin:
    """Default ``range``/``get``/``query`` in terms of ``is_supported``/``get_raw``."""

    __slots__ = ()

    def is_supported(self, field: ChronoField) -> bool:
        raise NotImplementedError

    def get_raw(self, field: ChronoField) -> int:
        raise NotImplementedError

    def range(self, field: ChronoField) -> ValueRange:
        if self.is_supported(field):
            return field.range()
        raise UnsupportedFieldError(field)

    def get(self, field: ChronoField) -> int:
        return self.range(field).check_valid_int_value(self.get_raw(field), field)

    def query(self, query: TemporalQuery[Any]) -> Any:
        return query.query_from(self)  # type: ignore[arg-type]


__all__ = [
    "Temporal",
    "TemporalAccessor",
    "TemporalAccessorMixin",
    "TemporalAdjuster",
    "TemporalQueries",
    "TemporalQuery",
]
