"""SQLAlchemy column types for calendrical values."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from sqlalchemy import Date, String, TypeDecorator
from sqlalchemy.orm import composite

from calendrical.domain import LocalDate, MonthDay

if TYPE_CHECKING:
    from sqlalchemy import Dialect
    from sqlalchemy.orm import Composite


class MonthDayType(TypeDecorator[MonthDay]):
    """Stores a month-day as its canonical ``--MM-DD`` text."""

    impl = String(7)
    cache_ok = True

    def process_bind_param(self, value: MonthDay | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return str(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> MonthDay | None:
        _ = dialect
        if value is None:
            return None
        return MonthDay.parse(value)


class LocalDateType(TypeDecorator[LocalDate]):
    """Stores a local date in a native ``DATE`` column (years 1-9999 only)."""

    impl = Date
    cache_ok = True

    def process_bind_param(self, value: LocalDate | None, dialect: Dialect) -> date | None:
        _ = dialect
        if value is None:
            return None
        return value.to_date()

    def process_result_value(self, value: date | None, dialect: Dialect) -> LocalDate | None:
        _ = dialect
        if value is None:
            return None
        return LocalDate.from_date(value)


def _month_day_or_none(month: int | None, day: int | None) -> MonthDay | None:
    if month is None and day is None:
        return None
    if month is None or day is None:
        raise ValueError(f"Incomplete month-day columns: month={month!r}, day={day!r}")
    return MonthDay.of(month, day)


def month_day_composite(month_column: Any, day_column: Any) -> Composite[MonthDay | None]:
    """Map two integer columns onto a ``MonthDay`` attribute.

    The attribute is ``None`` when both columns are NULL, and assigning ``None``
    clears both.
    """
    return composite(_month_day_or_none, month_column, day_column)


__all__ = ["LocalDateType", "MonthDayType", "month_day_composite"]
