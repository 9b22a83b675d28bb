"""Pydantic models describing JSON payloads for date values.

Payloads accept either the structured form (``{"month": 12, "day": 3}``) or
the canonical text (``"--12-03"``); conversion to domain values re-validates
through the domain factories.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from calendrical.domain import LocalDate, MonthDay


class CalendricalBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


def _text_to_mapping(value: object, value_type: type[MonthDay] | type[LocalDate]) -> object:
    if isinstance(value, str):
        parsed = value_type.parse(value.strip())
        if isinstance(parsed, MonthDay):
            return {"month": parsed.month, "day": parsed.day}
        return {"year": parsed.year, "month": parsed.month, "day": parsed.day}
    return value


class MonthDayPayload(CalendricalBaseModel):
    type: Literal["month_day"] = "month_day"
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @model_validator(mode="before")
    @classmethod
    def _accept_text(cls, value: object) -> object:
        return _text_to_mapping(value, MonthDay)

    @model_validator(mode="after")
    def _check_combination(self) -> Self:
        MonthDay.of(self.month, self.day)
        return self

    @classmethod
    def from_domain(cls, value: MonthDay) -> MonthDayPayload:
        return cls(month=value.month, day=value.day)

    def to_domain(self) -> MonthDay:
        return MonthDay.of(self.month, self.day)


class LocalDatePayload(CalendricalBaseModel):
    type: Literal["local_date"] = "local_date"
    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @model_validator(mode="before")
    @classmethod
    def _accept_text(cls, value: object) -> object:
        return _text_to_mapping(value, LocalDate)

    @model_validator(mode="after")
    def _check_combination(self) -> Self:
        LocalDate.of(self.year, self.month, self.day)
        return self

    @classmethod
    def from_domain(cls, value: LocalDate) -> LocalDatePayload:
        return cls(year=value.year, month=value.month, day=value.day)

    def to_domain(self) -> LocalDate:
        return LocalDate.of(self.year, self.month, self.day)


def payload_for(data: Mapping[str, object] | str) -> MonthDayPayload | LocalDatePayload:
    """Pick the payload model from the ``type`` key, then the ``year`` key or text layout."""
    if isinstance(data, str):
        if data.strip().startswith("--"):
            return MonthDayPayload.model_validate(data)
        return LocalDatePayload.model_validate(data)
    kind = data.get("type")
    if kind == "local_date" or (kind is None and "year" in data):
        return LocalDatePayload.model_validate(data)
    return MonthDayPayload.model_validate(data)


__all__ = ["CalendricalBaseModel", "LocalDatePayload", "MonthDayPayload", "payload_for"]
