"""A field paired with a raw value that may or may not be valid yet."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING

from calendrical.domain.fields import ChronoField

if TYPE_CHECKING:
    from calendrical.domain.temporal import TemporalAccessor


@total_ordering
@dataclass(frozen=True, slots=True)
class FieldValue:
    """Pairing of a field and its value.

    The value is not validated on construction so that intermediate results
    can be represented while fields are being combined; call
    :meth:`valid_value` once a checked value is needed.
    """

    field: ChronoField
    value: int

    @classmethod
    def of(cls, field: ChronoField, value: int) -> FieldValue:
        return cls(field, value)

    def with_field(self, field: ChronoField) -> FieldValue:
        if field is self.field:
            return self
        return FieldValue(field, self.value)

    def with_value(self, value: int) -> FieldValue:
        if value == self.value:
            return self
        return FieldValue(self.field, value)

    def is_valid_value(self) -> bool:
        return self.field.range().contains(self.value)

    def valid_value(self) -> int:
        return self.field.check_valid_value(self.value)

    def is_valid_int_value(self) -> bool:
        return self.field.range().is_valid_int_value(self.value)

    def valid_int_value(self) -> int:
        return self.field.check_valid_int_value(self.value)

    def matches(self, temporal: TemporalAccessor) -> bool:
        """Whether ``temporal`` supports the field and holds exactly this value."""
        if not temporal.is_supported(self.field):
            return False
        return temporal.get_raw(self.field) == self.value

    def _sort_key(self) -> tuple[int, int, int]:
        base_unit, range_unit = self.field.definition.sort_key
        return (base_unit, range_unit, self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FieldValue):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return f"{self.field.display_name} {self.value}"


__all__ = ["FieldValue"]
