"""Pattern-based formatting and parsing of date fields.

Patterns use ``yyyy`` (year), ``MM``/``M`` (month-of-year) and ``dd``/``d``
(day-of-month); doubled letters are fixed two-digit fields, single letters
accept one or two digits. A variable-width number directly followed by
fixed-width numbers (``yyyyMMdd``) leaves their digits to them when parsing.
Years wider than four digits print with a leading ``+``. Any other non-letter
character is literal text, and letters can be quoted with ``'...'`` (``''`` is
a literal quote).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from calendrical.domain.errors import CalendricalError, DateParseError
from calendrical.domain.fields import ChronoField

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from calendrical.domain.temporal import TemporalAccessor

log = logging.getLogger(__name__)

_LETTER_FIELDS: Final[dict[str, ChronoField]] = {
    "y": ChronoField.YEAR,
    "M": ChronoField.MONTH_OF_YEAR,
    "d": ChronoField.DAY_OF_MONTH,
}


@dataclass(frozen=True, slots=True)
class _Literal:
    text: str


@dataclass(frozen=True, slots=True)
class _Number:
    field: ChronoField
    min_width: int
    max_width: int
    signed: bool = False


type _Element = _Literal | _Number


def _number_for(letter: str, count: int) -> _Number:
    field = _LETTER_FIELDS[letter]
    if field is ChronoField.YEAR:
        if count != 4:
            raise ValueError("Year must be written as 'yyyy'")
        return _Number(field, 4, 10, signed=True)
    if count == 1:
        return _Number(field, 1, 2)
    if count == 2:
        return _Number(field, 2, 2)
    raise ValueError(f"Too many pattern letters: {letter * count}")


def _compile(pattern: str) -> tuple[_Element, ...]:
    elements: list[_Element] = []
    literal: list[str] = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "'":
            end = index + 1
            while True:
                end = pattern.find("'", end)
                if end < 0:
                    raise ValueError(f"Pattern ends with an incomplete string literal: {pattern}")
                if pattern.startswith("''", end):
                    end += 2
                    continue
                break
            quoted = pattern[index + 1 : end]
            literal.append(quoted.replace("''", "'") if quoted else "'")
            index = end + 1
        elif char.isascii() and char.isalpha():
            if char not in _LETTER_FIELDS:
                raise ValueError(f"Unknown pattern letter: {char}")
            count = 1
            while index + count < len(pattern) and pattern[index + count] == char:
                count += 1
            if literal:
                elements.append(_Literal("".join(literal)))
                literal = []
            elements.append(_number_for(char, count))
            index += count
        else:
            literal.append(char)
            index += 1
    if literal:
        elements.append(_Literal("".join(literal)))
    return tuple(elements)


def _adjacent_widths(elements: tuple[_Element, ...]) -> tuple[int, ...]:
    """Total width of the fixed-width numbers directly after each element."""
    widths: list[int] = []
    following = 0
    for element in reversed(elements):
        widths.append(following)
        if isinstance(element, _Number) and element.min_width == element.max_width:
            following += element.min_width
        else:
            following = 0
    return tuple(reversed(widths))


def _parse_failure(text: str, index: int, reason: str | None = None) -> DateParseError:
    message = f"Text '{text}' could not be parsed at index {index}"
    if reason:
        message = f"{message}: {reason}"
    log.debug("Parse failure for %r at index %d", text, index)
    return DateParseError(message, text=text, error_index=index)


@dataclass(frozen=True, slots=True)
class DateFormatter:
    """Bidirectional codec between field values and text for one compiled pattern."""

    pattern: str
    _elements: tuple[_Element, ...]

    @classmethod
    def of_pattern(cls, pattern: str) -> DateFormatter:
        return cls(pattern, _compile(pattern))

    @property
    def fields(self) -> tuple[ChronoField, ...]:
        return tuple(element.field for element in self._elements if isinstance(element, _Number))

    # -- parsing -----------------------------------------------------------------------

    def parse(self, text: str) -> dict[ChronoField, int]:
        """Parse ``text`` into raw field values; ranges are not checked here."""
        values: dict[ChronoField, int] = {}
        reserves = _adjacent_widths(self._elements)
        position = 0
        for element, reserve in zip(self._elements, reserves, strict=True):
            if isinstance(element, _Literal):
                if not text.startswith(element.text, position):
                    raise _parse_failure(text, position)
                position += len(element.text)
                continue
            start = position
            negative = False
            if element.signed and position < len(text) and text[position] in "+-":
                negative = text[position] == "-"
                position += 1
            digits_start = position
            digits_end = digits_start
            while (
                digits_end < len(text)
                and text[digits_end].isascii()
                and text[digits_end].isdigit()
            ):
                digits_end += 1
            # leave the digits of directly following fixed-width fields to them
            width = min(element.max_width, digits_end - digits_start - reserve)
            if width < element.min_width:
                raise _parse_failure(text, start)
            position = digits_start + width
            value = int(text[digits_start:position])
            values[element.field] = -value if negative else value
        if position != len(text):
            raise _parse_failure(text, position, "Unparsed text found")
        return values

    def parse_to[T](self, text: str, factory: Callable[[Mapping[ChronoField, int]], T]) -> T:
        """Parse and resolve through ``factory``; resolution errors become parse errors."""
        values = self.parse(text)
        try:
            return factory(values)
        except DateParseError:
            raise
        except (CalendricalError, KeyError) as exc:
            reason = str(exc) if isinstance(exc, CalendricalError) else f"Missing field {exc}"
            raise _parse_failure(text, 0, reason) from exc

    def parse_month_day(self, text: str) -> tuple[int, int]:
        """Parse ``text`` into a ``(month, day)`` pair of raw values."""

        def _pair(values: Mapping[ChronoField, int]) -> tuple[int, int]:
            return values[ChronoField.MONTH_OF_YEAR], values[ChronoField.DAY_OF_MONTH]

        return self.parse_to(text, _pair)

    # -- formatting --------------------------------------------------------------------

    def format(self, temporal: TemporalAccessor) -> str:
        return self._format_values(temporal.get)

    def format_month_day(self, month: int, day: int) -> str:
        values = {ChronoField.MONTH_OF_YEAR: month, ChronoField.DAY_OF_MONTH: day}
        return self._format_values(values.__getitem__)

    def _format_values(self, lookup: Callable[[ChronoField], int]) -> str:
        parts: list[str] = []
        for element in self._elements:
            if isinstance(element, _Literal):
                parts.append(element.text)
                continue
            value = lookup(element.field)
            digits = str(abs(value)).zfill(element.min_width)
            if len(digits) > element.max_width:
                raise ValueError(
                    f"Field {element.field.display_name} cannot be printed as the value {value} "
                    f"exceeds the maximum print width of {element.max_width}"
                )
            if value < 0:
                digits = f"-{digits}"
            elif element.signed and len(digits) > element.min_width:
                digits = f"+{digits}"
            parts.append(digits)
        return "".join(parts)

    def __str__(self) -> str:
        return self.pattern


MONTH_DAY_FORMATTER: Final[DateFormatter] = DateFormatter.of_pattern("--MM-dd")
ISO_LOCAL_DATE_FORMATTER: Final[DateFormatter] = DateFormatter.of_pattern("yyyy-MM-dd")


__all__ = ["ISO_LOCAL_DATE_FORMATTER", "MONTH_DAY_FORMATTER", "DateFormatter"]
