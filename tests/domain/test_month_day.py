from __future__ import annotations

import itertools
from datetime import date

import pytest

from calendrical.domain import (
    ISO,
    ChronoField,
    DateFormatter,
    DateParseError,
    FieldRangeError,
    LocalDate,
    Month,
    MonthDay,
    TemporalQueries,
    UnsupportedFieldError,
    ValueRange,
    YearResolution,
    fixed_clock,
)

ALL_VALID = [
    (month, day) for month in Month for day in range(1, month.max_length() + 1)
]


# -- construction ----------------------------------------------------------------------


def test_of_accepts_every_valid_pair() -> None:
    for month, day in ALL_VALID:
        value = MonthDay.of(month, day)
        assert value.month == month
        assert value.day_of_month == day
        assert value.month_enum is month


def test_of_accepts_month_numbers() -> None:
    assert MonthDay.of(12, 3) == MonthDay.of(Month.DECEMBER, 3)
    assert repr(MonthDay.of(Month.DECEMBER, 3)) == "MonthDay(month=12, day=3)"


@pytest.mark.parametrize("month", [month for month in Month if month.max_length() < 31])
def test_of_rejects_day_past_month_maximum(month: Month) -> None:
    with pytest.raises(FieldRangeError, match=f"not valid for month {month.name}") as exc:
        MonthDay.of(month, month.max_length() + 1)

    assert exc.value.field is ChronoField.DAY_OF_MONTH


@pytest.mark.parametrize("day", [0, 32, -1])
def test_of_rejects_day_outside_intrinsic_range(day: int) -> None:
    with pytest.raises(FieldRangeError, match="DayOfMonth"):
        MonthDay.of(1, day)


@pytest.mark.parametrize("month", [0, 13])
def test_of_rejects_invalid_month_number(month: int) -> None:
    with pytest.raises(FieldRangeError) as exc:
        MonthDay.of(month, 1)

    assert exc.value.field is ChronoField.MONTH_OF_YEAR


@pytest.mark.parametrize("month", ["12", 12.9])
def test_of_and_constructor_reject_non_integer_month(month: object) -> None:
    with pytest.raises(TypeError):
        MonthDay.of(month, 3)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        MonthDay(month, 3)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        MonthDay.of(1, 3).with_month(month)  # type: ignore[arg-type]


def test_constructor_validates_like_of() -> None:
    with pytest.raises(FieldRangeError):
        MonthDay(4, 31)


def test_leap_day_is_provisionally_valid() -> None:
    leap_day = MonthDay.of(2, 29)

    assert leap_day.is_valid_year(2000)
    assert leap_day.is_valid_year(2024)
    assert not leap_day.is_valid_year(2001)
    assert not leap_day.is_valid_year(1900)


def test_is_valid_year_for_ordinary_days() -> None:
    assert MonthDay.of(2, 28).is_valid_year(2001)
    assert MonthDay.of(3, 29).is_valid_year(2001)


# -- deferred year combination ---------------------------------------------------------


def test_at_year_substitutes_february_28() -> None:
    leap_day = MonthDay.of(2, 29)

    assert leap_day.at_year(2001) == LocalDate(2001, 2, 28)
    assert leap_day.at_year(2000) == LocalDate(2000, 2, 29)
    assert MonthDay.of(12, 3).at_year(2010) == LocalDate(2010, 12, 3)


def test_resolve_year_reports_invalid_combination() -> None:
    resolution = MonthDay.of(2, 29).resolve_year(2001)

    assert not resolution.ok
    assert resolution.date is None
    assert resolution.error is not None
    assert resolution.error.field is ChronoField.DAY_OF_MONTH
    with pytest.raises(FieldRangeError, match="not a leap year"):
        resolution.unwrap()


def test_resolve_year_returns_date_when_valid() -> None:
    resolution = MonthDay.of(2, 29).resolve_year(2004)

    assert resolution.ok
    assert resolution.unwrap() == LocalDate(2004, 2, 29)


def test_year_resolution_holds_exactly_one_outcome() -> None:
    leap_day = MonthDay.of(2, 29)
    error = leap_day.resolve_year(2001).error

    with pytest.raises(ValueError, match="exactly one"):
        YearResolution(leap_day, 2001)
    with pytest.raises(ValueError, match="exactly one"):
        YearResolution(leap_day, 2001, date=LocalDate(2001, 2, 28), error=error)


# -- copies ----------------------------------------------------------------------------


def test_with_month_clamps_day_down() -> None:
    assert MonthDay.of(1, 31).with_month(2) == MonthDay.of(2, 29)
    assert MonthDay.of(3, 31).with_month(Month.APRIL) == MonthDay.of(4, 30)
    assert MonthDay.of(2, 29).with_month(3) == MonthDay.of(3, 29)


def test_with_month_same_month_returns_self() -> None:
    value = MonthDay.of(6, 30)

    assert value.with_month(6) is value


def test_with_month_rejects_invalid_month() -> None:
    with pytest.raises(FieldRangeError):
        MonthDay.of(1, 1).with_month(13)


def test_with_day_of_month_validates_against_current_month() -> None:
    february = MonthDay.of(2, 1)

    assert february.with_day_of_month(29) == MonthDay.of(2, 29)
    with pytest.raises(FieldRangeError):
        february.with_day_of_month(30)
    with pytest.raises(FieldRangeError):
        MonthDay.of(1, 31).with_month(2).with_day_of_month(31)


def test_copies_leave_original_unchanged() -> None:
    original = MonthDay.of(1, 31)

    original.with_month(2)
    original.with_day_of_month(1)

    assert original == MonthDay.of(1, 31)


def test_with_field_dispatches_to_month_and_day() -> None:
    value = MonthDay.of(1, 31)

    assert value.with_field(ChronoField.MONTH_OF_YEAR, 4) == MonthDay.of(4, 30)
    assert value.with_field(ChronoField.DAY_OF_MONTH, 2) == MonthDay.of(1, 2)
    with pytest.raises(UnsupportedFieldError):
        value.with_field(ChronoField.YEAR, 2000)


# -- field protocol --------------------------------------------------------------------


def test_supported_fields() -> None:
    value = MonthDay.of(6, 30)

    assert value.is_supported(ChronoField.MONTH_OF_YEAR)
    assert value.is_supported(ChronoField.DAY_OF_MONTH)
    for field in (
        ChronoField.YEAR,
        ChronoField.DAY_OF_WEEK,
        ChronoField.DAY_OF_YEAR,
        ChronoField.ALIGNED_WEEK_OF_MONTH,
        ChronoField.QUARTER_OF_YEAR,
        ChronoField.EPOCH_DAY,
    ):
        assert not value.is_supported(field)


def test_range_depends_on_month() -> None:
    assert MonthDay.of(2, 1).range(ChronoField.DAY_OF_MONTH) == ValueRange.of(1, 28, 29)
    assert MonthDay.of(4, 1).range(ChronoField.DAY_OF_MONTH) == ValueRange.of(1, 30)
    assert MonthDay.of(4, 1).range(ChronoField.MONTH_OF_YEAR) == ValueRange.of(1, 12)


def test_get_returns_field_values() -> None:
    value = MonthDay.of(12, 3)

    assert value.get(ChronoField.MONTH_OF_YEAR) == 12
    assert value.get(ChronoField.DAY_OF_MONTH) == 3
    assert value.get_raw(ChronoField.DAY_OF_MONTH) == 3


@pytest.mark.parametrize("field", [ChronoField.YEAR, ChronoField.DAY_OF_WEEK])
def test_unsupported_fields_raise(field: ChronoField) -> None:
    value = MonthDay.of(12, 3)

    with pytest.raises(UnsupportedFieldError, match="Unsupported field"):
        value.get(field)
    with pytest.raises(UnsupportedFieldError):
        value.get_raw(field)
    with pytest.raises(UnsupportedFieldError):
        value.range(field)


# -- comparison ------------------------------------------------------------------------


def test_ordering_matches_month_then_day() -> None:
    values = [MonthDay.of(month, day) for month, day in ALL_VALID]

    for a, b in itertools.combinations(values, 2):
        assert a.compare_to(b) < 0
        assert b.compare_to(a) > 0
        assert a < b
        assert a.is_before(b)
        assert b.is_after(a)
        assert a != b


def test_equality_and_hash_are_consistent() -> None:
    values = [MonthDay.of(month, day) for month, day in ALL_VALID]

    assert len({hash(value) for value in values}) == len(values)
    for value in values:
        twin = MonthDay.of(value.month, value.day)
        assert value == twin
        assert value.compare_to(twin) == 0
        assert hash(value) == hash(twin) == (value.month << 6) + value.day


def test_sorting_ignores_insertion_order() -> None:
    unsorted = [MonthDay.of(12, 3), MonthDay.of(1, 31), MonthDay.of(2, 29), MonthDay.of(2, 1)]

    assert [str(value) for value in sorted(unsorted)] == [
        "--01-31",
        "--02-01",
        "--02-29",
        "--12-03",
    ]


def test_not_equal_to_other_types() -> None:
    assert MonthDay.of(6, 30) != "--06-30"
    assert MonthDay.of(6, 30) != LocalDate.of(2000, 6, 30)


# -- text ------------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("month", "day", "text"),
    [(1, 1, "--01-01"), (12, 3, "--12-03"), (2, 29, "--02-29"), (10, 31, "--10-31")],
)
def test_str_is_zero_padded(month: int, day: int, text: str) -> None:
    assert str(MonthDay.of(month, day)) == text


def test_parse_round_trip() -> None:
    assert str(MonthDay.parse("--12-03")) == "--12-03"
    assert MonthDay.parse("--02-29") == MonthDay.of(2, 29)


def test_parse_rejects_impossible_date() -> None:
    with pytest.raises(DateParseError, match="APRIL") as exc:
        MonthDay.parse("--04-31")

    assert isinstance(exc.value.__cause__, FieldRangeError)
    assert exc.value.error_index == 0


@pytest.mark.parametrize(
    ("text", "index"),
    [("12-03", 0), ("--1-03", 2), ("--12/03", 4), ("--12-03x", 7), ("--12-3", 5)],
)
def test_parse_reports_failing_offset(text: str, index: int) -> None:
    with pytest.raises(DateParseError) as exc:
        MonthDay.parse(text)

    assert exc.value.error_index == index
    assert exc.value.text == text


def test_parse_and_format_with_custom_formatter() -> None:
    formatter = DateFormatter.of_pattern("dd/MM")

    value = MonthDay.parse("03/12", formatter)

    assert value == MonthDay.of(12, 3)
    assert value.format(formatter) == "03/12"


# -- factories from other sources -----------------------------------------------------


def test_now_reads_clock() -> None:
    assert MonthDay.now(clock=fixed_clock(date(2024, 2, 29))) == MonthDay.of(2, 29)


def test_from_temporal_with_local_date() -> None:
    assert MonthDay.from_temporal(LocalDate.of(2012, 6, 30)) == MonthDay.of(6, 30)


def test_from_temporal_returns_month_day_unchanged() -> None:
    value = MonthDay.of(6, 30)

    assert MonthDay.from_temporal(value) is value


# -- queries ---------------------------------------------------------------------------


def test_calendar_system_query_is_iso() -> None:
    assert MonthDay.of(6, 30).query(TemporalQueries.CALENDAR_SYSTEM) is ISO


def test_local_date_query_has_no_answer() -> None:
    assert MonthDay.of(6, 30).query(TemporalQueries.LOCAL_DATE) is None


# -- serialization hooks ---------------------------------------------------------------


def test_serialize_fields_and_deserialize() -> None:
    value = MonthDay.of(12, 3)

    assert value.serialize_fields() == (12, 3)
    assert MonthDay.deserialize(*value.serialize_fields()) == value
    assert value.__composite_values__() == (12, 3)


def test_deserialize_revalidates() -> None:
    with pytest.raises(FieldRangeError):
        MonthDay.deserialize(4, 31)
    with pytest.raises(FieldRangeError):
        MonthDay.deserialize(0, 1)
