import dataclasses

import pytest

from calendar_converter.api.models import CalendarDate, CalendarSystem


def test_calendar_date_is_immutable():
    date = CalendarDate(1, 1, 2022, True, CalendarSystem.GREGORIAN)
    with pytest.raises(dataclasses.FrozenInstanceError):
        date.day = 2  # type: ignore[misc]


def test_flag_constructors_zero_the_fields():
    invalid = CalendarDate.invalid(CalendarSystem.HEBREW)
    assert (invalid.day, invalid.month, invalid.year) == (0, 0, 0)
    assert not invalid.is_valid and invalid.is_not_overflow
    overflowed = CalendarDate.overflowed(CalendarSystem.JULIAN)
    assert overflowed.is_valid and not overflowed.is_not_overflow
    assert not overflowed.is_usable


def test_isoformat_handles_bc_years():
    assert CalendarDate(5, 3, 2022, True, CalendarSystem.GREGORIAN).isoformat() == "2022-03-05"
    assert CalendarDate(15, 3, -43, False, CalendarSystem.JULIAN).isoformat("/") == "-0043/03/15"


def test_civil_year_and_month_name_index():
    ides = CalendarDate(15, 3, -43, False, CalendarSystem.JULIAN)
    assert ides.civil_year == 44
    assert ides.month_name_index == 3
    adar_i = CalendarDate(1, 6, 5784, True, CalendarSystem.HEBREW)
    assert adar_i.civil_year == 5784
    assert adar_i.month_name_index == 13


def test_as_dict():
    payload = CalendarDate(1, 7, 5784, True, CalendarSystem.HEBREW).as_dict()
    assert payload == {
        "day": 1,
        "month": 7,
        "year": 5784,
        "era": True,
        "calendar_system": "hebrew",
        "is_valid": True,
        "is_not_overflow": True,
        "civil_year": 5784,
        "month_name_index": 14,
    }


@pytest.mark.parametrize(
    "year,era,calendar_system",
    [
        (2022, False, CalendarSystem.GREGORIAN),
        (0, True, CalendarSystem.JULIAN),
        (-43, True, CalendarSystem.JULIAN),
    ],
)
def test_era_must_match_astronomical_year(year, era, calendar_system):
    with pytest.raises(ValueError):
        CalendarDate(1, 1, year, era, calendar_system)


def test_hebrew_dates_ignore_era_flag():
    assert CalendarDate(1, 1, 5784, False, CalendarSystem.HEBREW).civil_year == 5784
