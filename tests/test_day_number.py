import pytest

from calendar_converter.api.day_number import day_of_week, from_adn, to_adn
from calendar_converter.api.hebrew import new_year_adn
from calendar_converter.api.models import CalendarDate, CalendarSystem
from calendar_converter.api.validation import MAX_ADN, MIN_ADN


def test_day_of_week_known_dates():
    assert day_of_week(2451545) == 6  # 1 January 2000, Saturday
    assert day_of_week(2459834) == 0  # 11 September 2022, Sunday


@pytest.mark.parametrize("calendar_system", list(CalendarSystem))
def test_round_trip_identity(calendar_system):
    lowest = MIN_ADN if calendar_system is not CalendarSystem.HEBREW else new_year_adn(1)
    for adn in range(lowest, MAX_ADN + 1, 7919):
        date = from_adn(adn, calendar_system)
        assert date.is_valid and date.is_not_overflow
        assert to_adn(date) == adn
        assert from_adn(to_adn(date), calendar_system) == date


def test_solar_era_follows_astronomical_year():
    assert from_adn(1721426, CalendarSystem.GREGORIAN).era is True
    last_bc = from_adn(1721425, CalendarSystem.GREGORIAN)
    assert (last_bc.year, last_bc.era, last_bc.civil_year) == (0, False, 1)


def test_from_adn_accepts_calendar_name():
    assert from_adn(2459834, "julian") == CalendarDate(29, 8, 2022, True, CalendarSystem.JULIAN)


@pytest.mark.parametrize("adn", [MIN_ADN - 1, MAX_ADN + 1])
def test_from_adn_flags_out_of_range(adn):
    result = from_adn(adn, CalendarSystem.GREGORIAN)
    assert result.is_valid
    assert not result.is_not_overflow


def test_from_adn_before_hebrew_epoch_overflows():
    assert from_adn(new_year_adn(1), CalendarSystem.HEBREW).is_not_overflow
    assert not from_adn(new_year_adn(1) - 1, CalendarSystem.HEBREW).is_not_overflow


def test_to_adn_rejects_invalid_dates():
    with pytest.raises(ValueError):
        to_adn(CalendarDate.invalid(CalendarSystem.GREGORIAN))


@pytest.mark.parametrize(
    "date",
    [
        CalendarDate(30, 2, 2021, True, CalendarSystem.GREGORIAN),
        CalendarDate(29, 2, 1900, True, CalendarSystem.GREGORIAN),
        CalendarDate(1, 13, 5783, True, CalendarSystem.HEBREW),
        CalendarDate(1, 14, 5784, True, CalendarSystem.HEBREW),
        CalendarDate(30, 2, 5784, True, CalendarSystem.HEBREW),
    ],
)
def test_to_adn_rejects_impossible_dates_built_directly(date):
    with pytest.raises(ValueError):
        to_adn(date)
