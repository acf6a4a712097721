"""Proleptic Gregorian and Julian calendar arithmetic.

Years are astronomical (1 BC is year 0, 2 BC is year -1). Day numbers are
Julian Day Numbers; every formula uses floor division so negative years and
day numbers need no special casing.
"""
from __future__ import annotations

from typing import Tuple

__all__ = [
    "adn_to_gregorian",
    "adn_to_julian",
    "gregorian_days_in_month",
    "gregorian_to_adn",
    "is_gregorian_leap",
    "is_julian_leap",
    "julian_days_in_month",
    "julian_to_adn",
    "MONTHS_PER_YEAR",
]

MONTHS_PER_YEAR = 12
_MONTH_LENGTHS = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_julian_leap(year: int) -> bool:
    return year % 4 == 0


def _month_length(month: int, leap: bool) -> int:
    if month == 2 and leap:
        return 29
    return _MONTH_LENGTHS[month - 1]


def gregorian_days_in_month(year: int, month: int) -> int:
    return _month_length(month, is_gregorian_leap(year))


def julian_days_in_month(year: int, month: int) -> int:
    return _month_length(month, is_julian_leap(year))


def _shift_to_march(year: int, month: int) -> Tuple[int, int]:
    # Count years from March 4801 BC so February is the last month of the year.
    a = (14 - month) // 12
    return year + 4800 - a, month + 12 * a - 3


def gregorian_to_adn(year: int, month: int, day: int) -> int:
    y, m = _shift_to_march(year, month)
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def julian_to_adn(year: int, month: int, day: int) -> int:
    y, m = _shift_to_march(year, month)
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083


def _split_march_based(days: int) -> Tuple[int, int, int]:
    """Split days since 1 March of a 4-year cycle start into (years, month, day)."""

    d = (4 * days + 3) // 1461
    e = days - 1461 * d // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    return d + m // 10, month, day


def adn_to_gregorian(adn: int) -> Tuple[int, int, int]:
    a = adn + 32044
    centuries = (4 * a + 3) // 146097
    remainder = a - 146097 * centuries // 4
    years, month, day = _split_march_based(remainder)
    return 100 * centuries + years - 4800, month, day


def adn_to_julian(adn: int) -> Tuple[int, int, int]:
    years, month, day = _split_march_based(adn + 32082)
    return years - 4800, month, day
