"""Structural and range checks applied around every conversion."""
from __future__ import annotations

from . import solar
from .calendars import rules_for
from .models import CalendarSystem, MalformedInputError

__all__ = [
    "MAX_ADN",
    "MIN_ADN",
    "check_overflow",
    "validate_structure",
]

# 1 January 9999 BC and 31 December 9999 AD, proleptic Gregorian.
MIN_ADN = solar.gregorian_to_adn(-9998, 1, 1)
MAX_ADN = solar.gregorian_to_adn(9999, 12, 31)


def _require_int(value: object, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInputError(f"{field} must be an integer, got {value!r}")


def validate_structure(day: int, month: int, year: int, calendar_system: CalendarSystem) -> bool:
    """Return ``True`` if the fields name a day that exists in the calendar.

    ``year`` is astronomical. Out-of-range values are reported, never raised;
    values that are not integers raise :class:`MalformedInputError`.
    """

    for field, value in (("day", day), ("month", month), ("year", year)):
        _require_int(value, field)
    rules = rules_for(calendar_system)
    if rules.min_year is not None and year < rules.min_year:
        return False
    if not 1 <= month <= rules.month_count(year):
        return False
    return 1 <= day <= rules.days_in_month(year, month)


def check_overflow(adn: int) -> bool:
    """Return ``True`` while ``adn`` is inside the supported range."""

    return MIN_ADN <= adn <= MAX_ADN
