"""Mapping between calendar dates and astronomical day numbers (JDN)."""
from __future__ import annotations

import logging

from .calendars import rules_for
from .models import CalendarDate, CalendarSystem
from .validation import check_overflow, validate_structure

__all__ = [
    "day_of_week",
    "from_adn",
    "to_adn",
]

logger = logging.getLogger(__name__)


def day_of_week(adn: int) -> int:
    """Return the weekday of a day number, 0 = Sunday through 6 = Saturday."""

    return (adn + 1) % 7


def to_adn(date: CalendarDate) -> int:
    if not date.is_valid or not validate_structure(date.day, date.month, date.year, date.calendar_system):
        raise ValueError(f"Cannot compute a day number for an invalid date: {date.isoformat()}")
    rules = rules_for(date.calendar_system)
    return rules.to_adn(date.year, date.month, date.day)


def from_adn(adn: int, calendar_system: CalendarSystem) -> CalendarDate:
    """Express ``adn`` in ``calendar_system``.

    Day numbers outside the supported range, or before the calendar's first
    year, come back as an overflowed result rather than raising.
    """

    calendar_system = CalendarSystem(calendar_system)
    if not check_overflow(adn):
        logger.debug("Day number %d is outside the supported range", adn)
        return CalendarDate.overflowed(calendar_system)

    rules = rules_for(calendar_system)
    year, month, day = rules.from_adn(adn)
    if rules.min_year is not None and year < rules.min_year:
        logger.debug("Day number %d precedes the %s epoch", adn, calendar_system.value)
        return CalendarDate.overflowed(calendar_system)

    era = year >= 1 if rules.has_era else True
    return CalendarDate(day, month, year, era, calendar_system)
