"""Per-calendar rule table used by the validator and the day-number converter."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from . import hebrew, solar
from .models import CalendarSystem

__all__ = [
    "CALENDAR_RULES",
    "CalendarRules",
    "rules_for",
]


@dataclass(frozen=True)
class CalendarRules:
    """Calendar-specific operations, all taking astronomical years."""

    days_in_month: Callable[[int, int], int]
    month_count: Callable[[int], int]
    to_adn: Callable[[int, int, int], int]
    from_adn: Callable[[int], Tuple[int, int, int]]
    min_year: Optional[int] = None
    has_era: bool = True


def _twelve_months(year: int) -> int:
    return solar.MONTHS_PER_YEAR


CALENDAR_RULES: Mapping[CalendarSystem, CalendarRules] = MappingProxyType(
    {
        CalendarSystem.GREGORIAN: CalendarRules(
            days_in_month=solar.gregorian_days_in_month,
            month_count=_twelve_months,
            to_adn=solar.gregorian_to_adn,
            from_adn=solar.adn_to_gregorian,
        ),
        CalendarSystem.JULIAN: CalendarRules(
            days_in_month=solar.julian_days_in_month,
            month_count=_twelve_months,
            to_adn=solar.julian_to_adn,
            from_adn=solar.adn_to_julian,
        ),
        CalendarSystem.HEBREW: CalendarRules(
            days_in_month=hebrew.month_length,
            month_count=hebrew.month_count,
            to_adn=hebrew.to_adn,
            from_adn=hebrew.from_adn,
            min_year=1,
            has_era=False,
        ),
    }
)


def rules_for(calendar_system: CalendarSystem) -> CalendarRules:
    try:
        return CALENDAR_RULES[calendar_system]
    except KeyError as exc:
        raise ValueError(f"Unsupported calendar system: {calendar_system!r}") from exc
