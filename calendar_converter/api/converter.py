"""Gregorian ↔ Julian ↔ Hebrew conversion entry points."""
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple, Union

from . import hebrew
from .calendars import CALENDAR_RULES, rules_for
from .day_number import from_adn, to_adn
from .models import CalendarDate, CalendarSystem, MalformedInputError
from .validation import MAX_ADN, MIN_ADN, check_overflow, validate_structure

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except Exception:  # pragma: no cover - engine works without the host framework
    frappe = None  # type: ignore

__all__ = [
    "coerce_calendar",
    "coerce_era",
    "convert",
    "convert_date",
    "get_engine_context",
    "resolve_month",
]

logger = logging.getLogger(__name__)

MonthValue = Union[int, str]

_SOLAR_MONTHS = [
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]
_SOLAR_MONTH_INDEX: Dict[str, int] = {
    key: index for index, name in enumerate(_SOLAR_MONTHS, start=1) for key in (name, name[:3])
}

# Chronological index in a (common, leap) year; 0 marks a month the year lacks.
_HEBREW_MONTH_INDEX: Dict[str, Tuple[int, int]] = {
    "tishrei": (1, 1),
    "cheshvan": (2, 2),
    "kislev": (3, 3),
    "tevet": (4, 4),
    "shevat": (5, 5),
    "adar": (6, 7),
    "adar i": (0, 6),
    "adar ii": (0, 7),
    "nisan": (7, 8),
    "iyar": (8, 9),
    "sivan": (9, 10),
    "tammuz": (10, 11),
    "av": (11, 12),
    "elul": (12, 13),
}
_HEBREW_ALIASES = {
    "tishri": "tishrei",
    "chesvan": "cheshvan",
    "heshvan": "cheshvan",
    "marcheshvan": "cheshvan",
    "kislew": "kislev",
    "teves": "tevet",
    "tebeth": "tevet",
    "shvat": "shevat",
    "shebat": "shevat",
    "adar 1": "adar i",
    "adar 2": "adar ii",
    "adar / adar ii": "adar",
    "adar/adar ii": "adar",
    "nissan": "nisan",
    "iyyar": "iyar",
    "tamuz": "tammuz",
    "ab": "av",
}

_ERA_TOKENS = {
    "ad": True,
    "ce": True,
    "bc": False,
    "bce": False,
}


def coerce_calendar(value: Union[str, CalendarSystem]) -> CalendarSystem:
    if isinstance(value, CalendarSystem):
        return value
    if isinstance(value, str):
        try:
            return CalendarSystem(value.strip().lower())
        except ValueError as exc:
            raise MalformedInputError(f"Unsupported calendar system: {value!r}") from exc
    raise MalformedInputError(
        "calendar must be one of: {}".format(", ".join(system.value for system in CalendarSystem))
    )


def coerce_era(value: Union[str, bool, None]) -> bool:
    """Return ``True`` for AD/CE and ``False`` for BC/BCE."""

    if isinstance(value, bool):
        return value
    if value is None:
        raise MalformedInputError("era is required for Gregorian and Julian dates")
    if isinstance(value, str):
        normalized = value.strip().lower().replace(".", "")
        if normalized in _ERA_TOKENS:
            return _ERA_TOKENS[normalized]
    raise MalformedInputError(f"Unsupported era: {value!r}")


def _coerce_int(value: Union[int, str, None], field: str) -> int:
    if value is None:
        raise MalformedInputError(f"{field} is required")
    if isinstance(value, bool):
        raise MalformedInputError(f"{field} must be an integer, not {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise MalformedInputError(f"{field} must be an integer, got {value!r}") from exc


def _normalize_month_name(value: str) -> str:
    name = " ".join(value.strip().lower().split())
    return _HEBREW_ALIASES.get(name, name)


def resolve_month(value: MonthValue, year: int, calendar_system: CalendarSystem) -> int:
    """Turn a month index or name into the calendar's month index for ``year``.

    Names of months the year does not have (Adar I in a common Hebrew year)
    resolve to 0 so that validation reports the date as invalid.
    """

    if isinstance(value, str) and not value.strip().lstrip("-").isdigit():
        if calendar_system is CalendarSystem.HEBREW:
            name = _normalize_month_name(value)
            if name not in _HEBREW_MONTH_INDEX:
                raise MalformedInputError(f"Unknown Hebrew month: {value!r}")
            common, leap = _HEBREW_MONTH_INDEX[name]
            return leap if hebrew.is_leap_year(year) else common
        name = value.strip().lower()
        if name not in _SOLAR_MONTH_INDEX:
            raise MalformedInputError(f"Unknown month: {value!r}")
        return _SOLAR_MONTH_INDEX[name]
    return _coerce_int(value, "month")


def convert(
    day: Union[int, str],
    month: MonthValue,
    year: Union[int, str],
    era: Union[str, bool, None],
    from_system: Union[str, CalendarSystem],
    to_system: Union[str, CalendarSystem],
) -> CalendarDate:
    """Convert a date between calendar systems.

    Invalid dates and dates outside the supported range are reported through
    the ``is_valid`` and ``is_not_overflow`` flags of the result. Requests
    that cannot be interpreted raise :class:`MalformedInputError`.
    """

    source = coerce_calendar(from_system)
    target = coerce_calendar(to_system)
    day = _coerce_int(day, "day")
    year = _coerce_int(year, "year")

    if rules_for(source).has_era:
        is_ad = coerce_era(era)
        if year < 1:
            logger.debug("Rejecting civil year %d: years are counted from 1", year)
            return CalendarDate.invalid(target)
        internal_year = year if is_ad else 1 - year
    else:
        is_ad = True
        internal_year = year

    month_index = resolve_month(month, internal_year, source)
    if not validate_structure(day, month_index, internal_year, source):
        logger.debug(
            "Invalid %s date: day=%s month=%s year=%s", source.value, day, month_index, internal_year
        )
        return CalendarDate.invalid(target)

    adn = to_adn(CalendarDate(day, month_index, internal_year, is_ad, source))
    if not check_overflow(adn):
        logger.debug("Day number %d is outside [%d, %d]", adn, MIN_ADN, MAX_ADN)
        return CalendarDate.overflowed(target)

    result = from_adn(adn, target)
    logger.debug("Converted %s day number %d to %s %s", source.value, adn, target.value, result)
    return result


def convert_date(
    day: Union[int, str],
    month: MonthValue,
    year: Union[int, str],
    from_system: str,
    to_system: str,
    era: Optional[str] = None,
) -> Dict[str, object]:
    """Convert a date and return a serialisable payload for client code."""

    return convert(day, month, year, era, from_system, to_system).as_dict()


def get_engine_context() -> Dict[str, object]:
    """Describe the supported calendars and day-number range."""

    return {
        "calendars": [system.value for system in CALENDAR_RULES],
        "calendars_with_era": [system.value for system, rules in CALENDAR_RULES.items() if rules.has_era],
        "min_adn": MIN_ADN,
        "max_adn": MAX_ADN,
    }


def _expose_endpoint(func):
    """Make ``func`` callable over HTTP as a read-only Frappe method.

    Conversions touch no documents, so guests may call them too.
    """

    if frappe is None or not hasattr(frappe, "whitelist"):
        return func
    return frappe.whitelist(allow_guest=True, methods=["GET", "POST"])(func)  # type: ignore[attr-defined]


convert_date = _expose_endpoint(convert_date)
get_engine_context = _expose_endpoint(get_engine_context)
