"""Hebrew (lunisolar) calendar arithmetic.

Months are numbered chronologically from Tishrei. A common year has 12
months (6 = Adar); a leap year has 13 (6 = Adar I, 7 = Adar II, 13 = Elul).

Time is counted in halaqim ("parts"): 1080 parts to the hour, with the
Hebrew day starting at 6 p.m. Molad day numbers count from the Sunday
before the epoch molad, so ``day % 7`` is the weekday with 0 = Sunday.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple

__all__ = [
    "EPOCH_ADN",
    "YearKind",
    "from_adn",
    "is_leap_year",
    "molad_tishrei",
    "month_count",
    "month_length",
    "month_lengths",
    "month_name_index",
    "months_elapsed",
    "new_year_adn",
    "to_adn",
    "year_kind",
    "year_length",
]

PARTS_PER_HOUR = 1080
PARTS_PER_DAY = 24 * PARTS_PER_HOUR
LUNATION_PARTS = 29 * PARTS_PER_DAY + 12 * PARTS_PER_HOUR + 793
MONTHS_PER_CYCLE = 235

# Molad BaHaRaD: Monday, 5 hours 204 parts.
EPOCH_MOLAD_PARTS = 1 * PARTS_PER_DAY + 5 * PARTS_PER_HOUR + 204
# Julian Day Number of the Sunday that molad day numbers count from.
EPOCH_ADN = 347997

_NOON = 18 * PARTS_PER_HOUR
_GATARAD = 9 * PARTS_PER_HOUR + 204
_BETUTAKPAT = 15 * PARTS_PER_HOUR + 589

_SUNDAY, _MONDAY, _TUESDAY, _WEDNESDAY, _FRIDAY = 0, 1, 2, 3, 5
_FORBIDDEN_NEW_YEAR_DAYS = {_SUNDAY, _WEDNESDAY, _FRIDAY}

# Mean year of 235/19 lunations, as a fraction of days.
_MEAN_YEAR_NUMERATOR = 35975351
_MEAN_YEAR_DENOMINATOR = 98496
# The estimate lands within one year of the answer.
_MAX_YEAR_CORRECTIONS = 1

_COMMON_MONTH_LENGTHS = (30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29)
_CHESHVAN = 2
_KISLEV = 3
_ADAR_I = 6
_ADAR_II = 7


class YearKind(Enum):
    DEFICIENT = "deficient"
    REGULAR = "regular"
    COMPLETE = "complete"


_KIND_BY_LENGTH = {
    353: YearKind.DEFICIENT,
    354: YearKind.REGULAR,
    355: YearKind.COMPLETE,
    383: YearKind.DEFICIENT,
    384: YearKind.REGULAR,
    385: YearKind.COMPLETE,
}


def is_leap_year(year: int) -> bool:
    return (7 * year + 1) % 19 < 7


def months_elapsed(year: int) -> int:
    """Lunations between the epoch molad and molad Tishrei of ``year``."""

    cycles, position = divmod(year - 1, 19)
    return MONTHS_PER_CYCLE * cycles + 12 * position + (7 * position + 1) // 19


def molad_tishrei(year: int) -> Tuple[int, int]:
    """Return the molad of Tishrei as ``(day, parts into that day)``."""

    return divmod(EPOCH_MOLAD_PARTS + months_elapsed(year) * LUNATION_PARTS, PARTS_PER_DAY)


def _new_year_day(year: int) -> int:
    day, parts = molad_tishrei(year)
    weekday = day % 7
    if parts >= _NOON:
        day += 1
    elif weekday == _TUESDAY and parts >= _GATARAD and not is_leap_year(year):
        day += 1
    elif weekday == _MONDAY and parts >= _BETUTAKPAT and is_leap_year(year - 1):
        day += 1
    if day % 7 in _FORBIDDEN_NEW_YEAR_DAYS:
        day += 1
    return day


def new_year_adn(year: int) -> int:
    """Julian Day Number of 1 Tishrei of ``year``."""

    return EPOCH_ADN + _new_year_day(year)


def year_length(year: int) -> int:
    return new_year_adn(year + 1) - new_year_adn(year)


def year_kind(year: int) -> YearKind:
    length = year_length(year)
    try:
        return _KIND_BY_LENGTH[length]
    except KeyError as exc:  # pragma: no cover - unreachable for the calendar rules
        raise ArithmeticError(f"Hebrew year {year} has impossible length {length}") from exc


def month_count(year: int) -> int:
    return 13 if is_leap_year(year) else 12


def month_lengths(year: int) -> Tuple[int, ...]:
    lengths = list(_COMMON_MONTH_LENGTHS)
    kind = year_kind(year)
    if kind is YearKind.COMPLETE:
        lengths[_CHESHVAN - 1] = 30
    if kind is YearKind.DEFICIENT:
        lengths[_KISLEV - 1] = 29
    if is_leap_year(year):
        lengths.insert(_ADAR_I - 1, 30)
    return tuple(lengths)


def month_length(year: int, month: int) -> int:
    return month_lengths(year)[month - 1]


def to_adn(year: int, month: int, day: int) -> int:
    return new_year_adn(year) + sum(month_lengths(year)[: month - 1]) + day - 1


def _estimate_year(adn: int) -> int:
    return (adn - EPOCH_ADN) * _MEAN_YEAR_DENOMINATOR // _MEAN_YEAR_NUMERATOR + 1


def _locate_year(adn: int) -> Tuple[int, int]:
    """Return the year containing ``adn`` and the ADN of its 1 Tishrei.

    At most one step down and one step up from the estimate, i.e. no more
    than four new-year evaluations.
    """

    year = _estimate_year(adn)
    start = new_year_adn(year)
    for _ in range(_MAX_YEAR_CORRECTIONS):
        if start <= adn:
            break
        year -= 1
        start = new_year_adn(year)

    following = new_year_adn(year + 1)
    for _ in range(_MAX_YEAR_CORRECTIONS):
        if following > adn:
            break
        year += 1
        start, following = following, new_year_adn(year + 1)

    if not start <= adn < following:  # pragma: no cover - estimate is always close
        raise ArithmeticError(f"Could not place day number {adn} in a Hebrew year")
    return year, start


def from_adn(adn: int) -> Tuple[int, int, int]:
    year, start = _locate_year(adn)
    remaining = adn - start
    for month, length in enumerate(month_lengths(year), start=1):
        if remaining < length:
            return year, month, remaining + 1
        remaining -= length
    raise ArithmeticError(f"Day number {adn} overruns Hebrew year {year}")  # pragma: no cover


def month_name_index(year: int, month: int) -> int:
    """Map a chronological month to the display table.

    The table lists Tishrei..Elul (6 = Adar) followed by Adar I (13) and
    Adar II (14).
    """

    if not is_leap_year(year) or month < _ADAR_I:
        return month
    if month == _ADAR_I:
        return 13
    if month == _ADAR_II:
        return 14
    return month - 1
