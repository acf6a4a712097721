"""Value types shared by the conversion engine."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict

from .hebrew import month_name_index as _hebrew_month_name_index

__all__ = [
    "CalendarDate",
    "CalendarSystem",
    "MalformedInputError",
]


class MalformedInputError(ValueError):
    """Raised when a conversion request cannot be interpreted at all."""


class CalendarSystem(str, Enum):
    GREGORIAN = "gregorian"
    JULIAN = "julian"
    HEBREW = "hebrew"


@dataclass(frozen=True)
class CalendarDate:
    """Immutable date in one calendar system plus the validity flags.

    ``year`` uses astronomical numbering for the solar calendars (1 BC is
    year 0). When either flag is false the day, month and year are zero and
    carry no meaning.
    """

    day: int
    month: int
    year: int
    era: bool
    calendar_system: CalendarSystem
    is_valid: bool = True
    is_not_overflow: bool = True

    def __post_init__(self) -> None:
        # Solar years at or below 0 are BC; the era flag must agree.
        if self.calendar_system is not CalendarSystem.HEBREW and self.era != (self.year >= 1):
            era = "AD" if self.era else "BC"
            raise ValueError(f"astronomical year {self.year} is not an {era} year")

    @classmethod
    def invalid(cls, calendar_system: CalendarSystem) -> "CalendarDate":
        return cls(0, 0, 0, False, calendar_system, is_valid=False, is_not_overflow=True)

    @classmethod
    def overflowed(cls, calendar_system: CalendarSystem) -> "CalendarDate":
        return cls(0, 0, 0, False, calendar_system, is_valid=True, is_not_overflow=False)

    @property
    def is_usable(self) -> bool:
        return self.is_valid and self.is_not_overflow

    @property
    def civil_year(self) -> int:
        """Year as written with its era, e.g. ``44`` for 44 BC."""

        if self.calendar_system is CalendarSystem.HEBREW or self.era:
            return self.year
        return 1 - self.year

    @property
    def month_name_index(self) -> int:
        """1-based index into the calendar's display month-name table."""

        if self.calendar_system is CalendarSystem.HEBREW and self.is_usable:
            return _hebrew_month_name_index(self.year, self.month)
        return self.month

    def isoformat(self, sep: str = "-") -> str:
        year = f"{self.year:04d}" if self.year >= 0 else f"-{-self.year:04d}"
        return f"{year}{sep}{self.month:02d}{sep}{self.day:02d}"

    def as_dict(self) -> Dict[str, object]:
        payload = asdict(self)
        payload["calendar_system"] = self.calendar_system.value
        payload["civil_year"] = self.civil_year
        payload["month_name_index"] = self.month_name_index
        return payload
