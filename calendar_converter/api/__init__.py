"""Server-side helpers exposed by the calendar converter package."""

from . import converter, day_number, hebrew, solar, validation
from .converter import convert
from .models import CalendarDate, CalendarSystem, MalformedInputError

__all__ = [
    "CalendarDate",
    "CalendarSystem",
    "MalformedInputError",
    "convert",
    "converter",
    "day_number",
    "hebrew",
    "solar",
    "validation",
]
