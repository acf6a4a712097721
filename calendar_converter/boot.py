"""Boot hook publishing the converter's capabilities to the desk client."""
from __future__ import annotations

from .api import converter

BOOT_KEY = "calendar_converter"


def boot_session(bootinfo):
    """Add the supported calendars and the day-number bounds under ``BOOT_KEY``.

    Client code reads the bounds to tell "date too early or late" apart from
    a request that never reached the server. An existing entry is left alone.
    """

    context = converter.get_engine_context()
    if isinstance(bootinfo, dict):
        bootinfo.setdefault(BOOT_KEY, context)
    elif getattr(bootinfo, BOOT_KEY, None) is None:
        setattr(bootinfo, BOOT_KEY, context)
