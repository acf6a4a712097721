from types import SimpleNamespace

from calendar_converter import boot, hooks
from calendar_converter.api.converter import get_engine_context


def test_boot_session_injects_engine_context_into_dict():
    bootinfo = {}
    boot.boot_session(bootinfo)
    assert bootinfo["calendar_converter"] == get_engine_context()


def test_boot_session_keeps_existing_dict_value():
    bootinfo = {"calendar_converter": "custom"}
    boot.boot_session(bootinfo)
    assert bootinfo["calendar_converter"] == "custom"


def test_boot_session_sets_attribute_on_objects():
    bootinfo = SimpleNamespace()
    boot.boot_session(bootinfo)
    assert bootinfo.calendar_converter["calendars"] == ["gregorian", "julian", "hebrew"]


def test_hooks_point_at_boot_session():
    module_name, _, attribute = hooks.boot_session.rpartition(".")
    assert module_name == boot.__name__
    assert getattr(boot, attribute) is boot.boot_session


def test_boot_session_keeps_existing_attribute():
    bootinfo = SimpleNamespace(calendar_converter={"calendars": []})
    boot.boot_session(bootinfo)
    assert bootinfo.calendar_converter == {"calendars": []}
