from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from fermentato.services.opening_hours import is_open_now

ROME = ZoneInfo("Europe/Rome")
# 2024-06-03 is a Monday
MONDAY = datetime(2024, 6, 3, tzinfo=ROME)


def at(hour, minute=0, day=MONDAY):
    return day.replace(hour=hour, minute=minute)


def test_regular_window():
    hours = {"monday": {"open": "18:00", "close": "23:30"}}
    assert is_open_now(hours, at(18)) is True
    assert is_open_now(hours, at(23, 29)) is True
    assert is_open_now(hours, at(23, 30)) is False
    assert is_open_now(hours, at(17, 59)) is False


def test_overnight_wrap():
    hours = {"monday": {"open": "18:00", "close": "02:00"}}
    assert is_open_now(hours, at(23)) is True
    assert is_open_now(hours, at(1, 30)) is True
    assert is_open_now(hours, at(2)) is False
    assert is_open_now(hours, at(12)) is False


def test_same_open_and_close_is_all_day():
    hours = {"monday": {"open": "10:00", "close": "10:00"}}
    assert is_open_now(hours, at(3)) is True


@pytest.mark.parametrize("hours", [
    None,
    {},
    {"tuesday": {"open": "18:00", "close": "23:00"}},
    {"monday": {"open": "18:00", "close": "23:00", "isClosed": True}},
    {"monday": {"open": "late", "close": "23:00"}},
])
def test_closed(hours):
    assert is_open_now(hours, at(20)) is False


def test_day_without_times_is_open():
    assert is_open_now({"monday": {"isClosed": False}}, at(4)) is True


def test_converts_to_local_time():
    hours = {"monday": {"open": "18:00", "close": "23:00"}}
    # 17:30 UTC is 19:30 in Rome (CEST)
    assert is_open_now(hours, datetime(2024, 6, 3, 17, 30, tzinfo=ZoneInfo("UTC"))) is True
