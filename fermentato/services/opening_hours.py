"""Opening-hours check for pubs."""
from datetime import datetime
from zoneinfo import ZoneInfo

from fermentato.config import settings

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def _minutes(value: str) -> int | None:
    """'18:30' -> 1110. None if malformed."""
    try:
        hours, minutes = str(value).strip().split(":")[:2]
        h, m = int(hours), int(minutes)
    except (TypeError, ValueError):
        return None
    if not (0 <= h <= 24 and 0 <= m < 60):
        return None
    return h * 60 + m


def is_open_now(hours: dict | None, now: datetime | None = None) -> bool:
    """True if `now` (local time in the configured timezone) is inside today's window.

    Window is [open, close). close < open wraps past midnight; open == close is
    open all day. A day with no entry or ``isClosed`` is closed; a day with no
    times is open.
    """
    if not hours:
        return False
    tz = ZoneInfo(settings.timezone)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is not None:
        now = now.astimezone(tz)

    today = hours.get(WEEKDAYS[now.weekday()])
    if not today or today.get("isClosed"):
        return False
    if not today.get("open") or not today.get("close"):
        return True

    open_at = _minutes(today["open"])
    close_at = _minutes(today["close"])
    if open_at is None or close_at is None:
        return False
    current = now.hour * 60 + now.minute
    if open_at == close_at:
        return True
    if close_at < open_at:
        return current >= open_at or current < close_at
    return open_at <= current < close_at
