# src/taskboard/util/clock.py

"""Calendar-day helpers pinned to one fixed UTC offset.

Every "which day is it" decision goes through this module so that the result
does not depend on the timezone of the machine running the code. The default
offset is +09:00; the configured value comes from Settings.utc_offset_hours.
"""

from __future__ import annotations

import datetime as dt
import re

from ..errors import ValidationError

DEFAULT_UTC_OFFSET_HOURS = 9

_DAY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def fixed_tz(hours: float = DEFAULT_UTC_OFFSET_HOURS) -> dt.timezone:
    return dt.timezone(dt.timedelta(hours=hours))


DEFAULT_TZ = fixed_tz()


def now(tz: dt.tzinfo = DEFAULT_TZ) -> dt.datetime:
    return dt.datetime.now(tz)


def today(tz: dt.tzinfo = DEFAULT_TZ) -> dt.date:
    return now(tz).date()


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with milliseconds and a trailing Z (2024-06-01T03:04:05.678Z)."""
    stamp = dt.datetime.now(dt.UTC).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def format_day(day: dt.date) -> str:
    return day.strftime("%Y-%m-%d")


def to_local_day(value: object, tz: dt.tzinfo = DEFAULT_TZ) -> dt.date | None:
    """
    Convert a date-ish value to a calendar day in the fixed offset.

    Accepts:
    - date objects (returned as-is)
    - aware datetimes (converted to tz), naive datetimes (taken as already local)
    - "YYYY-MM-DD" strings
    - ISO datetime strings, with or without a Z/offset suffix

    Returns None for empty or unparseable values.
    """
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        return None

    s = value.strip()
    if not s:
        return None
    if _DAY_RE.match(s):
        try:
            return dt.date.fromisoformat(s)
        except ValueError:
            return None
    try:
        parsed = dt.datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError:
        return None
    return to_local_day(parsed, tz)


def parse_day(value: object) -> dt.date | None:
    return to_local_day(value, DEFAULT_TZ)


def require_day(value: object, field_name: str) -> dt.date | None:
    """Strict variant for the edit boundary: empty is fine, garbage is not."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if not isinstance(value, str) or not _DAY_RE.match(value.strip()):
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date, got {value!r}")
    try:
        return dt.date.fromisoformat(value.strip())
    except ValueError as ex:
        raise ValidationError(f"{field_name} is not a valid date: {value!r}") from ex


def is_same_day(a: object, b: object, tz: dt.tzinfo = DEFAULT_TZ) -> bool:
    da = to_local_day(a, tz)
    db = to_local_day(b, tz)
    return da is not None and da == db


def is_day_in_range(
    day: object, start: object, end: object, tz: dt.tzinfo = DEFAULT_TZ
) -> bool:
    """Inclusive on both ends; False if any of the three values is empty or unparseable."""
    d = to_local_day(day, tz)
    lo = to_local_day(start, tz)
    hi = to_local_day(end, tz)
    if d is None or lo is None or hi is None:
        return False
    return lo <= d <= hi
