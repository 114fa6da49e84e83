# moodboard/services/dates.py
from __future__ import annotations

from datetime import date, datetime
from typing import Union

DayLike = Union[str, date, datetime]


def parse_day(value: DayLike) -> date:
    """
    Turn a YYYY-MM-DD string into a calendar day.
    Built from the year/month/day components only, so no time zone or
    time-of-day can shift the result. A datetime is truncated to its date.
    Malformed strings raise ValueError.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid date: {value!r}")

    parts = value.split("-")
    if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
        raise ValueError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
    year, month, day = (int(p) for p in parts)
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(f"Invalid date: {value!r} ({e})") from e


def compare_days(a: DayLike, b: DayLike) -> int:
    da, db = parse_day(a), parse_day(b)
    if da < db:
        return -1
    if da > db:
        return 1
    return 0


def days_between(a: DayLike, b: DayLike) -> int:
    """Whole days from a to b (negative when b is earlier)."""
    return (parse_day(b) - parse_day(a)).days


def format_day(value: DayLike) -> str:
    return parse_day(value).isoformat()


def display_day(value: DayLike) -> str:
    # e.g. "Mar 4, 2024"; avoids the platform-specific %-d
    d = parse_day(value)
    return f"{d.strftime('%b')} {d.day}, {d.year}"
