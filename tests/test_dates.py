"""Tests for calendar-day parsing and arithmetic."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from moodboard.services.dates import compare_days, days_between, display_day, format_day, parse_day


# ---- parse_day ----


def test_parse_canonical():
    assert parse_day("2024-03-04") == date(2024, 3, 4)


def test_parse_ignores_timezone_of_datetime():
    # late evening west of UTC is already "tomorrow" in UTC; the day must not move
    dt = datetime(2024, 3, 4, 23, 30, tzinfo=timezone(timedelta(hours=-8)))
    assert parse_day(dt) == date(2024, 3, 4)


def test_parse_passes_dates_through():
    d = date(2024, 1, 1)
    assert parse_day(d) is d


@pytest.mark.parametrize(
    "bad",
    ["2024-03", "2024-03-04-01", "2024/03/04", "2024-xx-04", "", "2024-02-30", "2024-03-04T10:00"],
)
def test_parse_malformed_fails_fast(bad):
    with pytest.raises(ValueError):
        parse_day(bad)


def test_parse_rejects_non_ascii_digits():
    with pytest.raises(ValueError):
        parse_day("\uff12\uff10\uff12\uff14-03-04")
    with pytest.raises(ValueError):
        parse_day("2024-\u0663-04")


def test_parse_non_string_rejected():
    with pytest.raises(ValueError):
        parse_day(20240304)


# ---- compare / between ----


def test_compare_days():
    assert compare_days("2024-01-01", "2024-01-02") == -1
    assert compare_days("2024-01-02", "2024-01-01") == 1
    assert compare_days("2024-01-02", date(2024, 1, 2)) == 0


def test_days_between_crosses_month_and_leap_day():
    assert days_between("2024-02-28", "2024-03-01") == 2
    assert days_between("2024-03-01", "2024-02-28") == -2
    assert days_between("2024-01-01", "2024-01-01") == 0


# ---- formatting ----


def test_format_and_display():
    assert format_day(date(2024, 3, 4)) == "2024-03-04"
    assert display_day("2024-03-04") == "Mar 4, 2024"
