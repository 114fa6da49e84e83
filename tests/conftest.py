"""Shared test fixtures for the mood dashboard."""

from __future__ import annotations

import importlib.util
import json
from datetime import date
from pathlib import Path

import pytest

from moodboard.services.analytics import Entry


def make_entry(d: str, mood: int = 50, note: str = "") -> Entry:
    return Entry(date=d, mood=mood, note=note)


@pytest.fixture
def streak_entries():
    """01-01..01-03 consecutive, gap on 01-04, then 01-05."""
    return [
        make_entry("2024-01-01", 60),
        make_entry("2024-01-02", 65),
        make_entry("2024-01-03", 70),
        make_entry("2024-01-05", 80),
    ]


@pytest.fixture
def march_entries():
    return [
        make_entry("2024-03-03", 40, "outside the week"),
        make_entry("2024-03-04", 55, "first day of the week"),
        make_entry("2024-03-08", 90, ""),
        make_entry("2024-03-10", 20, "today"),
    ]


@pytest.fixture
def march_today():
    return date(2024, 3, 10)


@pytest.fixture
def write_export(tmp_path):
    """Write a dict as JSON into tmp_path and return the path as str."""

    def _write(data, name="entries.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def dashboard_export(write_export):
    """
    A run of three days, a gap, then two days ending 2024-03-10.
    7-day window at 03-10 holds only the last two; streaks see all five.
    """
    return write_export({
        "meta": {"generated_at": "2024-03-10T08:00:00Z", "days": 7},
        "entries": [
            {"date": "2024-03-01", "mood": 50, "note": "start"},
            {"date": "2024-03-02", "mood": 60, "note": ""},
            {"date": "2024-03-03", "mood": 70, "note": "best run"},
            {"date": "2024-03-09", "mood": 80, "note": "back at it"},
            {"date": "2024-03-10", "mood": 40, "note": ""},
        ],
    })


@pytest.fixture
def load_script():
    """Import a file from scripts/ as a module."""

    def _load(name):
        path = Path(__file__).parent.parent / "scripts" / f"{name}.py"
        spec = importlib.util.spec_from_file_location(f"scripts_{name}", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load
