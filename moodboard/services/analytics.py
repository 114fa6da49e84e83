# moodboard/services/analytics.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

import numpy as np

from .dates import DayLike, parse_day


@dataclass(frozen=True)
class Entry:
    date: str  # YYYY-MM-DD
    mood: int
    note: str = ""

    @property
    def day(self) -> date:
        return parse_day(self.date)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Entry":
        return cls(date=str(raw["date"]), mood=int(raw["mood"]), note=str(raw.get("note") or ""))

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "mood": self.mood, "note": self.note}


@dataclass(frozen=True)
class Summary:
    has_data: bool
    count: int
    average_mood: float
    stddev: float
    best: Optional[Entry]
    worst: Optional[Entry]


@dataclass(frozen=True)
class Streak:
    current: int
    longest: int


class RangeSelection(Enum):
    SEVEN_DAYS = ("7 days", 7)
    THIRTY_DAYS = ("30 days", 30)
    ALL_TIME = ("All time", None)

    def __init__(self, label: str, days: Optional[int]):
        self.label = label
        self.days = days

    @classmethod
    def from_label(cls, label: str) -> "RangeSelection":
        for sel in cls:
            if sel.label == label:
                return sel
        raise ValueError(f"Unknown range: {label!r}")


# ---------- Range filter ----------
def cutoff_day(days: int, now: DayLike) -> date:
    """Earliest day kept by a trailing window of `days` days ending on `now`."""
    if days <= 0:
        raise ValueError("days must be positive.")
    return parse_day(now) - timedelta(days=days - 1)


def filter_by_days(entries: Iterable[Entry], days: int, now: DayLike) -> List[Entry]:
    """
    Keep entries dated on or after the cutoff, so a 7-day window holds
    `now` plus the 6 days before it. Input order is preserved.
    """
    cutoff = cutoff_day(days, now)
    return [e for e in entries if e.day >= cutoff]


def filter_entries(entries: Iterable[Entry], selection: RangeSelection, now: DayLike) -> List[Entry]:
    if selection.days is None:
        return list(entries)
    return filter_by_days(entries, selection.days, now)


# ---------- Summary ----------
def summarize(entries: Iterable[Entry]) -> Summary:
    """
    Count, mean and population std dev (divisor N) of mood, plus best/worst
    days. Best ties go to the latest date, worst ties to the earliest.
    """
    items = list(entries)
    if not items:
        return Summary(has_data=False, count=0, average_mood=0.0, stddev=0.0, best=None, worst=None)

    moods = np.array([e.mood for e in items], dtype=float)
    best = max(items, key=lambda e: (e.mood, e.day))
    worst = min(items, key=lambda e: (e.mood, e.day))
    return Summary(
        has_data=True,
        count=len(items),
        average_mood=float(moods.mean()),
        stddev=float(moods.std(ddof=0)),
        best=best,
        worst=worst,
    )


# ---------- Streaks ----------
def _unique_days(entries: Iterable[Entry]) -> List[date]:
    return sorted({e.day for e in entries})


def compute_streaks(entries: Iterable[Entry], now: DayLike) -> Streak:
    """
    Longest run of consecutive days with an entry, and the run ending at the
    latest entry day on or before `now`. The latter only counts as current
    while that day is today or yesterday; otherwise it has lapsed to 0.
    """
    udays = _unique_days(entries)
    if not udays:
        return Streak(current=0, longest=0)

    longest = 1
    run = 1
    for i in range(1, len(udays)):
        if udays[i] == udays[i - 1] + timedelta(days=1):
            run += 1
            longest = max(longest, run)
        else:
            run = 1

    # days after `now` cannot anchor the current run
    today = parse_day(now)
    past = [d for d in udays if d <= today]
    current = 0
    if past and past[-1] >= today - timedelta(days=1):
        current = 1
        for i in range(len(past) - 2, -1, -1):
            if past[i] != past[i + 1] - timedelta(days=1):
                break
            current += 1

    return Streak(current=current, longest=longest)
