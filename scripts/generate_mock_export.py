#!/usr/bin/env python3
# scripts/generate_mock_export.py
from __future__ import annotations

import argparse
import os, sys
from datetime import date, timedelta
from typing import List, Tuple

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from moodboard.config import DEFAULT_DAYS, export_path
from moodboard.services.analytics import Entry
from moodboard.services.export import build_export, save_export

# A student-flavored week of highs and lows: (mood 1..100, note)
SAMPLES_STUDENT: List[Tuple[int, str]] = [
    (34, "Missed the early bus and spilled coffee before my 8am lecture."),
    (78, "Study group clicked; finally understand dynamic programming."),
    (29, "Group presentation nerves, one teammate bailed last minute."),
    (81, "Quick run before lab, project milestone passed all the tests."),
    (41, "Long shift, missed robotics club, behind on readings."),
    (88, "Movie night with friends, called family afterward."),
    (66, ""),
]

def mock_entries(days: int, end_offset_days: int = 1, gap_every: int = 0, today: date | None = None) -> List[Entry]:
    """
    `days` consecutive days of entries ending `end_offset_days` before today.
    With gap_every=N every Nth day is skipped, which breaks streaks.
    """
    today = today or date.today()
    last = today - timedelta(days=end_offset_days)
    data = (SAMPLES_STUDENT * ((days + len(SAMPLES_STUDENT) - 1) // len(SAMPLES_STUDENT)))[:days]

    out: List[Entry] = []
    for idx, (mood, note) in enumerate(data):
        if gap_every and (idx + 1) % gap_every == 0:
            continue
        # first entry is oldest, last is exactly at `last`
        day = last - timedelta(days=(days - 1 - idx))
        out.append(Entry(date=day.isoformat(), mood=mood, note=note))
    return out

def main():
    ap = argparse.ArgumentParser(description="Write a sample mood export for the dashboard.")
    ap.add_argument("--days", type=int, default=30, help="How many days of entries (default 30).")
    ap.add_argument("--summary-days", type=int, default=DEFAULT_DAYS,
                    help="Window for the embedded summary (default 7).")
    ap.add_argument("--end-offset-days", type=int, default=1,
                    help="How many days before today the last entry should be (default 1=yesterday; use 0 for today).")
    ap.add_argument("--gap-every", type=int, default=0, help="Skip every Nth day (default 0 = no gaps).")
    ap.add_argument("--out", type=str, default=export_path(), help="Where to write the export.")
    args = ap.parse_args()

    today = date.today()
    entries = mock_entries(max(1, args.days), max(0, args.end_offset_days), max(0, args.gap_every), today)
    doc = build_export(entries, max(1, args.summary_days), today)
    save_export(args.out, doc)

    print(f"[OK] {len(entries)} entries  streak={doc['streak']['current']}/{doc['streak']['longest']}  -> {args.out}")

if __name__ == "__main__":
    main()
