#!/usr/bin/env python3
# scripts/summarize_export.py
from __future__ import annotations

import argparse
import os, sys
from datetime import date

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from moodboard.config import DEFAULT_DAYS, export_path, log_json, log_level
from moodboard.logging_config import setup_logging
from moodboard.services.analytics import compute_streaks, filter_by_days, summarize
from moodboard.services.dates import parse_day
from moodboard.services.export import load_export

def _plural(n: int, word: str = "day") -> str:
    return f"{n} {word}{'' if n == 1 else 's'}"

def main():
    ap = argparse.ArgumentParser(description="Print summary and streak stats for an export.")
    ap.add_argument("--export", type=str, default=export_path(), help="Export JSON to read.")
    ap.add_argument("--days", type=int, default=DEFAULT_DAYS, help="Trailing window for the summary (default 7).")
    ap.add_argument("--today", type=str, default=None, help="Reference day YYYY-MM-DD (default: today).")
    args = ap.parse_args()

    setup_logging(json_mode=log_json(), level=log_level())

    if args.days <= 0:
        raise SystemExit("--days must be positive.")
    try:
        today = parse_day(args.today) if args.today else date.today()
        doc = load_export(args.export)
    except FileNotFoundError:
        raise SystemExit(f"No export found at {args.export}.")
    except ValueError as e:
        raise SystemExit(str(e))

    streak = compute_streaks(doc.entries, today)
    summary = summarize(filter_by_days(doc.entries, args.days, today))
    if not summary.has_data:
        print(f"No entries in the last {_plural(args.days)}.")
    else:
        print(f"Entries: {summary.count}")
        print(f"Average mood: {summary.average_mood:.1f}")
        print(f"Best day: {summary.best.date} ({summary.best.mood})")
        print(f"Worst day: {summary.worst.date} ({summary.worst.mood})")
        print(f"Mood volatility (std dev): {summary.stddev:.1f}")
    print(f"Current streak: {_plural(streak.current)}")
    print(f"Longest streak: {_plural(streak.longest)}")

if __name__ == "__main__":
    main()
