#!/usr/bin/env python3
# scripts/render_report.py
from __future__ import annotations

import argparse
import os, sys
from datetime import date

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from moodboard.config import DEFAULT_DAYS, export_path, log_json, log_level
from moodboard.logging_config import setup_logging
from moodboard.services.analytics import filter_by_days, summarize
from moodboard.services.dates import parse_day
from moodboard.services.export import load_export
from moodboard.services.report import build_report_html, write_report

def main():
    ap = argparse.ArgumentParser(description="Render a static HTML mood report from an export.")
    ap.add_argument("--export", type=str, default=export_path(), help="Export JSON to read.")
    ap.add_argument("--days", type=int, default=DEFAULT_DAYS, help="Trailing window (default 7).")
    ap.add_argument("--today", type=str, default=None, help="Reference day YYYY-MM-DD (default: today).")
    ap.add_argument("--out", type=str, default="report.html", help="Where to write the report.")
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

    samples = filter_by_days(doc.entries, args.days, today)
    html = build_report_html(samples, summarize(samples), args.days)
    write_report(args.out, html)
    print(f"Report written to {args.out}")

if __name__ == "__main__":
    main()
