# moodboard/services/report.py
from __future__ import annotations

import os
from html import escape
from typing import List

import structlog

from .analytics import Entry, Summary
from .chart import CANVAS, project_points, render_svg, sort_chronologically
from .dates import format_day

logger = structlog.get_logger()

_STYLE = (
    "body{font-family:Helvetica,Arial,sans-serif;background:#0f172a;color:#e2e8f0;margin:0;padding:32px;}"
    "h1{margin:0 0 8px 0;font-size:28px;}"
    "p.lead{margin:0 0 24px 0;color:#cbd5e1;}"
    ".cards{display:grid;grid-template-columns:repeat(auto-fit,minmax(200px,1fr));gap:16px;margin-bottom:24px;}"
    ".card{background:#1e293b;border:1px solid #334155;border-radius:12px;padding:16px;}"
    ".label{font-size:12px;letter-spacing:0.08em;text-transform:uppercase;color:#94a3b8;"
    "margin-bottom:6px;display:block;}"
    ".value{font-size:22px;font-weight:700;}"
    ".chart{background:#fff;border-radius:12px;border:1px solid #e2e8f0;padding:12px;}"
    ".chart h2{color:#0f172a;margin:0 0 8px 0;}"
    ".empty{color:#334155;font-style:italic;}"
)


def _card(label: str, value: str) -> str:
    return f'<div class="card"><span class="label">{label}</span><div class="value">{escape(value)}</div></div>'


def _day_value(entry: Entry | None) -> str:
    return f"{format_day(entry.date)} ({entry.mood})" if entry else "n/a"


def build_report_html(samples: List[Entry], summary: Summary, days: int) -> str:
    """Static single-page report: summary cards plus the SVG trend chart."""
    ordered = sort_chronologically(samples)
    svg = render_svg(ordered, project_points(ordered, rect=CANVAS.plot), CANVAS)
    avg = f"{summary.average_mood:.2f}" if summary.has_data else "n/a"
    cards = "".join([
        _card("Entries", str(summary.count)),
        _card("Average Mood", avg),
        _card("Best Day", _day_value(summary.best)),
        _card("Toughest Day", _day_value(summary.worst)),
    ])
    return (
        '<!DOCTYPE html><html><head><meta charset="UTF-8"><title>Mood Report</title>'
        f"<style>{_STYLE}</style></head><body>"
        "<h1>Mood Report</h1>"
        f'<p class="lead">Last {days} day{"" if days == 1 else "s"} of mood entries.</p>'
        f'<div class="cards">{cards}</div>'
        f'<div class="chart"><h2>Mood Over Time</h2>{svg}</div>'
        "</body></html>"
    )


def write_report(path: str, html: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    logger.info("report.written", path=path, size=len(html))
