# moodboard/ui.py
from __future__ import annotations

import os
from datetime import date
from typing import List, Tuple

import streamlit as st
import structlog

from .config import APP_TITLE, export_path
from .services.analytics import (
    Entry,
    RangeSelection,
    Streak,
    Summary,
    compute_streaks,
    filter_entries,
    summarize,
)
from .services.chart import project_points, sort_chronologically, trend_chart
from .services.dates import display_day
from .services.export import ExportDocument, ExportFormatError, check_precomputed, entries_frame, load_export

logger = structlog.get_logger()

PLACEHOLDER = "—"


# ---------- Pure formatting helpers ----------
def range_label(days: int) -> str:
    return f"{days} day{'' if days == 1 else 's'}"


def _day_mood_label(entry: Entry | None) -> str:
    if entry is None:
        return PLACEHOLDER
    return f"{display_day(entry.date)} ({entry.mood})"


def summary_cards(summary: Summary, streak: Streak, selection: RangeSelection, total_days: int) -> List[Tuple[str, str]]:
    """(label, value) pairs for the metric row. `total_days` labels the all-time range."""
    days = selection.days if selection.days is not None else total_days
    return [
        ("Entries", str(summary.count)),
        ("Avg mood", f"{summary.average_mood:.1f}" if summary.has_data else PLACEHOLDER),
        ("Volatility", f"{summary.stddev:.1f}" if summary.has_data else PLACEHOLDER),
        ("Current streak", f"{streak.current}d"),
        ("Longest streak", f"{streak.longest}d"),
        ("Best day", _day_mood_label(summary.best)),
        ("Worst day", _day_mood_label(summary.worst)),
        ("Range", range_label(days)),
    ]


def span_days(entries: List[Entry], today: date) -> int:
    """Days from the oldest entry through `today` (at least 1)."""
    if not entries:
        return 1
    oldest = min(e.day for e in entries)
    return max(1, (today - oldest).days + 1)


# ---------- Data ----------
@st.cache_data(show_spinner=False)
def _load_cached(path: str, mtime: float) -> ExportDocument:
    # mtime is part of the cache key so a re-export is picked up
    doc = load_export(path)
    check_precomputed(doc)
    return doc


def _load(path: str) -> ExportDocument | None:
    if not os.path.exists(path):
        st.info(
            f"No export found at `{path}`. Generate one with "
            "`python scripts/generate_mock_export.py` or point the sidebar at your own file."
        )
        return None
    try:
        return _load_cached(path, os.path.getmtime(path))
    except ExportFormatError as e:
        logger.error("export.invalid", path=path, error=str(e))
        st.error(f"Could not read export: {e}")
        return None


# ---------- Sections ----------
def _render_cards(cards: List[Tuple[str, str]]):
    for row_start in range(0, len(cards), 4):
        cols = st.columns(4)
        for col, (label, value) in zip(cols, cards[row_start:row_start + 4]):
            with col:
                st.metric(label, value)


def _render_chart(filtered: List[Entry]):
    st.markdown("#### Mood trend")
    if not filtered:
        st.info("No data for this range yet.")
        return
    ordered = sort_chronologically(filtered)
    points = project_points(ordered)
    st.caption("Scale: 1–100 · evenly spaced, older → newer")
    st.altair_chart(trend_chart(ordered, points), use_container_width=True)


def _render_table(filtered: List[Entry]):
    st.markdown("#### Entries")
    if not filtered:
        st.info("No entries yet.")
        return
    df = entries_frame(filtered)
    df["date"] = df["date"].apply(display_day)
    df["note"] = df["note"].apply(lambda s: s or PLACEHOLDER)
    st.caption(f"Newest first · {len(df)} shown")
    st.dataframe(df, use_container_width=True, hide_index=True)


# ---------- Main render ----------
def render_app():
    st.title(f"📈 {APP_TITLE}")

    with st.sidebar:
        st.subheader("Data")
        path = st.text_input("Export file", value=export_path())
        today = st.date_input("As of", value=date.today())
        labels = [sel.label for sel in RangeSelection]
        label = st.radio("Range", labels, index=0, horizontal=True)

    doc = _load(path)
    if doc is None:
        return

    selection = RangeSelection.from_label(label)
    entries = doc.entries
    filtered = filter_entries(entries, selection, today)
    summary = summarize(filtered)
    streak = compute_streaks(entries, today)

    st.caption(
        f"Exported {doc.meta.generated_at or 'at an unknown time'} · "
        f"{len(entries)} entries in file · as of {display_day(today)}"
    )

    _render_cards(summary_cards(summary, streak, selection, span_days(entries, today)))
    st.divider()

    c1, c2 = st.columns(2)
    with c1:
        _render_chart(filtered)
    with c2:
        _render_table(filtered)
