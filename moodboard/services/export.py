# moodboard/services/export.py
from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pandas as pd
import structlog

from .analytics import Entry, Streak, Summary, compute_streaks, filter_by_days, summarize
from .dates import DayLike, parse_day

logger = structlog.get_logger()


class ExportFormatError(ValueError):
    """The export document does not have the shape the dashboard expects."""


@dataclass(frozen=True)
class ExportMeta:
    generated_at: str
    days: int


@dataclass(frozen=True)
class ExportDocument:
    meta: ExportMeta
    entries: List[Entry] = field(default_factory=list)
    # as written by the exporting tool; the dashboard re-derives both
    summary: Optional[Dict[str, Any]] = None
    streak: Optional[Dict[str, Any]] = None


# ---------- Loading ----------
def _parse_entries(raw_entries: Any) -> List[Entry]:
    if not isinstance(raw_entries, list):
        raise ExportFormatError("'entries' must be a list")
    out: List[Entry] = []
    for i, raw in enumerate(raw_entries):
        if not isinstance(raw, dict) or "date" not in raw or "mood" not in raw:
            raise ExportFormatError(f"entries[{i}] needs 'date' and 'mood'")
        try:
            entry = Entry.from_dict(raw)
            parse_day(entry.date)  # fail at load, not mid-render
        except (TypeError, ValueError) as e:
            raise ExportFormatError(f"entries[{i}]: {e}") from e
        out.append(entry)
    return out


def parse_export(data: Any) -> ExportDocument:
    if not isinstance(data, dict):
        raise ExportFormatError("Export must be a JSON object")
    meta = data.get("meta")
    if not isinstance(meta, dict):
        raise ExportFormatError("Export is missing 'meta'")
    try:
        days = int(meta.get("days", 0))
    except (TypeError, ValueError) as e:
        raise ExportFormatError(f"meta.days: {e}") from e

    summary = data.get("summary")
    streak = data.get("streak")
    return ExportDocument(
        meta=ExportMeta(generated_at=str(meta.get("generated_at") or ""), days=days),
        entries=_parse_entries(data.get("entries", [])),
        summary=summary if isinstance(summary, dict) else None,
        streak=streak if isinstance(streak, dict) else None,
    )


def load_export(path: str) -> ExportDocument:
    """
    Read an export JSON file.
    Missing file -> FileNotFoundError; unreadable file (directory, no
    permission, not UTF-8), bad JSON or bad shape -> ExportFormatError.
    """
    try:
        with open(path, encoding="utf-8") as f:
            txt = f.read()
    except FileNotFoundError:
        raise
    except UnicodeDecodeError as e:
        raise ExportFormatError(f"{path} is not UTF-8 text: {e}") from e
    except OSError as e:
        raise ExportFormatError(f"Could not read {path}: {e.strerror or e}") from e
    try:
        data = json.loads(txt)
    except json.JSONDecodeError as e:
        raise ExportFormatError(f"{path} is not valid JSON: {e}") from e
    doc = parse_export(data)
    logger.info("export.loaded", path=path, entries=len(doc.entries), days=doc.meta.days)
    return doc


# ---------- Building ----------
def _day_mood(entry: Optional[Entry]) -> Optional[Dict[str, Any]]:
    if entry is None:
        return None
    return {"date": entry.date, "mood": entry.mood}


def summary_dict(summary: Summary) -> Dict[str, Any]:
    return {
        "has_data": summary.has_data,
        "count": summary.count,
        "average_mood": round(summary.average_mood, 1),
        "stddev": round(summary.stddev, 1),
        "best": _day_mood(summary.best),
        "worst": _day_mood(summary.worst),
    }


def streak_dict(streak: Streak) -> Dict[str, int]:
    return {"current": streak.current, "longest": streak.longest}


def build_export(
    entries: List[Entry],
    days: int,
    now: DayLike,
    generated_at: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Export document in the exporting tool's layout: summary over the trailing
    `days` window, streak over every entry, entries in their original order.
    """
    if generated_at is None:
        generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    recent = filter_by_days(entries, days, now)
    return {
        "meta": {"generated_at": generated_at, "days": days},
        "summary": summary_dict(summarize(recent)),
        "streak": streak_dict(compute_streaks(entries, now)),
        "entries": [e.to_dict() for e in entries],
    }


def save_export(path: str, document: Dict[str, Any]) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)
        f.write("\n")


# ---------- Consistency ----------
_FRACTION_RE = re.compile(r"\.(\d+)")


def _generated_day(doc: ExportDocument):
    # exporters may write anywhere from 1 to 9 fractional digits; fromisoformat
    # on 3.10 only takes 3 or 6
    ts = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), doc.meta.generated_at, count=1)
    try:
        return datetime.fromisoformat(ts.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def check_precomputed(doc: ExportDocument) -> List[str]:
    """
    Re-derive the embedded summary/streak for the export's own window and
    generation day. Returns the names of fields that disagree (logged as a
    warning); empty when they match or cannot be checked.
    """
    day = _generated_day(doc)
    if day is None or doc.meta.days <= 0:
        return []

    mismatched: List[str] = []
    if doc.summary is not None:
        derived = summary_dict(summarize(filter_by_days(doc.entries, doc.meta.days, day)))
        for key, value in derived.items():
            if key in doc.summary and doc.summary[key] != value:
                mismatched.append(f"summary.{key}")
    if doc.streak is not None:
        derived = streak_dict(compute_streaks(doc.entries, day))
        for key, value in derived.items():
            if key in doc.streak and doc.streak[key] != value:
                mismatched.append(f"streak.{key}")

    if mismatched:
        logger.warning("export.precomputed_mismatch", fields=mismatched, generated_at=doc.meta.generated_at)
    return mismatched


# ---------- Table ----------
def entries_frame(entries: List[Entry]) -> pd.DataFrame:
    """Entries as a DataFrame, newest first."""
    if not entries:
        return pd.DataFrame(columns=["date", "mood", "note"])
    df = pd.DataFrame([e.to_dict() for e in entries])
    df["date"] = [e.day for e in entries]
    return df.sort_values("date", ascending=False, kind="stable").reset_index(drop=True)
