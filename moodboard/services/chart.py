# moodboard/services/chart.py
from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Iterable, List, Sequence

import altair as alt
import pandas as pd

from moodboard.config import CHART_HEIGHT, CHART_PADDING, CHART_WIDTH, MOOD_MAX, MOOD_MIN
from .analytics import Entry
from .dates import display_day


@dataclass(frozen=True)
class MoodDomain:
    min: float
    max: float

    def __post_init__(self):
        if self.max <= self.min:
            raise ValueError(f"Empty mood domain [{self.min}, {self.max}]")

    def clamp(self, mood: float) -> float:
        return min(max(float(mood), self.min), self.max)


@dataclass(frozen=True)
class PlotRect:
    left: float
    top: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Plot size must be non-negative, got {self.width}x{self.height}")

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom


@dataclass(frozen=True)
class Canvas:
    width: int
    height: int
    padding: int

    @property
    def plot(self) -> PlotRect:
        return PlotRect(
            left=self.padding,
            top=self.padding,
            width=self.width - 2 * self.padding,
            height=self.height - 2 * self.padding,
        )


@dataclass(frozen=True)
class PlotPoint:
    x: float
    y: float


MOOD_DOMAIN = MoodDomain(MOOD_MIN, MOOD_MAX)
CANVAS = Canvas(CHART_WIDTH, CHART_HEIGHT, CHART_PADDING)
PLOT_RECT = CANVAS.plot


def sort_chronologically(entries: Iterable[Entry]) -> List[Entry]:
    # stable: same-day entries keep their export order
    return sorted(entries, key=lambda e: e.day)


def mood_to_y(mood: float, domain: MoodDomain = MOOD_DOMAIN, rect: PlotRect = PLOT_RECT) -> float:
    # 0 at max mood, 1 at min mood; screen y grows downward
    normalized = (domain.max - domain.clamp(mood)) / (domain.max - domain.min)
    return rect.top + normalized * rect.height


def project_points(
    entries: Sequence[Entry],
    domain: MoodDomain = MOOD_DOMAIN,
    rect: PlotRect = PLOT_RECT,
) -> List[PlotPoint]:
    """
    Map entries to plot coordinates in the order given (callers sort first).
    x is spaced evenly by index, not by date; y is the clamped mood scaled
    into the rectangle, higher mood -> smaller y.
    """
    n = len(entries)
    x_step = rect.width / (n - 1) if n > 1 else 0.0
    return [
        PlotPoint(x=rect.left + x_step * i, y=mood_to_y(e.mood, domain, rect))
        for i, e in enumerate(entries)
    ]


# ---------- Renderers ----------
def points_frame(entries: Sequence[Entry], points: Sequence[PlotPoint]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "x": [p.x for p in points],
            "y": [p.y for p in points],
            "date": [display_day(e.date) for e in entries],
            "mood": [e.mood for e in entries],
            "note": [e.note or "—" for e in entries],
        }
    )


def trend_chart(entries: Sequence[Entry], points: Sequence[PlotPoint], rect: PlotRect = PLOT_RECT) -> alt.LayerChart:
    """Interactive line + dots over the projected points (axes pinned to the plot rectangle)."""
    df = points_frame(entries, points)
    base = alt.Chart(df).encode(
        x=alt.X("x:Q", axis=None, scale=alt.Scale(domain=[rect.left, rect.right])),
        # reversed so that smaller screen y (higher mood) is drawn on top
        y=alt.Y("y:Q", axis=None, scale=alt.Scale(domain=[rect.top, rect.bottom], reverse=True)),
    )
    line = base.mark_line(strokeWidth=3, color="#2563eb")
    dots = base.mark_circle(size=70, color="#93c5fd", opacity=1).encode(
        tooltip=[
            alt.Tooltip("date:N", title="Date"),
            alt.Tooltip("mood:Q", title="Mood"),
            alt.Tooltip("note:N", title="Note"),
        ]
    )
    labels = base.mark_text(dy=-12, color="#475569").encode(text="mood:Q")
    return (line + dots + labels).properties(height=rect.height).interactive()


def render_svg(entries: Sequence[Entry], points: Sequence[PlotPoint], canvas: Canvas = CANVAS) -> str:
    if not points:
        return '<div class="empty">No data to chart.</div>'

    w, h, pad = canvas.width, canvas.height, canvas.padding
    font = 'font-family="Helvetica, Arial, sans-serif" font-size="12" fill="#475569"'
    coords = " ".join(f"{p.x:g},{p.y:g}" for p in points)
    circles = "".join(
        f'<circle cx="{p.x:g}" cy="{p.y:g}" r="5" fill="#2563eb" stroke="white" stroke-width="2">'
        f"<title>{escape(e.date)} ({e.mood})</title></circle>"
        for e, p in zip(entries, points)
    )
    return (
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" role="img" aria-label="Mood over time (1-100)">'
        f'<rect x="0" y="0" width="{w}" height="{h}" fill="#f8fafc" />'
        f'<polyline fill="none" stroke="#2563eb" stroke-width="3" points="{coords}"></polyline>'
        f"{circles}"
        f'<text x="{pad}" y="{h - pad / 3:g}" {font}>Older</text>'
        f'<text x="{w - pad}" y="{h - pad / 3:g}" {font} text-anchor="end">Newer</text>'
        f'<text x="{pad}" y="{pad / 1.8:g}" {font}>Mood (1-100)</text>'
        "</svg>"
    )
