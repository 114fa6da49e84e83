"""Tests for the static HTML report."""

from __future__ import annotations

from moodboard.services.analytics import summarize
from moodboard.services.report import build_report_html, write_report

from conftest import make_entry


def test_report_with_data():
    samples = [make_entry("2024-03-05", 30), make_entry("2024-03-04", 90)]
    html = build_report_html(samples, summarize(samples), 7)
    assert html.startswith("<!DOCTYPE html>")
    assert "Last 7 days of mood entries." in html
    assert "60.00" in html
    assert "2024-03-04 (90)" in html
    assert "2024-03-05 (30)" in html
    assert "<svg" in html


def test_report_without_data():
    html = build_report_html([], summarize([]), 1)
    assert "Last 1 day of mood entries." in html
    assert html.count("n/a") == 3
    assert "No data to chart." in html


def test_write_report_creates_dirs(tmp_path):
    path = tmp_path / "out" / "report.html"
    write_report(str(path), "<html></html>")
    assert path.read_text(encoding="utf-8") == "<html></html>"
