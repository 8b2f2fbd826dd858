# File: link_scout/report/__init__.py
"""link_scout.report: live report stream and file reports (JSON and HTML)."""

from __future__ import annotations

from link_scout.report.html_report import render_html
from link_scout.report.json_report import render_json
from link_scout.report.stream import NullSink, ReportSink

__all__ = ["ReportSink", "NullSink", "render_json", "render_html"]
