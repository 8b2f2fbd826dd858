# File: link_scout/report/html_report.py
"""link_scout.report.html_report: HTML report rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from link_scout.aggregator import CheckReport

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_NAME = "report.html.j2"


def render_html(
    report: CheckReport,
    template_dir: Optional[Union[Path, str]],
    output_path: Union[Path, str],
) -> Path:
    """Render *report* through ``report.html.j2`` and save it.

    Args:
        report: aggregated CheckReport.
        template_dir: directory holding ``report.html.j2``; the bundled
            template is used when None.
        output_path: target HTML file.

    Returns:
        Path of the written file.
    """
    template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = {
        "root_url": report.root_url,
        "broken": report.broken,
        "ok": report.ok,
        "total": report.total,
    }

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
