# File: link_scout/report/stream.py
"""link_scout.report.stream: line-by-line report written while the crawl runs."""

from __future__ import annotations

import click

from link_scout.crawler.models import CheckResult


class ReportSink:
    """Writes lifecycle and result lines through :func:`click.echo`.

    Subclass it (or pass ``err=True``) to redirect the stream.
    """

    def __init__(self, *, err: bool = False) -> None:
        self.err = err

    def echo(self, line: str) -> None:
        click.echo(line, err=self.err)

    def started(self) -> None:
        self.echo("Starting...")

    def result(self, result: CheckResult) -> None:
        self.echo(result.line())

    def done(self) -> None:
        self.echo("Done!")


class NullSink(ReportSink):
    """Discards every line."""

    def echo(self, line: str) -> None:
        pass
