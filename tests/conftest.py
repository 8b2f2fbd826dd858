# File: tests/conftest.py
from __future__ import annotations

from collections import Counter
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import List

import pytest
import pytest_asyncio
from aiohttp import web

from link_scout.config import CheckerConfig
from link_scout.report.stream import ReportSink


class RecordingSink(ReportSink):
    """Keeps report lines in memory instead of printing them."""

    def __init__(self) -> None:
        super().__init__()
        self.lines: List[str] = []

    def echo(self, line: str) -> None:
        self.lines.append(line)


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def hits() -> Counter:
    """Request counter shared by the handlers of a test server."""
    return Counter()


@pytest_asyncio.fixture
async def serve(unused_tcp_port_factory) -> AsyncIterator[Callable[[web.Application], Awaitable[str]]]:
    """
    Start aiohttp applications on free local ports.
    Yields a coroutine function returning the base URL of the started app.
    """
    runners: List[web.AppRunner] = []

    async def _start(app: web.Application) -> str:
        port = unused_tcp_port_factory()
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return f"http://127.0.0.1:{port}"

    try:
        yield _start
    finally:
        for runner in runners:
            await runner.cleanup()


@pytest.fixture()
def make_config():
    """Factory for CheckerConfig with test-friendly defaults."""

    def _make(url: str, **kwargs) -> CheckerConfig:
        kwargs.setdefault("user_agent", "TestAgent/1.0")
        kwargs.setdefault("timeout", 5.0)
        return CheckerConfig(url=url, **kwargs)

    return _make

