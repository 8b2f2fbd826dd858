# link_scout/crawler/checker.py
"""
Reachability probe: one GET per URL, classified as OK or Broken.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession

from link_scout.crawler.models import CheckResult, Outcome
from link_scout.logger import logger


class ReachabilityChecker:
    """Classifies URLs by the status of a single GET request.

    Only HTTP 200 counts as OK unless *accept_2xx* is set, in which case any
    2xx does. Redirects are followed by the session, so the final status is
    what gets classified. Transport failures are Broken, never raised.
    """

    def __init__(self, session: ClientSession, accept_2xx: bool = False) -> None:
        self.session = session
        self.accept_2xx = accept_2xx

    def is_ok(self, status: int) -> bool:
        if self.accept_2xx:
            return 200 <= status < 300
        return status == 200

    async def check(self, url: str) -> CheckResult:
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                status = resp.status
        except asyncio.TimeoutError:
            logger.debug("Probe timed out: %s", url)
            return CheckResult(url, Outcome.BROKEN, error="timeout")
        except ClientError as exc:
            logger.debug("Probe failed: %s: %s", url, exc)
            return CheckResult(url, Outcome.BROKEN, error=str(exc) or type(exc).__name__)

        outcome = Outcome.OK if self.is_ok(status) else Outcome.BROKEN
        logger.debug("Probe %s -> HTTP %s (%s)", url, status, outcome.value)
        return CheckResult(url, outcome, status=status)
