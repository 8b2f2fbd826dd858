# File: link_scout/engine.py
"""link_scout.engine: wrapper that runs one check inside a crawler session."""

from __future__ import annotations

from typing import List, Optional

from link_scout.config import CheckerConfig
from link_scout.crawler.crawler import LinkCrawler
from link_scout.crawler.models import CheckResult
from link_scout.logger import logger
from link_scout.report.stream import ReportSink

__all__ = ["start_check"]


async def start_check(cfg: CheckerConfig, sink: Optional[ReportSink] = None) -> List[CheckResult]:
    """
    Run the crawler in its own HTTP session and return every CheckResult.

    Parameters
    ----------
    cfg : CheckerConfig
        Run configuration.
    sink : ReportSink, optional
        Receives ``Starting...``, one line per result and ``Done!``.

    Returns
    -------
    List[CheckResult]
        Results in completion order.
    """
    logger.info("Starting check of %s", cfg.url)
    async with LinkCrawler(cfg, sink) as crawler:
        return await crawler.crawl()
