# File: depth_crawler/engine.py
"""depth_crawler.engine: Top-level entry points used by the CLI and by library callers."""

from __future__ import annotations

import asyncio

from depth_crawler.config import CrawlConfig
from depth_crawler.crawler.crawler import DepthCrawler
from depth_crawler.logger import logger
from depth_crawler.stats import CrawlReport

__all__ = ["start_crawl", "run"]


async def start_crawl(config: CrawlConfig) -> CrawlReport:
    """
    Runs a DepthCrawler inside its context and returns the CrawlReport.

    Parameters
    ----------
    config : CrawlConfig
        Validated run configuration.
    """
    async with DepthCrawler(config) as crawler:
        return await crawler.crawl()


def run(config: CrawlConfig) -> CrawlReport:
    """Synchronous wrapper around :func:`start_crawl`."""
    try:
        return asyncio.run(start_crawl(config))
    except Exception as exc:
        logger.error("Crawl failed: %s", exc)
        raise
