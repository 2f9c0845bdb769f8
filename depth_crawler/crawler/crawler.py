# === FILE: depth_crawler/crawler/crawler.py ===
from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from aiohttp import ClientSession, ClientTimeout

from depth_crawler.config import CrawlConfig
from depth_crawler.crawler.fetcher import Fetcher
from depth_crawler.crawler.models import FetchError, NodeError, PageData
from depth_crawler.crawler.registry import VisitedRegistry
from depth_crawler.crawler.sink import FileSink
from depth_crawler.logger import logger
from depth_crawler.stats import CrawlReport, build_report
from depth_crawler.utils import is_valid_location

__all__ = ("DepthCrawler",)


class DepthCrawler:
    """
    Depth-bounded crawler with a per-page fan-out cap.

    Every accepted page is stored under ``<depth>/`` by the sink. Pages are
    visited one at a time, depth-first: a page and all its descendants are
    finished before its next sibling starts.

    *fetcher* needs ``async fetch(url) -> PageData`` and ``links(page) -> list``;
    *sink* needs ``persist(depth, url, content)``. Both raise
    :class:`NodeError` subclasses on failure.
    """

    def __init__(self, config: CrawlConfig, fetcher: Any = None, sink: Any = None) -> None:
        if not is_valid_location(config.seed):
            raise ValueError(f"{config.seed} is not a valid url")
        if config.max_fanout == 0 and config.max_depth > 0:
            raise ValueError("max_fanout cannot be 0 if max_depth is greater than 0")
        self.config = config
        self.fetcher = fetcher
        self.sink = sink if sink is not None else FileSink(config.output_dir)
        self.registry = VisitedRegistry(config.max_depth)
        self.session: Optional[ClientSession] = None
        self._finished = False

    async def __aenter__(self) -> DepthCrawler:
        if self.fetcher is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
            )
            self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> CrawlReport:
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized, use 'async with DepthCrawler(...)'")
        if self._finished:
            raise RuntimeError("a DepthCrawler instance runs only once")
        seed = self.config.seed
        logger.info(
            "Starting to crawl from %s, max_fanout = %d, max_depth = %d, unique = %s",
            seed, self.config.max_fanout, self.config.max_depth, self.config.unique_across_depths,
        )
        start = time.monotonic()
        self.registry.record_seed(seed)
        page = await self._store(seed, 0)
        if page is None:
            logger.warning("Seed %s could not be stored, nothing to expand", seed)
        else:
            await self._visit(page, 0)
        self._finished = True
        duration = time.monotonic() - start
        logger.info(
            "Crawling complete! %d URLs in %.2f s", self.registry.total_count(), duration
        )
        return self.report()

    def report(self) -> CrawlReport:
        if not self._finished:
            raise RuntimeError("stats are only available after crawl() has returned")
        return build_report(self.registry, self.config)

    async def _store(self, url: str, depth: int) -> Optional[PageData]:
        """Fetch *url* and persist it at *depth*; None if either step fails."""
        try:
            page = await self.fetcher.fetch(url)
            self.sink.persist(depth, url, page.content)
        except NodeError as exc:
            logger.warning("Skipping %s at depth %d: %s", url, depth, exc.reason)
            return None
        logger.debug("Stored %s at depth %d", url, depth)
        return page

    def _candidates(self, page: PageData) -> List[str]:
        try:
            links = self.fetcher.links(page)
        except FetchError as exc:
            logger.warning("Error extracting urls from %s: %s", page.url, exc.reason)
            return []
        return [link for link in links if is_valid_location(link)]

    async def _visit(self, page: PageData, depth: int) -> None:
        if depth == self.config.max_depth:
            return

        next_depth = depth + 1
        frontier: Dict[str, PageData] = {}
        for url in self._candidates(page):
            if len(frontier) >= self.config.max_fanout:
                break
            if self.registry.is_visited_at_depth(url, next_depth):
                continue
            # depth-first order: a deeper level may already hold the url from an earlier subtree
            if self.config.unique_across_depths and self.registry.is_visited_anywhere(url):
                continue
            child = await self._store(url, next_depth)
            if child is None:
                continue
            frontier[url] = child
            self.registry.record(url, next_depth)

        logger.debug("%s: %d URLs accepted for depth %d", page.url, len(frontier), next_depth)
        for child in frontier.values():
            await self._visit(child, next_depth)
