# depth_crawler/crawler/fetcher.py
"""
Fetcher module: one GET per page, failures surface as FetchError.
"""
from __future__ import annotations

import asyncio
from typing import List

from aiohttp import ClientError, ClientSession

from depth_crawler.config import CrawlConfig
from depth_crawler.crawler.link_extractor import extract_links
from depth_crawler.crawler.models import FetchError, PageData
from depth_crawler.logger import logger

_XML_TYPES = ("application/xhtml+xml", "application/xml")


def _is_text_type(mime: str) -> bool:
    return mime.startswith("text/") or mime in _XML_TYPES or mime.endswith("+xml")


class Fetcher:
    """Retrieves page content and its outgoing links. No retries, no rate limiting."""

    def __init__(self, session: ClientSession, config: CrawlConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> PageData:
        """
        Fetch the URL once.

        Returns PageData on success, raises FetchError on any failure.
        """
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                if resp.status >= 400:
                    raise FetchError(url, f"HTTP {resp.status}")
                mime = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
                # a missing Content-Type is treated as HTML
                if mime and not _is_text_type(mime):
                    raise FetchError(url, f"unsupported content type {mime}")
                text = await resp.text()
                return PageData(url, text, base_url=str(resp.url))
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "timed out") from exc
        except (ClientError, UnicodeDecodeError, ValueError) as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

    def links(self, page: PageData) -> List[str]:
        """Outgoing locations of an already fetched page, de-duplicated, in document order."""
        try:
            found = extract_links(page)
        except Exception as exc:
            raise FetchError(page.url, f"cannot extract links: {exc}") from exc
        logger.debug("Extracted %d links from %s", len(found), page.url)
        return found
