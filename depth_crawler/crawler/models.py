# depth_crawler/crawler/models.py
"""
Data models and per-node error types of the DepthCrawler traversal.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(slots=True)
class PageData:
    """Holds the requested URL, the page content and the final response URL."""

    url: str
    content: Union[str, bytes]
    base_url: Optional[str] = None


class NodeError(Exception):
    """A single page could not be fetched or stored; the crawl goes on without it."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class FetchError(NodeError):
    """Raised by the fetcher for network, HTTP status, content-type or parse failures."""


class PersistError(NodeError):
    """Raised by the sink when page content cannot be written."""
