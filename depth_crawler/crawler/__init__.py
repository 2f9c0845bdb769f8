"""depth_crawler.crawler: traversal engine and its fetch/store collaborators."""

from depth_crawler.crawler.crawler import DepthCrawler
from depth_crawler.crawler.fetcher import Fetcher
from depth_crawler.crawler.models import FetchError, NodeError, PageData, PersistError
from depth_crawler.crawler.registry import VisitedRegistry
from depth_crawler.crawler.sink import FileSink

__all__ = [
    "DepthCrawler",
    "Fetcher",
    "FileSink",
    "FetchError",
    "NodeError",
    "PageData",
    "PersistError",
    "VisitedRegistry",
]
