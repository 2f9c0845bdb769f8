# File: tests/conftest.py
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

import pytest

from depth_crawler.config import CrawlConfig
from depth_crawler.crawler.models import FetchError, PageData, PersistError
from depth_crawler.crawler.sink import FileSink

SEED = "http://example.com/"


def loc(name: str) -> str:
    """Absolute test URL for a short page name; the seed is ``S``."""
    return SEED if name == "S" else f"http://example.com/{name}"


class GraphFetcher:
    """
    In-memory fetcher over a link graph ``{page: [children, ...]}``.
    Pages listed in *broken* raise FetchError.
    """

    def __init__(self, graph: Dict[str, Iterable[str]], broken: Iterable[str] = ()) -> None:
        self.graph = {k: list(v) for k, v in graph.items()}
        self.broken: Set[str] = set(broken)
        self.fetched: List[str] = []
        self.expanded: List[str] = []

    async def fetch(self, url: str) -> PageData:
        self.fetched.append(url)
        if url in self.broken:
            raise FetchError(url, "broken")
        return PageData(url, f"<html><body>{url}</body></html>")

    def links(self, page: PageData) -> List[str]:
        self.expanded.append(page.url)
        return list(self.graph.get(page.url, []))


class RecordingSink(FileSink):
    """FileSink that remembers every write and can be told to fail for some URLs."""

    def __init__(self, root: Path, failing: Iterable[str] = ()) -> None:
        super().__init__(root)
        self.failing: Set[str] = set(failing)
        self.writes: List[tuple] = []

    def persist(self, depth, url, content):
        if url in self.failing:
            raise PersistError(url, "disk full")
        self.writes.append((depth, url))
        return super().persist(depth, url, content)


@pytest.fixture()
def make_config(tmp_path):
    """
    Factory for a valid CrawlConfig writing into ``tmp_path``.
    """
    def _make(
        max_fanout: int = 2,
        max_depth: int = 1,
        unique: bool = False,
        seed: str = SEED,
        output_dir: Optional[Path] = None,
    ) -> CrawlConfig:
        return CrawlConfig(
            seed=seed,
            max_fanout=max_fanout,
            max_depth=max_depth,
            unique_across_depths=unique,
            output_dir=output_dir or tmp_path,
            timeout=2.0,
        )

    return _make


@pytest.fixture()
def sink(tmp_path) -> RecordingSink:
    return RecordingSink(tmp_path)
