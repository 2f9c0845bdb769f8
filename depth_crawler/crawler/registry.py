# depth_crawler/crawler/registry.py
"""
Per-depth record of visited URLs.
"""
from __future__ import annotations

from typing import Dict, List, Tuple


class VisitedRegistry:
    """
    One ordered, duplicate-free set of URLs per depth ``0..max_depth``.

    Entries are only ever added. The registry is not thread-safe: the crawler
    is its single writer.
    """

    def __init__(self, max_depth: int) -> None:
        if max_depth < 0:
            raise ValueError("max_depth must be non-negative")
        self.max_depth = max_depth
        # dicts keep insertion order, which makes reports reproducible
        self._levels: List[Dict[str, None]] = [{} for _ in range(max_depth + 1)]

    def record_seed(self, url: str) -> None:
        if self._levels[0]:
            raise RuntimeError("seed already recorded")
        self._levels[0][url] = None

    def is_visited_at_depth(self, url: str, depth: int) -> bool:
        if not 0 <= depth <= self.max_depth:
            return False
        return url in self._levels[depth]

    def is_visited_up_to(self, url: str, depth: int) -> bool:
        """True if *url* was recorded at any depth from 0 to *depth* inclusive."""
        last = min(depth, self.max_depth)
        return any(url in self._levels[d] for d in range(last + 1))

    def is_visited_anywhere(self, url: str) -> bool:
        """True if *url* was recorded at any depth so far, deeper ones included."""
        return self.is_visited_up_to(url, self.max_depth)

    def record(self, url: str, depth: int) -> None:
        if not 0 <= depth <= self.max_depth:
            raise ValueError(f"depth {depth} is outside 0..{self.max_depth}")
        self._levels[depth][url] = None

    def count_at_depth(self, depth: int) -> int:
        if not 0 <= depth <= self.max_depth:
            return 0
        return len(self._levels[depth])

    def total_count(self) -> int:
        return sum(len(level) for level in self._levels)

    def at_depth(self, depth: int) -> Tuple[str, ...]:
        if not 0 <= depth <= self.max_depth:
            return ()
        return tuple(self._levels[depth])

    def __repr__(self) -> str:
        counts = [len(level) for level in self._levels]
        return f"VisitedRegistry(max_depth={self.max_depth}, counts={counts})"
