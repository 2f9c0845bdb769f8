# File: depth_crawler/stats.py
"""depth_crawler.stats: Aggregate counts derived from a finished crawl."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from depth_crawler.config import CrawlConfig
from depth_crawler.crawler.registry import VisitedRegistry

_RULE = "=" * 40


@dataclass(slots=True)
class CrawlReport:
    """Per-depth and total visited counts of one crawl run."""

    seed: str
    max_depth: int
    unique_across_depths: bool = False
    per_depth: List[int] = field(default_factory=list)
    visited: List[List[str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.per_depth)

    def count_at_depth(self, depth: int) -> int:
        return self.per_depth[depth] if 0 <= depth < len(self.per_depth) else 0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["total"] = self.total
        return data

    def json(self, *, pretty: bool = False) -> str:
        """JSON representation of the report."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def build_report(registry: VisitedRegistry, config: CrawlConfig) -> CrawlReport:
    """Collects counts for depths 0..max_depth from a completed registry."""
    depths = range(config.max_depth + 1)
    return CrawlReport(
        seed=config.seed,
        max_depth=config.max_depth,
        unique_across_depths=config.unique_across_depths,
        per_depth=[registry.count_at_depth(d) for d in depths],
        visited=[list(registry.at_depth(d)) for d in depths],
    )


def format_report(report: CrawlReport) -> str:
    """Human-readable stats block printed at the end of a run."""
    lines = [
        _RULE,
        "Web Crawler Stats:",
        f"Total Number of unique URLs crawled to: {report.total}",
    ]
    lines.extend(f"Depth {d}: {count} URLs" for d, count in enumerate(report.per_depth))
    lines.append(_RULE)
    return "\n".join(lines)


__all__ = ["CrawlReport", "build_report", "format_report"]
