# File: depth_crawler/utils.py
"""depth_crawler.utils: Location helpers shared by the config, the fetcher and the sink."""

from __future__ import annotations

import re
from typing import Any, Collection, List, Sequence
from urllib.parse import urlsplit

from depth_crawler.logger import logger

__all__: Sequence[str] = (
    "is_valid_location",
    "sanitize",
    "remove_duplicates",
)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9.-]")
# characters a URI may not carry unescaped
_ILLEGAL_URI_CHARS = re.compile(r'[\s<>"{}|\\^`]')


def is_valid_location(loc: Any) -> bool:
    """Checks that *loc* is an absolute http(s) URL with a host."""
    if not isinstance(loc, str) or not loc.startswith("http"):
        return False
    if _ILLEGAL_URI_CHARS.search(loc):
        return False
    try:
        parts = urlsplit(loc)
        # .port raises ValueError on a non-numeric or out-of-range port
        parts.port
    except ValueError as exc:
        logger.debug("Malformed location %s: %s", loc, exc)
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def sanitize(loc: str) -> str:
    """Replaces every character outside ``[A-Za-z0-9.-]`` with ``_``."""
    return _UNSAFE_CHARS.sub("_", loc)


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Removes duplicate URLs, keeping the first occurrence order."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique
