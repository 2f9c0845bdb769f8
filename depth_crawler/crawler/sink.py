# depth_crawler/crawler/sink.py
"""
Sink module: stores page content as ``<root>/<depth>/<sanitized url>.html``.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

from depth_crawler.crawler.models import PersistError
from depth_crawler.utils import sanitize


class FileSink:
    """Writes pages under one directory per depth, overwriting existing files."""

    def __init__(self, root: Union[str, Path] = ".") -> None:
        self.root = Path(root)

    def path_for(self, depth: int, url: str) -> Path:
        return self.root / str(depth) / f"{sanitize(url)}.html"

    def persist(self, depth: int, url: str, content: Union[str, bytes]) -> Path:
        path = self.path_for(depth, url)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        except (OSError, UnicodeError) as exc:
            raise PersistError(url, str(exc)) from exc
        return path
