# depth_crawler/crawler/link_extractor.py
"""
Link extraction for DepthCrawler.
"""
from __future__ import annotations

from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from depth_crawler.crawler.models import PageData
from depth_crawler.utils import is_valid_location, remove_duplicates


def _document_base(soup: BeautifulSoup, page: PageData) -> str:
    base = page.base_url or page.url
    tag = soup.find("base", href=True)
    if isinstance(tag, Tag):
        href = tag.get("href")
        if isinstance(href, str) and href.strip():
            base = urljoin(base, href.strip())
    return base


def extract_links(page: PageData) -> List[str]:
    """
    Extract absolute http(s) links from PageData content, in document order.

    Relative hrefs are resolved against ``<base href>`` or the page URL.
    Ignores mailto:, javascript: and anything that is not a valid location.
    Links to other hosts are kept.
    """
    content = page.content
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    soup = BeautifulSoup(content, "html.parser")
    base = _document_base(soup, page)
    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()
        if not raw or raw.startswith(("mailto:", "javascript:")):
            continue
        try:
            absolute = urljoin(base, raw)
        except ValueError:
            continue
        if is_valid_location(absolute):
            links.append(absolute)
    return remove_duplicates(links)
