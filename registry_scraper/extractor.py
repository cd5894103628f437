# registry_scraper/extractor.py
"""
Registry extraction: turns a fetched page into an ordered list of records.
"""
from __future__ import annotations

from typing import List, Union

from bs4 import BeautifulSoup

from registry_scraper.config import DEFAULT_SELECTOR
from registry_scraper.logger import logger
from registry_scraper.models import PageData, Registry

__all__ = ("extract_registries",)


def _is_html(content_type: str) -> bool:
    # an absent Content-Type is parsed as HTML
    return not content_type or "html" in content_type


def extract_registries(page: Union[PageData, str], selector: str = DEFAULT_SELECTOR) -> List[Registry]:
    """
    Collect one Registry per element matching *selector*, in document order.

    *page* is either a PageData or raw HTML markup. Text is stripped of
    surrounding whitespace; a missing ``href`` becomes an empty string.
    Duplicates are kept.
    """
    if isinstance(page, PageData):
        if not _is_html(page.content_type):
            logger.warning("Skipping %s: not an HTML document (%s)", page.url, page.content_type)
            return []
        html = page.content
    else:
        html = str(page)

    soup = BeautifulSoup(html, "html.parser")
    registries: List[Registry] = []
    for tag in soup.select(selector):
        href = tag.get("href")
        if not isinstance(href, str):
            href = ""
        registries.append(Registry(country=tag.get_text().strip(), url=href))

    logger.info("Matched %d element(s) for %r", len(registries), selector)
    return registries
