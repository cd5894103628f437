# File: registry_scraper/engine.py
"""registry_scraper.engine: request → parse → complete pipeline for one page."""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional, Sequence

import click
from aiohttp import ClientSession

from registry_scraper.config import ScraperConfig, load_config
from registry_scraper.extractor import extract_registries
from registry_scraper.fetcher import FetchError, Fetcher
from registry_scraper.logger import logger
from registry_scraper.models import Registry
from registry_scraper.report import serialize_registries

__all__ = ["scrape", "report", "run"]

Echo = Callable[[str], None]

FINISHED_PREFIX = "Finished. Here is your data:"


async def scrape(config: ScraperConfig, echo: Echo = click.echo) -> List[Registry]:
    """Announce the request, fetch the configured page and extract its records."""
    url = str(config.url)
    echo(f"Visiting {url}")

    async with ClientSession() as session:
        page = await Fetcher(session, config).fetch(url)

    return extract_registries(page, config.selector)


def report(registries: Sequence[Registry], echo: Echo = click.echo) -> bool:
    """Print the completion line; on serialization failure print the error instead."""
    try:
        data = serialize_registries(registries)
    except (TypeError, ValueError) as exc:
        logger.error("Serialization failed: %s", exc)
        echo(str(exc))
        return False
    echo(f"{FINISHED_PREFIX} {data}")
    return True


def run(target_url: Optional[str] = None, *, config: Optional[ScraperConfig] = None) -> None:
    """
    Scrape one page and write the result to stdout.

    *target_url* overrides the configured URL. Raises FetchError when the
    page cannot be fetched; in that case nothing but the ``Visiting`` line
    is printed.
    """
    cfg = config if config is not None else load_config()
    if target_url is not None:
        cfg = ScraperConfig(**{**cfg.model_dump(), "url": target_url})

    try:
        registries = asyncio.run(scrape(cfg))
    except FetchError as exc:
        logger.error("Scraping failed: %s", exc)
        raise

    report(registries)
