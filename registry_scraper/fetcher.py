# registry_scraper/fetcher.py
"""
Fetcher module: performs the single HTTP GET for a scrape run.

No retries, rate limiting or timeout tuning: whatever aiohttp does by
default is what the run gets.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession

from registry_scraper.config import ScraperConfig
from registry_scraper.logger import logger
from registry_scraper.models import PageData

__all__ = ("FetchError", "Fetcher")


class FetchError(Exception):
    """Raised when the page could not be fetched or decoded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"GET {url} failed: {reason}")
        self.url = url
        self.reason = reason


class Fetcher:
    """Issues one GET request through an existing aiohttp session."""

    def __init__(self, session: ClientSession, config: ScraperConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its decoded body.

        Raises FetchError on connection errors, non-2xx statuses
        and bodies that cannot be decoded as text.
        """
        headers = {"User-Agent": self.config.user_agent} if self.config.user_agent else None
        logger.debug("GET %s", url)
        try:
            async with self.session.get(url, headers=headers) as resp:
                logger.info("GET %s -> %s", url, resp.status)
                if not 200 <= resp.status < 300:
                    raise FetchError(url, f"HTTP {resp.status} {resp.reason or ''}".rstrip())
                ctype = resp.headers.get("Content-Type", "").lower()
                text = await resp.text()
                return PageData(str(resp.url), text, ctype)
        except UnicodeDecodeError as exc:
            raise FetchError(url, f"undecodable body ({exc.encoding})") from exc
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "request timed out") from exc
        except ClientError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc
