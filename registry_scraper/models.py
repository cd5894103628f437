# registry_scraper/models.py
"""
Data models for the registry scraper.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(slots=True)
class PageData:
    """Holds the final URL, decoded body and content type of a fetched page."""

    url: str
    content: str
    content_type: str = ""


@dataclass(slots=True)
class Registry:
    """One extracted link: the country label and its registry URL."""

    country: str
    url: str

    def as_dict(self) -> Dict[str, str]:
        """Return the record under its output field names."""
        return {"Country": self.country, "URL": self.url}
