"""Search options and normalized result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit


def _text(value: object) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True, slots=True)
class SearchOptions:
    count: float | None = None
    country: str | None = None
    language: str | None = None
    freshness: str | None = None


@dataclass(frozen=True, slots=True)
class SearchResultItem:
    title: str
    url: str
    description: str
    published: str | None = None
    site_name: str | None = None

    @classmethod
    def from_raw(cls, item: dict[str, Any]) -> SearchResultItem:
        """Build from one entry of the SearXNG `results` list.

        Backend-internal fields (engine, score, category, positions) are dropped.
        """
        url = _text(item.get("url"))
        published = item.get("publishedDate")
        return cls(
            title=_text(item.get("title")),
            url=url,
            description=_text(item.get("content")),
            published=str(published) if published is not None else None,
            site_name=extract_hostname(url),
        )

    def to_dict(self) -> dict[str, str]:
        data = {"title": self.title, "url": self.url, "description": self.description}
        if self.published is not None:
            data["published"] = self.published
        if self.site_name is not None:
            data["siteName"] = self.site_name
        return data


@dataclass(slots=True)
class SearchResponse:
    results: list[SearchResultItem] = field(default_factory=list)
    took_ms: int = 0


def extract_hostname(url: str | None) -> str | None:
    if not url:
        return None
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
    except ValueError:
        return None
    # scheme-relative and bare paths are not absolute URLs
    if not parts.scheme or not hostname:
        return None
    return hostname
