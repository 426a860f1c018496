"""SearXNG HTTP client for the JSON search API."""

from __future__ import annotations

import asyncio
import logging
import math
import time
from enum import Enum
from typing import Any

import httpx

from searxng_search.config import SearxngConfig, resolve_config
from searxng_search.errors import (
    BackendError,
    BackendStatusError,
    BackendTimeoutError,
    BackendUnavailableError,
)
from searxng_search.freshness import map_freshness
from searxng_search.models import SearchOptions, SearchResponse, SearchResultItem

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 5
MAX_COUNT = 10
HEALTH_TIMEOUT_MS = 3000


class FailureKind(str, Enum):
    TIMEOUT = "timeout"
    CONNECTION_REFUSED = "connection_refused"
    OTHER = "other"


def _cause_chain(exc: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    current: BaseException | None = exc
    while current is not None and current not in chain:
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def classify_failure(exc: BaseException) -> FailureKind:
    """Sort a failed backend call into one of the known failure kinds."""
    if isinstance(exc, httpx.TimeoutException | asyncio.TimeoutError):
        return FailureKind.TIMEOUT
    chain = _cause_chain(exc)
    if any(isinstance(item, ConnectionRefusedError) for item in chain):
        return FailureKind.CONNECTION_REFUSED
    if isinstance(exc, httpx.ConnectError):
        text = str(exc).lower()
        if "connection refused" in text or "actively refused" in text:
            return FailureKind.CONNECTION_REFUSED
    return FailureKind.OTHER


def translate_failure(exc: BaseException, config: SearxngConfig) -> BaseException:
    kind = classify_failure(exc)
    if kind is FailureKind.TIMEOUT:
        return BackendTimeoutError(config.timeout_ms)
    if kind is FailureKind.CONNECTION_REFUSED:
        return BackendUnavailableError(config.base_url)
    return exc


def effective_count(count: float | None) -> int:
    if count is None or isinstance(count, bool):
        return DEFAULT_COUNT
    if isinstance(count, int):
        return max(1, min(MAX_COUNT, count))
    try:
        value = float(count)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_COUNT
    if not math.isfinite(value):
        return DEFAULT_COUNT
    return max(1, min(MAX_COUNT, math.floor(value)))


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


class SearxngClient:
    def __init__(
        self,
        config: SearxngConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = resolve_config(config)
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def build_params(self, query: str, options: SearchOptions | None = None) -> dict[str, str]:
        opts = options or SearchOptions()
        params = {"q": query, "format": "json", "categories": "general"}
        if self.config.engines:
            params["engines"] = ",".join(self.config.engines)
        if opts.language:
            params["language"] = opts.language
        if opts.freshness:
            time_range = map_freshness(opts.freshness)
            if time_range:
                params["time_range"] = time_range
        # SearXNG has no country parameter; a locale hint is the closest match.
        if opts.country and opts.country.upper() != "ALL" and not opts.language:
            params["language"] = f"en-{opts.country.upper()}"
        return params

    def _http_client(self, timeout_s: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=timeout_s, transport=self._transport)

    async def _get(self, url: str, *, params: dict[str, str] | None, timeout_s: float) -> httpx.Response:
        async with self._http_client(timeout_s) as client:
            return await asyncio.wait_for(
                client.get(url, params=params, headers={"Accept": "application/json"}),
                timeout=timeout_s,
            )

    async def search(self, query: str, options: SearchOptions | None = None) -> SearchResponse:
        """Run one search and return normalized results.

        Raises BackendError subclasses for status, timeout and refused
        connections; anything else propagates unchanged.
        """
        opts = options or SearchOptions()
        count = effective_count(opts.count)
        params = self.build_params(query, opts)
        start = time.monotonic()
        try:
            response = await self._get(
                f"{self.base_url}/search",
                params=params,
                timeout_s=self.config.timeout_seconds,
            )
            if not response.is_success:
                try:
                    detail = response.text
                except Exception:
                    detail = ""
                raise BackendStatusError(
                    response.status_code, detail, reason=response.reason_phrase
                )
            body: Any = response.json()
            raw_results = body.get("results", []) if isinstance(body, dict) else None
            if not isinstance(raw_results, list):
                raise BackendError("unexpected response format from SearXNG")
        except Exception as exc:
            took_ms = _elapsed_ms(start)
            translated = translate_failure(exc, self.config)
            logger.warning(
                "SearXNG search failed after %dms: %s",
                took_ms,
                str(translated) or type(exc).__name__,
            )
            if translated is exc:
                raise
            raise translated from exc

        results = [
            SearchResultItem.from_raw(item)
            for item in raw_results[:count]
            if isinstance(item, dict)
        ]
        took_ms = _elapsed_ms(start)
        logger.debug("SearXNG returned %d results in %dms", len(results), took_ms)
        return SearchResponse(results=results, took_ms=took_ms)

    async def health_check(self) -> bool:
        """Quick health check: /healthz first, the instance root as fallback."""
        timeout_s = HEALTH_TIMEOUT_MS / 1000
        try:
            try:
                response = await self._get(
                    f"{self.base_url}/healthz", params=None, timeout_s=timeout_s
                )
            except Exception:
                # Some SearXNG versions have no /healthz
                logger.debug("SearXNG /healthz unreachable, probing %s", self.base_url)
                response = await self._get(self.base_url, params=None, timeout_s=timeout_s)
            return response.is_success
        except Exception:
            logger.debug("SearXNG health check failed", exc_info=True)
            return False
