"""web_search agent tool backed by a self-hosted SearXNG instance."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from typing import Any

import httpx

from searxng_search.client import DEFAULT_COUNT, MAX_COUNT, SearxngClient
from searxng_search.config import SearxngConfig
from searxng_search.errors import ToolInputError
from searxng_search.freshness import VALID_FRESHNESS
from searxng_search.logging import log_context
from searxng_search.models import SearchOptions

logger = logging.getLogger(__name__)

TOOL_NAME = "web_search"
TOOL_LABEL = "SearXNG Web Search"
TOOL_DESCRIPTION = (
    "Search the web using a self-hosted SearXNG instance. Returns titles, URLs, and "
    "descriptions. Supports freshness filtering (pd/pw/pm/py) and language/country targeting."
)
PROVIDER = "searxng"

MISSING_QUERY = "missing_query"
INVALID_FRESHNESS = "invalid_freshness"
BACKEND_ERROR = "searxng_error"

TOOL_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "query": {"type": "string", "description": "Search query string."},
        "count": {
            "type": "number",
            "description": "Number of results to return (1-10).",
            "minimum": 1,
            "maximum": MAX_COUNT,
        },
        "country": {
            "type": "string",
            "description": (
                "2-letter country code for region-specific results "
                "(e.g., 'DE', 'US', 'ALL')."
            ),
        },
        "language": {
            "type": "string",
            "description": "ISO language code for search results (e.g., 'de', 'en', 'fr').",
        },
        "freshness": {
            "type": "string",
            "description": (
                "Filter results by time. Values: 'pd' (past 24h), 'pw' (past week), "
                "'pm' (past month), 'py' (past year)."
            ),
        },
    },
    "required": ["query"],
}


def json_result(data: dict[str, Any]) -> dict[str, Any]:
    """Wrap a payload as both JSON text and structured details."""
    return {
        "content": [{"type": "text", "text": json.dumps(data, indent=2)}],
        "details": data,
    }


def error_result(kind: str, message: str) -> dict[str, Any]:
    return json_result({"error": kind, "message": message})


def _optional_text(value: object) -> str | None:
    return value.strip() if isinstance(value, str) else None


def parse_arguments(args: object) -> tuple[str, SearchOptions]:
    """Validate raw tool arguments.

    Checks run in a fixed order (query, freshness, count) and the first failure
    wins, raised as ToolInputError.
    """
    params: Mapping[str, Any] = args if isinstance(args, Mapping) else {}

    raw_query = params.get("query")
    query = raw_query.strip() if isinstance(raw_query, str) else ""
    if not query:
        raise ToolInputError(MISSING_QUERY, 'The "query" parameter is required.')

    freshness = _optional_text(params.get("freshness"))
    if freshness is not None:
        freshness = freshness.lower()
    if freshness and freshness not in VALID_FRESHNESS:
        raise ToolInputError(
            INVALID_FRESHNESS,
            f"freshness must be one of: {', '.join(VALID_FRESHNESS)}",
        )

    raw_count = params.get("count")
    if isinstance(raw_count, bool) or not isinstance(raw_count, int | float):
        count = DEFAULT_COUNT
    elif isinstance(raw_count, float) and not math.isfinite(raw_count):
        count = DEFAULT_COUNT
    else:
        # ints stay exact; huge JSON integers do not fit in a float
        count = max(1, min(MAX_COUNT, math.floor(raw_count)))

    options = SearchOptions(
        count=count,
        country=_optional_text(params.get("country")),
        language=_optional_text(params.get("language")),
        freshness=freshness or None,
    )
    return query, options


class SearxngSearchTool:
    name = TOOL_NAME
    label = TOOL_LABEL
    description = TOOL_DESCRIPTION
    parameters = TOOL_SCHEMA

    def __init__(self, client: SearxngClient) -> None:
        self.client = client

    async def execute(
        self,
        args: object,
        *,
        tool_call_id: str | None = None,
    ) -> dict[str, Any]:
        """Run the tool. Every outcome, including failures, comes back as an envelope."""
        with log_context(tool=TOOL_NAME, tool_call_id=tool_call_id or ""):
            try:
                query, options = parse_arguments(args)
                response = await self.client.search(query, options)
            except ToolInputError as exc:
                logger.info("web_search rejected input: %s", exc.kind)
                return error_result(exc.kind, str(exc))
            except Exception as exc:
                message = str(exc) or "Unknown error during search"
                logger.warning("web_search failed: %s", message)
                return error_result(BACKEND_ERROR, message)

            return json_result(
                {
                    "query": query,
                    "provider": PROVIDER,
                    "count": len(response.results),
                    "tookMs": response.took_ms,
                    "results": [item.to_dict() for item in response.results],
                }
            )


def create_web_search_tool(
    config: SearxngConfig | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SearxngSearchTool:
    return SearxngSearchTool(SearxngClient(config, transport=transport))
