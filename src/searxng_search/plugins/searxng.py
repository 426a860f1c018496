"""SearXNG search plugin entry point.

Registers the `web_search` tool against a self-hosted SearXNG instance.
Configure through the host's plugin entry config:

    {
        "searxngUrl": "http://localhost:8888",
        "engines": ["duckduckgo", "google", "bing"],
        "timeout": 10000
    }
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from searxng_search.config import config_json_schema, resolve_config
from searxng_search.plugins.base import PluginContext, SearchPlugin
from searxng_search.tools.registry import ToolRegistry
from searxng_search.tools.web_search import create_web_search_tool

logger = logging.getLogger(__name__)

PLUGIN_ID = "searxng-search"


class SearxngSearchPlugin(SearchPlugin):
    name = PLUGIN_ID
    description = "Web search through a self-hosted SearXNG instance"
    version = "0.1.0"

    def __init__(self, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._transport = transport

    @staticmethod
    def config_schema() -> dict[str, Any]:
        return config_json_schema()

    def register_tools(self, registry: ToolRegistry, ctx: PluginContext) -> None:
        logger.info("SearXNG Search plugin initializing")
        config = resolve_config(ctx.plugin_config)
        logger.info(
            "SearXNG Search: connecting to %s (engines: %s)",
            config.base_url,
            ", ".join(config.engines) or "backend default",
        )

        tool = create_web_search_tool(config, transport=self._transport)
        registry.register(
            tool.name,
            tool.description,
            tool.execute,
            parameters=tool.parameters,
            label=tool.label,
            optional=True,
        )
        logger.info(
            'SearXNG Search: registered tool "%s" (optional, add to agent allowlist)', tool.name
        )
