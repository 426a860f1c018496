"""Plugin SDK for registering the SearXNG search tool with a host."""

from searxng_search.plugins.base import PluginContext, SearchPlugin
from searxng_search.plugins.searxng import PLUGIN_ID, SearxngSearchPlugin

__all__ = ["PLUGIN_ID", "PluginContext", "SearchPlugin", "SearxngSearchPlugin"]
