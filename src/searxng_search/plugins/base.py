"""Plugin base class and context."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from searxng_search.tools.registry import ToolRegistry


@dataclass(slots=True)
class PluginContext:
    """What the host hands a plugin at registration time."""

    plugin_config: Mapping[str, Any] = field(default_factory=dict)


class SearchPlugin:
    """Base class for search plugins.

    Subclass this and override `register_tools()` to add tools.
    """

    name: str = ""
    description: str = ""
    version: str = "0.1.0"

    def register_tools(self, registry: ToolRegistry, ctx: PluginContext) -> None:
        """Register tools with the tool registry. Override in subclasses."""
