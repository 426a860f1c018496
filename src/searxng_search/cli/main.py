"""Click CLI group: search and health commands."""

from __future__ import annotations

import asyncio
import json
import sys

import click

from searxng_search.client import SearxngClient
from searxng_search.config import SearxngConfig, get_settings, resolve_config
from searxng_search.errors import ConfigError
from searxng_search.freshness import VALID_FRESHNESS
from searxng_search.logging import configure_logging
from searxng_search.tools.web_search import create_web_search_tool


def _load_config() -> SearxngConfig:
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        return resolve_config(settings.plugin_config())
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
def cli() -> None:
    """SearXNG web search tool CLI."""


@cli.command()
@click.argument("query")
@click.option("--count", type=int, default=None, help="Number of results (1-10).")
@click.option("--country", type=str, default=None, help="2-letter country code or ALL.")
@click.option("--language", type=str, default=None, help="Language or locale code.")
@click.option(
    "--freshness",
    type=str,
    default=None,
    help=f"Time filter: {', '.join(VALID_FRESHNESS)}.",
)
@click.option("--json", "json_output", is_flag=True, help="Print the raw tool payload as JSON.")
def search(
    query: str,
    count: int | None,
    country: str | None,
    language: str | None,
    freshness: str | None,
    json_output: bool,
) -> None:
    """Run a single web_search call against the configured instance."""
    tool = create_web_search_tool(_load_config())
    args: dict[str, object] = {"query": query}
    for key, value in (
        ("count", count),
        ("country", country),
        ("language", language),
        ("freshness", freshness),
    ):
        if value is not None:
            args[key] = value

    envelope = asyncio.run(tool.execute(args, tool_call_id="cli"))
    details = envelope["details"]
    if json_output:
        click.echo(json.dumps(details, indent=2))
    elif "error" in details:
        click.echo(f"{details['error']}: {details['message']}", err=True)
    else:
        click.echo(f"{details['count']} results for {details['query']!r} in {details['tookMs']}ms")
        for index, item in enumerate(details["results"], start=1):
            site = f" [{item['siteName']}]" if "siteName" in item else ""
            click.echo(f"{index}. {item['title']}{site}")
            click.echo(f"   {item['url']}")
            if item["description"]:
                click.echo(f"   {item['description']}")
    if "error" in details:
        sys.exit(1)


@cli.command()
def health() -> None:
    """Check that the SearXNG instance answers."""
    config = _load_config()
    ok = asyncio.run(SearxngClient(config).health_check())
    click.echo(f"{config.base_url}: {'ok' if ok else 'unreachable'}")
    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    cli()
