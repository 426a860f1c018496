"""Freshness shorthand codes mapped to SearXNG time_range values."""

FRESHNESS_MAP: dict[str, str] = {
    "pd": "day",
    "pw": "week",
    "pm": "month",
    "py": "year",
}

VALID_FRESHNESS: tuple[str, ...] = tuple(FRESHNESS_MAP)


def map_freshness(code: str) -> str | None:
    return FRESHNESS_MAP.get(code.lower())
