"""Configuration contract for the SearXNG search tool."""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from searxng_search.errors import ConfigError

DEFAULT_SEARXNG_URL = "http://localhost:8888"
DEFAULT_ENGINES = ("duckduckgo", "google", "bing")
DEFAULT_TIMEOUT_MS = 10_000


class SearxngConfig(BaseModel):
    """Resolved plugin configuration. Frozen once built."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    base_url: str = Field(
        alias="searxngUrl",
        default=DEFAULT_SEARXNG_URL,
        description="Base URL of the SearXNG instance",
    )
    engines: tuple[str, ...] = Field(
        alias="engines",
        default=DEFAULT_ENGINES,
        description="Search engines to use",
    )
    timeout_ms: int = Field(
        alias="timeout",
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Request timeout in milliseconds",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slashes(cls, value: str) -> str:
        stripped = value.strip().rstrip("/")
        if not stripped:
            raise ValueError("searxngUrl must not be empty")
        return stripped

    @field_validator("engines")
    @classmethod
    def _check_engines(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        engines = tuple(engine.strip() for engine in value)
        if any(not engine for engine in engines):
            raise ValueError("engine names must be non-empty strings")
        return engines

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


def resolve_config(raw: Mapping[str, Any] | SearxngConfig | None = None) -> SearxngConfig:
    """Merge caller-supplied values over the defaults.

    Keys use the plugin config names (searxngUrl, engines, timeout). Keys set to
    None count as absent, so partially filled configs fall back per field.
    """
    if isinstance(raw, SearxngConfig):
        return raw
    supplied = {key: value for key, value in (raw or {}).items() if value is not None}
    try:
        return SearxngConfig.model_validate(supplied)
    except ValidationError as exc:
        raise ConfigError(f"invalid searxng-search configuration: {exc}") from exc


def config_json_schema() -> dict[str, Any]:
    schema = SearxngConfig.model_json_schema(by_alias=True)
    schema["additionalProperties"] = False
    return schema


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = Field(alias="APP_ENV", default="dev")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO")

    # Unset values defer to SearxngConfig defaults.
    searxng_url: str | None = Field(alias="SEARXNG_URL", default=None)
    searxng_engines: str | None = Field(alias="SEARXNG_ENGINES", default=None)
    searxng_timeout_ms: int | None = Field(alias="SEARXNG_TIMEOUT_MS", default=None)

    def plugin_config(self) -> dict[str, Any]:
        engines: list[str] | None = None
        if self.searxng_engines is not None:
            engines = [item.strip() for item in self.searxng_engines.split(",") if item.strip()]
        return {
            "searxngUrl": self.searxng_url,
            "engines": engines,
            "timeout": self.searxng_timeout_ms,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
