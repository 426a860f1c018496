"""SearXNG search exception hierarchy.

All package-specific exceptions inherit from SearxngSearchError,
so callers can catch backend, input and configuration failures in one clause.
"""


class SearxngSearchError(Exception):
    """Base exception for all searxng_search errors."""


class ConfigError(SearxngSearchError):
    """Invalid or missing configuration."""


class ToolInputError(SearxngSearchError):
    """Tool arguments rejected before any backend call."""

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class BackendError(SearxngSearchError):
    """Error communicating with the SearXNG backend."""


class BackendStatusError(BackendError):
    """Backend answered with a non-2xx status."""

    def __init__(self, status_code: int, detail: str = "", *, reason: str = "") -> None:
        super().__init__(f"SearXNG returned HTTP {status_code}: {detail or reason}")
        self.status_code = status_code
        self.detail = detail


class BackendTimeoutError(BackendError):
    """Request did not complete within the configured timeout."""

    def __init__(self, timeout_ms: int) -> None:
        super().__init__(f"SearXNG request timed out after {timeout_ms}ms")
        self.timeout_ms = timeout_ms


class BackendUnavailableError(BackendError):
    """Backend refused the connection."""

    def __init__(self, base_url: str) -> None:
        super().__init__(
            f"Cannot connect to SearXNG at {base_url}. Is it running? "
            "Start the SearXNG container (docker compose up -d) and retry."
        )
        self.base_url = base_url
