import pytest

from searxng_search.config import get_settings

_ENV_KEYS = ("SEARXNG_URL", "SEARXNG_ENGINES", "SEARXNG_TIMEOUT_MS", "LOG_LEVEL", "APP_ENV")


@pytest.fixture(autouse=True)
def test_env(tmp_path, monkeypatch):
    # Keep a developer's .env and shell settings out of the tests.
    monkeypatch.chdir(tmp_path)
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
