"""
Acceptance tests — Runtime settings

Rules:
  - RATIOLENS_CORS_ORIGINS is split on commas; blanks are dropped.
  - Unset or empty origins fall back to the local dev defaults.
  - RATIOLENS_LOG_LEVEL is upper-cased.
"""

import pytest
from ratiolens.config import _DEFAULT_CORS_ORIGINS, _split_origins, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("RATIOLENS_CORS_ORIGINS", "http://a.test, http://b.test,")
    assert get_settings().cors_origins == ("http://a.test", "http://b.test")


def test_log_level_is_upper_cased(monkeypatch):
    monkeypatch.setenv("RATIOLENS_LOG_LEVEL", "debug")
    assert get_settings().log_level == "DEBUG"


@pytest.mark.parametrize("raw", [None, ""])
def test_empty_origins_fall_back_to_defaults(raw):
    assert _split_origins(raw) == _DEFAULT_CORS_ORIGINS
    assert "http://localhost:3000" in _split_origins(raw)


def test_settings_are_cached(monkeypatch):
    monkeypatch.setenv("RATIOLENS_CORS_ORIGINS", "http://a.test")
    first = get_settings()
    monkeypatch.setenv("RATIOLENS_CORS_ORIGINS", "http://b.test")
    assert get_settings() is first
