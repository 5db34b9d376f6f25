"""Tests for configuration helpers."""

from social_feed.config import Settings, parse_cors_origins


def test_parse_cors_origins_splits_and_strips() -> None:
    assert parse_cors_origins(" https://a.test , https://b.test,") == [
        "https://a.test",
        "https://b.test",
    ]


def test_parse_cors_origins_defaults_to_wildcard() -> None:
    assert parse_cors_origins(None) == ["*"]
    assert parse_cors_origins("  ") == ["*"]


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("USE_MOCK_DATA", "false")
    monkeypatch.setenv("CACHE_TTL_SECONDS", "30")

    settings = Settings()

    assert settings.use_mock_data is False
    assert settings.cache_ttl_seconds == 30
