"""
Tests for configuration management in `habit_audit/config.py`.

Covers:
- Environment parsing and debug defaults
- Logging level coercion to the expected Literal
- Scoring and session overrides from the environment
- get_config cache behavior
- Validation rules (debug only in development, amber below green)
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from habit_audit.config import (
    AppConfig,
    ScoringConfig,
    get_config,
    load_config_from_env,
)

_ENV_VARS = (
    "ENVIRONMENT",
    "LOG_LEVEL",
    "RECOMMENDATION_LIMIT",
    "CELEBRATE_THRESHOLD",
    "CATALOG_PATH",
    "DEFAULT_REGION",
    "DEFAULT_AGE_RANGE",
    "DEFAULT_GENDER",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from an empty environment and a cold config cache."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def test_load_config_dev_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")

    config = load_config_from_env()

    assert config.environment == "development"
    assert config.debug is True
    assert config.logging.format == "console"
    assert config.scoring.recommendation_limit == 3
    assert config.scoring.catalog_path is None
    assert config.session.region == "uk"


def test_production_uses_json_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "prod")

    config = load_config_from_env()

    assert config.environment == "production"
    assert config.debug is False
    assert config.logging.format == "json"


def test_staging_alias(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "stage")
    assert load_config_from_env().environment == "staging"


def test_log_level_coercion(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_config_from_env().logging.level == "DEBUG"

    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert load_config_from_env().logging.level == "INFO"


def test_scoring_and_session_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RECOMMENDATION_LIMIT", "5")
    monkeypatch.setenv("CELEBRATE_THRESHOLD", "95")
    monkeypatch.setenv("CATALOG_PATH", "/etc/habit-audit/catalog.json")
    monkeypatch.setenv("DEFAULT_REGION", "us")
    monkeypatch.setenv("DEFAULT_AGE_RANGE", "45-54")
    monkeypatch.setenv("DEFAULT_GENDER", "female")

    config = load_config_from_env()

    assert config.scoring.recommendation_limit == 5
    assert config.scoring.celebrate_threshold == 95
    assert config.scoring.catalog_path == "/etc/habit-audit/catalog.json"
    assert config.session.region == "us"
    assert config.session.age_range == "45-54"
    assert config.session.gender == "female"


def test_negative_recommendation_limit_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RECOMMENDATION_LIMIT", "-1")
    with pytest.raises(ValueError):
        load_config_from_env()


def test_get_config_is_cached() -> None:
    first = get_config()
    second = get_config()
    assert first is second


def test_debug_only_allowed_in_development() -> None:
    with pytest.raises(ValueError, match="debug mode is only allowed"):
        AppConfig(environment="production", debug=True)


def test_amber_must_not_exceed_green() -> None:
    with pytest.raises(ValueError, match="amber_threshold"):
        ScoringConfig(green_threshold=60, amber_threshold=70)
