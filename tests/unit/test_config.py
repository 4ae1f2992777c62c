"""Unit tests for settings loading."""

import pytest
from pydantic import ValidationError

from paws.config import ModerationSettings, Settings
from paws.domain.value import SortMode


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from default settings."""
    for name in (
        "ENVIRONMENT",
        "DEBUG",
        "DATABASE__URL",
        "MODERATION__AUTO_HOLD_FLAG_THRESHOLD",
        "MODERATION__DEFAULT_SORT_MODE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.environment == "development"
    assert settings.database_url == "sqlite:///paws.db"
    assert settings.moderation.auto_hold_flag_threshold is None
    assert settings.moderation.default_sort_mode == SortMode.TOP


def test_nested_environment_overrides(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("DATABASE__URL", "sqlite:///scratch.db")
    monkeypatch.setenv("MODERATION__AUTO_HOLD_FLAG_THRESHOLD", "3")
    monkeypatch.setenv("MODERATION__DEFAULT_SORT_MODE", "newest")

    settings = Settings(_env_file=None)

    assert settings.environment == "test"
    assert settings.database_url == "sqlite:///scratch.db"
    assert settings.moderation.auto_hold_flag_threshold == 3
    assert settings.moderation.default_sort_mode == SortMode.NEWEST


def test_flag_threshold_must_be_positive():
    with pytest.raises(ValidationError):
        ModerationSettings(auto_hold_flag_threshold=0)
