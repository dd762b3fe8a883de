"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from orgchart.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.api_prefix == "/api/v1"
    assert settings.hierarchy_max_depth == 64
    assert settings.hierarchy_max_nodes == 10_000
    assert settings.api_key_enabled is False


def test_api_key_required_when_enabled() -> None:
    with pytest.raises(ValidationError, match="API_KEY is required"):
        Settings(_env_file=None, api_key_enabled=True)


def test_api_key_enabled_with_key() -> None:
    settings = Settings(_env_file=None, api_key_enabled=True, api_key="s3cret")
    assert settings.api_key.get_secret_value() == "s3cret"


def test_caps_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, hierarchy_max_depth=0)


def test_env_override(monkeypatch) -> None:
    monkeypatch.setenv("HIERARCHY_MAX_NODES", "50")
    get_settings.cache_clear()
    assert get_settings().hierarchy_max_nodes == 50
