"""API key enforcement (X-API-Key) when API_KEY_ENABLED is true."""

import pytest
from httpx import AsyncClient

from orgchart.core.config import get_settings


@pytest.fixture
def api_key_enabled(monkeypatch) -> str:
    monkeypatch.setenv("API_KEY_ENABLED", "true")
    monkeypatch.setenv("API_KEY", "test-key")
    get_settings.cache_clear()
    return "test-key"


async def test_missing_key_rejected(client: AsyncClient, api_key_enabled: str) -> None:
    response = await client.get("/api/v1/people")
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_wrong_key_rejected(client: AsyncClient, api_key_enabled: str) -> None:
    response = await client.get("/api/v1/hierarchy", headers={"X-API-Key": "nope"})
    assert response.status_code == 401


async def test_valid_key_accepted(client: AsyncClient, api_key_enabled: str) -> None:
    response = await client.get(
        "/api/v1/departments", headers={"X-API-Key": api_key_enabled}
    )
    assert response.status_code == 200


async def test_health_is_public(client: AsyncClient, api_key_enabled: str) -> None:
    response = await client.get("/api/v1/health")
    assert response.status_code == 200


async def test_disabled_by_default(client: AsyncClient) -> None:
    response = await client.get("/api/v1/people")
    assert response.status_code == 200
