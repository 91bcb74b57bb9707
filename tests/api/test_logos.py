"""API tests for /api/v1/logos (display lookup, preload, cache maintenance)."""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from teamlogos.core.config import get_settings
from teamlogos.infrastructure.cache import LogoCacheService
from teamlogos.infrastructure.exceptions import LogoNetworkError
from tests.fakes import FakeClock, FakeLogoSource, default_logo


async def _wait_for_preload(cache: LogoCacheService) -> None:
    task = cache.preload_logos([])
    if task is not None:
        await task


async def test_get_logo_returns_sources_and_initials(
    client: AsyncClient, source: FakeLogoSource
) -> None:
    response = await client.get("/api/v1/logos/t1", params={"size": "large"})
    assert response.status_code == 200
    data = response.json()
    assert data["team_id"] == "t1"
    assert data["size"] == "large"
    assert data["pixels"] == 128
    assert data["state"] == "image"
    assert data["logo"]["url"] == "/logos/t1-large.webp"
    assert data["logo"]["fallbackUrl"] == "/logos/t1-large.png"
    assert data["logo"]["supportsWebP"] is True
    assert data["sources"] == ["/logos/t1-large.webp", "/logos/t1-large.png"]
    assert data["initials"] == "TT"
    assert len(source.calls) == 1


async def test_get_logo_png_when_webp_not_preferred(client: AsyncClient) -> None:
    response = await client.get("/api/v1/logos/t1", params={"prefer_webp": "false"})
    assert response.json()["logo"]["url"] == "/logos/t1-medium.png"
    assert response.json()["sources"] == ["/logos/t1-medium.png"]


async def test_repeated_lookup_served_from_cache(
    client: AsyncClient, source: FakeLogoSource
) -> None:
    await client.get("/api/v1/logos/t1")
    await client.get("/api/v1/logos/t1")
    assert len(source.calls) == 1


async def test_upstream_failure_falls_back_to_initials(
    client: AsyncClient, source: FakeLogoSource
) -> None:
    def respond(team_id, size, image_format):
        if team_id == "down":
            raise LogoNetworkError(team_id, "connection refused")
        return default_logo(team_id, size, image_format)

    source.responder = respond
    response = await client.get(
        "/api/v1/logos/down", params={"team_name": "Down Team"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "initials"
    assert data["logo"] is None
    assert data["sources"] == []
    assert data["initials"] == "DT"

    stats = (await client.get("/api/v1/logos/cache/stats")).json()
    assert stats["failed_cache_size"] == 1


async def test_missing_logo_without_fallback_is_empty(
    client: AsyncClient, source: FakeLogoSource
) -> None:
    source.responder = lambda *_: None
    response = await client.get(
        "/api/v1/logos/t9", params={"team_name": "Nine", "show_fallback": "false"}
    )
    assert response.json()["state"] == "empty"
    assert response.json()["initials"] is None


async def test_invalid_size_is_422(client: AsyncClient) -> None:
    response = await client.get("/api/v1/logos/t1", params={"size": "huge"})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_cache_not_wired_is_503(app: FastAPI, client: AsyncClient) -> None:
    app.state.logo_cache = None
    response = await client.get("/api/v1/logos/t1")
    assert response.status_code == 503
    assert response.json()["error"] == "SERVICE_UNAVAILABLE"


async def test_cache_stats(client: AsyncClient) -> None:
    await client.get("/api/v1/logos/t1")
    response = await client.get("/api/v1/logos/cache/stats")
    assert response.status_code == 200
    data = response.json()
    assert data["cache_size"] == 1
    assert data["failed_cache_size"] == 0
    assert data["preload_queue_size"] == 0
    assert data["is_preloading"] is False
    assert data["in_flight"] == 0
    assert "generated_at" in data


async def test_clear_cache(client: AsyncClient, source: FakeLogoSource) -> None:
    await client.get("/api/v1/logos/t1")
    response = await client.delete("/api/v1/logos/cache")
    assert response.status_code == 204
    await client.get("/api/v1/logos/t1")
    assert len(source.calls) == 2


async def test_sweep_removes_expired_entries(
    client: AsyncClient, clock: FakeClock
) -> None:
    await client.get("/api/v1/logos/t1")
    await client.get("/api/v1/logos/t2")
    clock.advance(3600)
    response = await client.post("/api/v1/logos/cache/sweep")
    assert response.status_code == 200
    assert response.json() == {"removed": 2}


async def test_preload_accepts_and_fetches_in_background(
    client: AsyncClient, logo_cache: LogoCacheService, source: FakeLogoSource
) -> None:
    response = await client.post(
        "/api/v1/logos/preload", json={"team_ids": ["a", "", "b", "c"], "size": "small"}
    )
    assert response.status_code == 202
    data = response.json()
    assert data["accepted"] == 3
    assert data["stats"]["preload_queue_size"] == 3

    await _wait_for_preload(logo_cache)
    assert sorted(call[0] for call in source.calls) == ["a", "b", "c"]
    stats = (await client.get("/api/v1/logos/cache/stats")).json()
    assert stats["cache_size"] == 3
    assert stats["preload_queue_size"] == 0


async def test_preload_over_max_batch_is_400(
    client: AsyncClient, source: FakeLogoSource, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LOGO_PRELOAD_MAX_BATCH", "2")
    get_settings.cache_clear()
    response = await client.post("/api/v1/logos/preload", json={"team_ids": ["a", "b", "c"]})
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"
    assert response.json()["details"] == {"field": "team_ids"}
    assert source.calls == []


async def test_preload_requires_team_ids(client: AsyncClient) -> None:
    response = await client.post("/api/v1/logos/preload", json={})
    assert response.status_code == 422


async def test_cache_admin_is_rate_limited(client: AsyncClient) -> None:
    for _ in range(10):
        assert (await client.delete("/api/v1/logos/cache")).status_code == 204
    response = await client.delete("/api/v1/logos/cache")
    assert response.status_code == 429
