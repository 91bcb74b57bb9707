"""Pytest configuration and fixtures for teamlogos.

Provides a scripted logo source, a manual monotonic clock, a LogoCacheService
built on both, and an ASGI client whose app.state carries that cache (the
lifespan is not run for HTTP tests).
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from teamlogos.core.config import get_settings
from teamlogos.core.limiter import limiter
from teamlogos.infrastructure.cache import LogoCacheService
from tests.fakes import FakeClock, FakeLogoSource


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def source() -> FakeLogoSource:
    return FakeLogoSource()


@pytest.fixture
def logo_cache(source: FakeLogoSource, clock: FakeClock) -> LogoCacheService:
    """Cache with production defaults (1h TTL, 2min cool-down, 4-wide preload)."""
    return LogoCacheService(source, supports_webp=True, clock=clock)


@pytest.fixture(autouse=True)
def _reset_settings_and_limiter():
    """Fresh settings and rate-limit counters for every test."""
    get_settings.cache_clear()
    limiter.reset()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app(logo_cache: LogoCacheService) -> FastAPI:
    """Fresh app with the test cache wired in (lifespan not run)."""
    from teamlogos.main import create_app

    application = create_app()
    application.state.logo_cache = logo_cache
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the app fixture."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
