"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (HTTP client,
logo cache, cache sweeper, telemetry).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from teamlogos.core.config import get_settings
from teamlogos.infrastructure.cache import CacheSweeper, LogoCacheService
from teamlogos.infrastructure.external.logos import LogoApiClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: upstream HTTP client, logo cache, cache sweeper,
    telemetry (if enabled). Shutdown order: sweeper stop, preload stop,
    HTTP client close, telemetry shutdown.
    """
    settings = get_settings()

    # ---- Startup ----
    # Shared HTTP client for the logo API (connection reuse across lookups).
    app.state.logo_http_client = httpx.AsyncClient(
        base_url=settings.logo_api_base_url,
        timeout=settings.logo_fetch_timeout_seconds,
    )
    logo_cache = LogoCacheService(
        LogoApiClient(
            app.state.logo_http_client,
            timeout=settings.logo_fetch_timeout_seconds,
        ),
        supports_webp=settings.logo_webp_supported,
        ttl_seconds=settings.logo_cache_ttl_seconds,
        failure_cooldown_seconds=settings.logo_failure_cooldown_seconds,
        preload_concurrency=settings.logo_preload_concurrency,
        cooldown_on_client_error=settings.logo_cooldown_on_client_error,
    )
    app.state.logo_cache = logo_cache
    logger.info(
        "Logo cache ready: upstream=%s webp=%s ttl=%ss cool-down=%ss",
        settings.logo_api_base_url,
        settings.logo_webp_supported,
        settings.logo_cache_ttl_seconds,
        settings.logo_failure_cooldown_seconds,
    )

    sweeper = CacheSweeper(logo_cache, interval_seconds=settings.logo_sweep_interval_seconds)
    sweeper.start()
    app.state.cache_sweeper = sweeper

    if settings.telemetry_enabled:
        from teamlogos.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            jaeger_endpoint=settings.telemetry_jaeger_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        telemetry.instrument_logging()
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "cache_sweeper", None) is not None:
        await app.state.cache_sweeper.stop()
        app.state.cache_sweeper = None

    if getattr(app.state, "logo_cache", None) is not None:
        await app.state.logo_cache.stop_preload()
        app.state.logo_cache = None

    if getattr(app.state, "logo_http_client", None) is not None:
        await app.state.logo_http_client.aclose()
        app.state.logo_http_client = None
        logger.info("Logo HTTP client closed")

    from teamlogos.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")
