"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Durations and concurrency limits are validated at
load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every field has a default so the gateway starts without a .env file;
    validate_limits rejects non-positive durations and concurrency.
    """

    # App
    app_name: str = "teamlogos"
    app_version: str = "1.0.0"
    debug: bool = False

    # CORS (UI consumers)
    allowed_origins: str = "http://localhost:3000,http://localhost:5173"

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    request_timeout_seconds: float = 30

    # Upstream logo metadata API (GET /api/teams/{team_id}/logo)
    logo_api_base_url: str = "http://localhost:5001"
    logo_fetch_timeout_seconds: float = 5.0

    # Logo cache
    logo_cache_ttl_seconds: float = 60 * 60  # 1 hour
    logo_failure_cooldown_seconds: float = 120  # 2 minutes
    logo_preload_concurrency: int = 4
    logo_preload_max_batch: int = 500
    logo_sweep_interval_seconds: float = 60
    # Decided once at startup and passed to the cache; consumers that cannot
    # render WebP should run with LOGO_WEBP_SUPPORTED=false.
    logo_webp_supported: bool = True
    # 4xx responses (e.g. 404 "Team has no logo") also start the cool-down.
    logo_cooldown_on_client_error: bool = True

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_jaeger_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        """Validate cache durations, concurrency and the upstream URL.

        - Request and fetch timeouts, TTL, cool-down and sweep interval must be positive.
        - Preload concurrency and max batch must be at least 1.
        """
        positive = {
            "request_timeout_seconds": self.request_timeout_seconds,
            "logo_fetch_timeout_seconds": self.logo_fetch_timeout_seconds,
            "logo_cache_ttl_seconds": self.logo_cache_ttl_seconds,
            "logo_failure_cooldown_seconds": self.logo_failure_cooldown_seconds,
            "logo_sweep_interval_seconds": self.logo_sweep_interval_seconds,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ValueError(f"{name.upper()} must be positive, got: {value!r}")
        if self.logo_preload_concurrency < 1:
            raise ValueError(
                "LOGO_PRELOAD_CONCURRENCY must be at least 1, "
                f"got: {self.logo_preload_concurrency!r}"
            )
        if self.logo_preload_max_batch < 1:
            raise ValueError(
                "LOGO_PRELOAD_MAX_BATCH must be at least 1, "
                f"got: {self.logo_preload_max_batch!r}"
            )
        if not self.logo_api_base_url.startswith(("http://", "https://")):
            raise ValueError(
                "LOGO_API_BASE_URL must be an http(s) URL, "
                f"got: {self.logo_api_base_url!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
