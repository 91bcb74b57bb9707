"""Team logo API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from teamlogos.application.dtos.logo import CacheStats
from teamlogos.domain.entities import TeamLogo
from teamlogos.domain.enums import DisplayState, LogoSize


class TeamLogoSchema(BaseModel):
    """Logo metadata returned to UI consumers (camelCase like the upstream API)."""

    model_config = ConfigDict(populate_by_name=True)

    url: str
    fallback_url: str | None = Field(default=None, alias="fallbackUrl")
    supports_webp: bool = Field(default=False, alias="supportsWebP")
    team_name: str | None = Field(default=None, alias="teamName")
    uploaded_at: datetime | None = Field(default=None, alias="uploadedAt")

    @classmethod
    def from_entity(cls, logo: TeamLogo) -> "TeamLogoSchema":
        return cls(
            url=logo.url,
            fallback_url=logo.fallback_url,
            supports_webp=logo.supports_webp,
            team_name=logo.team_name,
            uploaded_at=logo.uploaded_at,
        )


class LogoDisplayResponse(BaseModel):
    """What to render for one team: image sources in order, or initials."""

    team_id: str
    size: LogoSize
    pixels: int
    state: DisplayState
    logo: TeamLogoSchema | None = None
    sources: list[str] = Field(default_factory=list)
    initials: str | None = None


class PreloadRequest(BaseModel):
    """Body for POST /logos/preload."""

    team_ids: list[str] = Field(..., description="Team ids to warm up; empty ids are skipped")
    size: LogoSize = LogoSize.MEDIUM
    prefer_webp: bool = True


class CacheStatsResponse(BaseModel):
    """Logo cache snapshot."""

    cache_size: int
    failed_cache_size: int
    preload_queue_size: int
    is_preloading: bool
    in_flight: int
    generated_at: datetime

    @classmethod
    def from_stats(cls, stats: CacheStats, generated_at: datetime) -> "CacheStatsResponse":
        return cls(**stats.to_dict(), generated_at=generated_at)


class PreloadResponse(BaseModel):
    """Response for POST /logos/preload (202)."""

    accepted: int = Field(..., description="Non-empty ids received")
    stats: CacheStatsResponse


class SweepResponse(BaseModel):
    removed: int
