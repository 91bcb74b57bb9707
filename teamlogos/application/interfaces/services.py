"""Service interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must
fulfill (DIP). No runtime imports from teamlogos.infrastructure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from teamlogos.application.dtos.logo import CacheStats
    from teamlogos.domain.entities import TeamLogo
    from teamlogos.domain.enums import ImageFormat, LogoSize


class ILogoSource(Protocol):
    """Where logo metadata comes from (the upstream logo API in production).

    fetch_logo returns None when the team has no usable logo and raises
    LogoFetchError subclasses for network, server and client failures.
    """

    async def fetch_logo(
        self, team_id: str, size: LogoSize, image_format: ImageFormat
    ) -> TeamLogo | None:
        ...


class ILogoCache(Protocol):
    """Logo lookups as seen by API routes and other consumers."""

    @property
    def supports_webp(self) -> bool:
        ...

    async def get_logo(
        self,
        team_id: str | None,
        size: LogoSize | str = ...,
        prefer_webp: bool = ...,
    ) -> TeamLogo | None:
        ...

    def preload_logos(
        self,
        team_ids: list[str] | None,
        size: LogoSize | str = ...,
        prefer_webp: bool = ...,
    ) -> object:
        ...

    def clear_cache(self) -> None:
        ...

    def clear_expired_cache(self) -> int:
        ...

    def get_cache_stats(self) -> CacheStats:
        ...
