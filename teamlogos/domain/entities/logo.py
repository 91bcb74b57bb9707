"""Team logo entity: the value stored in the logo cache."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class TeamLogo:
    """Logo metadata for one team at one size and format.

    Attributes:
        url: Primary image locator (WebP when supports_webp is True).
        fallback_url: Secondary locator to try when the primary fails to load.
        supports_webp: True if url already points at a WebP image.
        team_name: Owning team's display name (used for fallback initials).
        uploaded_at: When the logo was uploaded (UTC), if known.
    """

    url: str
    fallback_url: str | None = None
    supports_webp: bool = False
    team_name: str | None = None
    uploaded_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys UI consumers already use."""
        return {
            "url": self.url,
            "fallbackUrl": self.fallback_url,
            "supportsWebP": self.supports_webp,
            "teamName": self.team_name,
            "uploadedAt": self.uploaded_at.isoformat() if self.uploaded_at else None,
        }
