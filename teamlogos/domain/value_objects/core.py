"""Domain value objects for team logos.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass

from teamlogos.core.constants import CACHE_KEY_SEP
from teamlogos.domain.enums import ImageFormat, LogoSize


@dataclass(frozen=True)
class LogoCacheKey:
    """Composite cache key: team identifier, requested size, resolved format.

    The format is the concrete one selected for the request, not the
    caller's preference flag, so two callers that end up fetching the same
    image share one key.
    """

    team_id: str
    size: LogoSize
    image_format: ImageFormat

    def __post_init__(self) -> None:
        if not self.team_id:
            raise ValueError("Team id must be a non-empty string")

    def __str__(self) -> str:
        return CACHE_KEY_SEP.join(
            (self.team_id, self.size.value, self.image_format.value)
        )

    @property
    def prefers_webp(self) -> bool:
        return self.image_format is ImageFormat.WEBP
