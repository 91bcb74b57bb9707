"""Logo display fallback: primary image, then fallback image, then initials.

Consumers (UI components, the gateway's display endpoint) use LogoDisplay
to decide what to render for a team after a cache lookup. An image that
fails to load client-side moves the display to the fallback url once;
another failure drops it to rendered initials.
"""

from __future__ import annotations

from teamlogos.core.constants import INITIALS_MAX_LENGTH
from teamlogos.domain.entities import TeamLogo
from teamlogos.domain.enums import DisplayState


def team_initials(name: str | None, max_length: int = INITIALS_MAX_LENGTH) -> str:
    """Upper-cased first letter of each space-separated word, truncated.

    >>> team_initials("Natus Vincere")
    'NV'
    """
    if not name:
        return ""
    return "".join(word[:1].upper() for word in name.split(" "))[:max_length]


class LogoDisplay:
    """Render state for one team logo.

    Args:
        logo: Result of a cache lookup (None when no logo is available).
        team_name: Display name used for initials when the logo has none.
        show_fallback: Render initials when no image can be shown.
    """

    def __init__(
        self,
        logo: TeamLogo | None,
        team_name: str | None = None,
        show_fallback: bool = True,
    ) -> None:
        self.logo = logo
        self.team_name = (logo.team_name if logo and logo.team_name else None) or team_name
        self.show_fallback = show_fallback
        self._source = logo.url if logo else None
        self._tried_fallback = False

    @property
    def sources(self) -> list[str]:
        """Image urls a consumer may try, in order."""
        if self.logo is None:
            return []
        urls = [self.logo.url]
        if self.logo.fallback_url and self.logo.fallback_url != self.logo.url:
            urls.append(self.logo.fallback_url)
        return urls

    @property
    def current_source(self) -> str | None:
        return self._source

    @property
    def initials(self) -> str | None:
        if not self.show_fallback or not self.team_name:
            return None
        return team_initials(self.team_name) or None

    @property
    def state(self) -> DisplayState:
        if self._source:
            return DisplayState.IMAGE
        if self.initials:
            return DisplayState.INITIALS
        return DisplayState.EMPTY

    def on_image_error(self) -> str | None:
        """The current image failed to load; return the next url or None.

        The fallback url is tried exactly once, and only when it differs
        from the url that failed. After that the display shows initials.
        """
        fallback = self.logo.fallback_url if self.logo else None
        if fallback and not self._tried_fallback and self._source != fallback:
            self._tried_fallback = True
            self._source = fallback
        else:
            self._source = None
        return self._source
