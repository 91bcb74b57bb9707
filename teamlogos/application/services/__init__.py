"""Application services: logo display fallback."""

from teamlogos.application.services.logo_display import LogoDisplay, team_initials

__all__ = ["LogoDisplay", "team_initials"]
