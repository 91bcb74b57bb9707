"""Upstream team logo metadata API client."""

from teamlogos.infrastructure.external.logos.client import (
    LogoApiClient,
    parse_logo_payload,
)

__all__ = ["LogoApiClient", "parse_logo_payload"]
