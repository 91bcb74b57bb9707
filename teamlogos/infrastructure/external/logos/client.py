"""Async HTTP client for the upstream team logo metadata API.

Handles raw requests to GET /api/teams/{team_id}/logo and maps the
JSON body to TeamLogo. No caching here: LogoCacheService decides what
to keep and what to cool down. Transport and status failures are raised
as LogoFetchError subclasses; a body without a usable url is None.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from teamlogos.core.constants import ACCEPT_DEFAULT, ACCEPT_WEBP, LOGO_API_PATH
from teamlogos.domain.entities import TeamLogo
from teamlogos.domain.enums import ImageFormat, LogoSize
from teamlogos.infrastructure.exceptions import (
    LogoClientError,
    LogoFetchError,
    LogoNetworkError,
    LogoServerError,
    LogoTimeoutError,
)
from teamlogos.shared.telemetry.tracing import add_span_attributes, traced
from teamlogos.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


class _LogoPayload(BaseModel):
    """Logo object as returned by the API (camelCase keys)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    url: str | None = None
    fallback_url: str | None = Field(default=None, alias="fallbackUrl")
    supports_webp: bool = Field(default=False, alias="supportsWebP")
    uploaded_at: datetime | None = Field(default=None, alias="uploadedAt")
    team_name: str | None = Field(default=None, alias="teamName")


class _TeamPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    logo: _LogoPayload | None = None


def parse_logo_payload(payload: Any) -> TeamLogo | None:
    """Map a logo API body to TeamLogo, or None when it has no usable url.

    Accepts the nested shape ``{"team": {"name": ..., "logo": {...}}}``
    and the flat shape ``{"url": ..., "fallbackUrl": ..., "teamName": ...}``.
    """
    if not isinstance(payload, dict):
        return None
    try:
        if isinstance(payload.get("team"), dict):
            team = _TeamPayload.model_validate(payload["team"])
            logo = team.logo
            team_name = team.name or (logo.team_name if logo else None)
        else:
            logo = _LogoPayload.model_validate(payload)
            team_name = logo.team_name
    except ValidationError as e:
        logger.warning("Discarding malformed logo payload: %s", e.errors()[:1])
        return None
    if logo is None or not logo.url:
        return None
    return TeamLogo(
        url=logo.url,
        fallback_url=logo.fallback_url or None,
        supports_webp=logo.supports_webp,
        team_name=team_name,
        uploaded_at=ensure_utc(logo.uploaded_at),
    )


class LogoApiClient:
    """Logo metadata client on a shared httpx.AsyncClient.

    The AsyncClient is owned by the application lifespan (base_url and
    connection pool); this class only adds the per-request timeout,
    Accept negotiation and error classification.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._http = http_client
        self._timeout = timeout

    @traced("logo_api.fetch_logo")
    async def fetch_logo(
        self, team_id: str, size: LogoSize, image_format: ImageFormat
    ) -> TeamLogo | None:
        """Fetch logo metadata for one team.

        Args:
            team_id: Opaque team identifier (URL-escaped into the path).
            size: Requested logo size.
            image_format: Resolved format; WEBP adds ``format=webp``.

        Returns:
            TeamLogo, or None when the team has no usable logo.

        Raises:
            LogoTimeoutError: The whole request, body included, exceeded the timeout.
            LogoNetworkError: Transport failure (DNS, refused connection, ...).
            LogoServerError: Upstream returned 5xx.
            LogoClientError: Upstream returned 4xx.
            LogoFetchError: The team id cannot be sent (URL too long, bad encoding).
        """
        add_span_attributes(
            team_id=team_id, size=size.value, image_format=image_format.value
        )
        params = {"size": size.value}
        if image_format is ImageFormat.WEBP:
            params["format"] = ImageFormat.WEBP.value
        headers = {
            "Accept": ACCEPT_WEBP if image_format is ImageFormat.WEBP else ACCEPT_DEFAULT
        }

        try:
            url = LOGO_API_PATH.format(team_id=quote(team_id, safe=""))
            # httpx timeouts apply per phase; this bounds the whole exchange.
            async with asyncio.timeout(self._timeout):
                response = await self._http.get(
                    url, params=params, headers=headers, timeout=self._timeout
                )
        except (TimeoutError, httpx.TimeoutException) as e:
            raise LogoTimeoutError(team_id, self._timeout) from e
        except httpx.HTTPError as e:
            raise LogoNetworkError(team_id, str(e) or e.__class__.__name__) from e
        except (httpx.InvalidURL, UnicodeError) as e:
            raise LogoFetchError(
                team_id, f"invalid request: {e}", "LOGO_INVALID_REQUEST"
            ) from e

        if response.status_code >= 500:
            raise LogoServerError(team_id, response.status_code)
        if response.status_code >= 400:
            raise LogoClientError(team_id, response.status_code)

        try:
            payload = response.json()
        except ValueError:
            logger.warning("[LOGO] Non-JSON body for team %s (%s)", team_id, size.value)
            return None

        logo = parse_logo_payload(payload)
        logger.debug(
            "[FETCH] team=%s size=%s format=%s -> %s",
            team_id,
            size.value,
            image_format.value,
            logo.url if logo else None,
        )
        return logo
