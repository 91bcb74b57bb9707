"""Presentation-layer dependency injection (composition root).

Routes depend on these functions, never on app.state or infrastructure
directly. The logo cache itself is built in teamlogos.core.lifespan.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from teamlogos.application.interfaces import ILogoCache
from teamlogos.core.config import Settings, get_settings
from teamlogos.domain.exceptions import ServiceUnavailableException


def get_logo_cache(request: Request) -> ILogoCache:
    """Logo cache shared by all requests (app.state.logo_cache, set in lifespan).

    Raises:
        ServiceUnavailableException: The lifespan has not wired the cache.
    """
    cache = getattr(request.app.state, "logo_cache", None)
    if cache is None:
        raise ServiceUnavailableException("logo_cache")
    return cache


LogoCacheDep = Annotated[ILogoCache, Depends(get_logo_cache)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
