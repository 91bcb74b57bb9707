"""Cache: in-memory logo cache service and its periodic sweeper.

LogoCacheService is built in the application lifespan (app.state.logo_cache)
and shared by all routes; CacheSweeper evicts expired entries in the
background.
"""

from teamlogos.infrastructure.cache.logo_cache import LogoCacheService
from teamlogos.infrastructure.cache.sweeper import CacheSweeper

__all__ = [
    "CacheSweeper",
    "LogoCacheService",
]
