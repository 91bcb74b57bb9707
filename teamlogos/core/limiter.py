"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the
same instance without circular imports. Central limit strings and
decorators keep rate limits DRY.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Single source of truth for rate limit strings and decorators.
PRELOAD_LIMIT = "30/minute"
CACHE_ADMIN_LIMIT = "10/minute"

limit_preload = limiter.limit(PRELOAD_LIMIT)
limit_cache_admin = limiter.limit(CACHE_ADMIN_LIMIT)
