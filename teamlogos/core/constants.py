"""Core constants: cache key format and upstream logo API literals.

Single source of truth for the composite key layout and the request
shape sent to the logo metadata endpoint.
"""

# Delimiter for composite keys (team_id:size:format)
CACHE_KEY_SEP = ":"

# Upstream logo metadata endpoint, relative to LOGO_API_BASE_URL
LOGO_API_PATH = "/api/teams/{team_id}/logo"

# Accept headers sent with logo lookups, depending on the resolved format
ACCEPT_WEBP = "image/webp,image/*,*/*;q=0.8"
ACCEPT_DEFAULT = "image/*,*/*;q=0.8"

# Fallback initials: at most this many letters are rendered
INITIALS_MAX_LENGTH = 3
