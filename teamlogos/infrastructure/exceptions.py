"""Infrastructure exceptions for the upstream logo API.

Fetch errors extend TeamLogosException so presentation can map them
to HTTP responses consistently. The cache service classifies them:
network and server errors start a cool-down, client errors only when
configured to.
"""

from teamlogos.domain.exceptions import TeamLogosException


class LogoFetchError(TeamLogosException):
    """Base exception for logo metadata lookups."""

    def __init__(
        self,
        team_id: str,
        reason: str,
        error_code: str = "LOGO_FETCH_ERROR",
        status_code: int | None = None,
    ) -> None:
        details: dict = {"team_id": team_id, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(f"Failed to fetch logo for team {team_id}: {reason}", error_code, details)
        self.team_id = team_id
        self.status_code = status_code


class LogoNetworkError(LogoFetchError):
    """Connection refused, DNS failure, or other transport error."""

    def __init__(self, team_id: str, reason: str) -> None:
        super().__init__(team_id, reason, "LOGO_NETWORK_ERROR")


class LogoTimeoutError(LogoNetworkError):
    """Lookup exceeded the per-fetch timeout (network class)."""

    def __init__(self, team_id: str, timeout_seconds: float) -> None:
        super().__init__(team_id, f"timed out after {timeout_seconds}s")
        self.error_code = "LOGO_TIMEOUT"
        self.details["timeout_seconds"] = timeout_seconds


class LogoServerError(LogoFetchError):
    """Upstream answered with a 5xx status."""

    def __init__(self, team_id: str, status_code: int) -> None:
        super().__init__(
            team_id, f"server error {status_code}", "LOGO_SERVER_ERROR", status_code
        )


class LogoClientError(LogoFetchError):
    """Upstream answered with a 4xx status (unknown team, team without logo, ...)."""

    def __init__(self, team_id: str, status_code: int) -> None:
        super().__init__(
            team_id, f"client error {status_code}", "LOGO_CLIENT_ERROR", status_code
        )
