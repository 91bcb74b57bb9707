"""Tests for domain and infrastructure exceptions (error_code, message, details)."""

from teamlogos.domain.exceptions import (
    ServiceUnavailableException,
    TeamLogosException,
    ValidationException,
)
from teamlogos.infrastructure.exceptions import (
    LogoClientError,
    LogoFetchError,
    LogoNetworkError,
    LogoServerError,
    LogoTimeoutError,
)


def test_teamlogos_exception_default_error_code() -> None:
    """Base TeamLogosException uses class name as error_code when not provided."""
    exc = TeamLogosException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TeamLogosException"
    assert exc.details == {}


def test_teamlogos_exception_to_dict() -> None:
    exc = TeamLogosException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Too many ids", field="team_ids")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "team_ids"}
    assert ValidationException("Invalid").details == {}


def test_service_unavailable_exception() -> None:
    exc = ServiceUnavailableException("logo_cache")
    assert exc.error_code == "SERVICE_UNAVAILABLE"
    assert exc.details == {"service": "logo_cache"}
    assert "logo_cache" in exc.message


def test_network_error_details() -> None:
    exc = LogoNetworkError("t1", "connection refused")
    assert isinstance(exc, LogoFetchError)
    assert isinstance(exc, TeamLogosException)
    assert exc.error_code == "LOGO_NETWORK_ERROR"
    assert exc.team_id == "t1"
    assert exc.status_code is None
    assert exc.details == {"team_id": "t1", "reason": "connection refused"}


def test_timeout_error_is_network_class() -> None:
    exc = LogoTimeoutError("t1", 5.0)
    assert isinstance(exc, LogoNetworkError)
    assert exc.error_code == "LOGO_TIMEOUT"
    assert exc.details["timeout_seconds"] == 5.0


def test_status_errors_carry_status_code() -> None:
    server = LogoServerError("t1", 502)
    client = LogoClientError("t1", 404)
    assert (server.error_code, server.status_code) == ("LOGO_SERVER_ERROR", 502)
    assert (client.error_code, client.status_code) == ("LOGO_CLIENT_ERROR", 404)
    assert client.details["status_code"] == 404
