"""Shared utilities: request context, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from teamlogos.shared.context import get_request_id, reset_request_id, set_request_id
from teamlogos.shared.utils import ensure_utc, utc_now

__all__ = [
    "get_request_id",
    "set_request_id",
    "reset_request_id",
    "utc_now",
    "ensure_utc",
]
