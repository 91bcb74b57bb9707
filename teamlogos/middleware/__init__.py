"""HTTP middleware: request ID and request timeout.

Applied in main app; order matters (last added = outermost).
"""

from teamlogos.middleware.request_id import RequestIDMiddleware
from teamlogos.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
