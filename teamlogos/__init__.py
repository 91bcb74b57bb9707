"""Team logo cache service and HTTP gateway."""

__version__ = "1.0.0"
