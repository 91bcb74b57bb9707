"""DTOs for logo cache diagnostics."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class CacheStats:
    """Read-only snapshot of the logo cache (diagnostics and tests only)."""

    cache_size: int
    failed_cache_size: int
    preload_queue_size: int
    is_preloading: bool
    in_flight: int

    def to_dict(self) -> dict:
        return asdict(self)
