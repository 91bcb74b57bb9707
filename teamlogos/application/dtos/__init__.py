"""Application DTOs."""

from teamlogos.application.dtos.logo import CacheStats

__all__ = ["CacheStats"]
