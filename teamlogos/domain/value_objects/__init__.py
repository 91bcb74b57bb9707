"""Domain value objects (immutable, self-validating)."""

from teamlogos.domain.value_objects.core import LogoCacheKey

__all__ = ["LogoCacheKey"]
