"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from teamlogos.domain.entities import TeamLogo
from teamlogos.domain.enums import DisplayState, ImageFormat, LogoSize
from teamlogos.domain.exceptions import (
    ServiceUnavailableException,
    TeamLogosException,
    ValidationException,
)
from teamlogos.domain.value_objects import LogoCacheKey

__all__ = [
    "DisplayState",
    "ImageFormat",
    "LogoCacheKey",
    "LogoSize",
    "ServiceUnavailableException",
    "TeamLogo",
    "TeamLogosException",
    "ValidationException",
]
