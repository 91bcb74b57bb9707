"""Domain enumerations for team logos.

Enums represent fixed sets of domain values (logo sizes, image formats).
"""

from enum import Enum


class LogoSize(str, Enum):
    """Requested logo size. Each size maps to a square pixel dimension."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def pixels(self) -> int:
        """Rendered edge length in pixels."""
        return _SIZE_PIXELS[self]

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid size values as strings."""
        return [size.value for size in cls]

    @classmethod
    def coerce(cls, value: "LogoSize | str | None") -> "LogoSize":
        """Return the matching size; unknown or empty values become MEDIUM."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.MEDIUM


_SIZE_PIXELS = {
    LogoSize.SMALL: 32,
    LogoSize.MEDIUM: 64,
    LogoSize.LARGE: 128,
}


class ImageFormat(str, Enum):
    """Concrete image format of a logo lookup (after resolving WebP preference)."""

    WEBP = "webp"
    PNG = "png"

    @classmethod
    def resolve(cls, prefer_webp: bool, webp_supported: bool) -> "ImageFormat":
        """WEBP only when the caller prefers it and the runtime supports it."""
        return cls.WEBP if prefer_webp and webp_supported else cls.PNG


class DisplayState(str, Enum):
    """What a logo consumer currently renders."""

    IMAGE = "image"
    INITIALS = "initials"
    EMPTY = "empty"
