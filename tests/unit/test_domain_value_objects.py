"""Tests for domain value objects, entities and enums (LogoCacheKey, TeamLogo, LogoSize, ImageFormat)."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from teamlogos.domain.entities import TeamLogo
from teamlogos.domain.enums import ImageFormat, LogoSize
from teamlogos.domain.value_objects import LogoCacheKey


class TestLogoCacheKey:
    """LogoCacheKey: non-empty team id, renders team:size:format."""

    def test_str(self) -> None:
        key = LogoCacheKey("t1", LogoSize.MEDIUM, ImageFormat.WEBP)
        assert str(key) == "t1:medium:webp"
        assert key.prefers_webp

    def test_empty_team_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            LogoCacheKey("", LogoSize.MEDIUM, ImageFormat.PNG)

    def test_equal_keys_hash_equal(self) -> None:
        a = LogoCacheKey("t1", LogoSize.SMALL, ImageFormat.PNG)
        b = LogoCacheKey("t1", LogoSize.SMALL, ImageFormat.PNG)
        assert a == b
        assert len({a, b}) == 1
        assert a != LogoCacheKey("t1", LogoSize.SMALL, ImageFormat.WEBP)

    def test_immutable(self) -> None:
        key = LogoCacheKey("t1", LogoSize.SMALL, ImageFormat.PNG)
        with pytest.raises(FrozenInstanceError):
            key.team_id = "t2"  # type: ignore[misc]


class TestLogoSize:
    """LogoSize values, pixel sizes and lenient coercion."""

    def test_values_and_pixels(self) -> None:
        assert LogoSize.values() == ["small", "medium", "large"]
        assert [s.pixels for s in LogoSize] == [32, 64, 128]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("small", LogoSize.SMALL),
            (" LARGE ", LogoSize.LARGE),
            (LogoSize.LARGE, LogoSize.LARGE),
            ("huge", LogoSize.MEDIUM),
            ("", LogoSize.MEDIUM),
            (None, LogoSize.MEDIUM),
        ],
    )
    def test_coerce(self, raw, expected) -> None:
        assert LogoSize.coerce(raw) is expected


class TestImageFormat:
    @pytest.mark.parametrize(
        ("prefer_webp", "supported", "expected"),
        [
            (True, True, ImageFormat.WEBP),
            (True, False, ImageFormat.PNG),
            (False, True, ImageFormat.PNG),
            (False, False, ImageFormat.PNG),
        ],
    )
    def test_resolve(self, prefer_webp, supported, expected) -> None:
        assert ImageFormat.resolve(prefer_webp, supported) is expected


class TestTeamLogo:
    def test_to_dict_uses_camel_case(self) -> None:
        logo = TeamLogo(
            url="/logos/a.webp",
            fallback_url="/logos/a.png",
            supports_webp=True,
            team_name="Alpha",
            uploaded_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        )
        assert logo.to_dict() == {
            "url": "/logos/a.webp",
            "fallbackUrl": "/logos/a.png",
            "supportsWebP": True,
            "teamName": "Alpha",
            "uploadedAt": "2024-05-01T12:00:00+00:00",
        }

    def test_defaults(self) -> None:
        logo = TeamLogo(url="/logos/a.png")
        assert logo.fallback_url is None
        assert logo.supports_webp is False
        assert logo.to_dict()["uploadedAt"] is None
