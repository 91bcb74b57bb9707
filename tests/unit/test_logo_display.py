"""LogoDisplay and team_initials: primary -> fallback (once) -> initials."""

import pytest

from teamlogos.application.services.logo_display import LogoDisplay, team_initials
from teamlogos.domain.entities import TeamLogo
from teamlogos.domain.enums import DisplayState


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Alpha", "A"),
        ("Natus Vincere", "NV"),
        ("team liquid academy plus", "TLA"),
        ("", ""),
        (None, ""),
    ],
)
def test_team_initials(name, expected) -> None:
    assert team_initials(name) == expected


def test_image_error_tries_fallback_once_then_initials() -> None:
    """Primary webp fails -> png fallback; png fails -> initials 'A'."""
    logo = TeamLogo(
        url="/logos/a.webp",
        fallback_url="/logos/a.png",
        supports_webp=True,
        team_name="Alpha",
    )
    display = LogoDisplay(logo)
    assert display.state is DisplayState.IMAGE
    assert display.current_source == "/logos/a.webp"
    assert display.sources == ["/logos/a.webp", "/logos/a.png"]

    assert display.on_image_error() == "/logos/a.png"
    assert display.state is DisplayState.IMAGE

    assert display.on_image_error() is None
    assert display.state is DisplayState.INITIALS
    assert display.initials == "A"

    assert display.on_image_error() is None


def test_fallback_equal_to_primary_is_not_retried() -> None:
    logo = TeamLogo(url="/logos/a.png", fallback_url="/logos/a.png", team_name="Alpha")
    display = LogoDisplay(logo)
    assert display.sources == ["/logos/a.png"]
    assert display.on_image_error() is None
    assert display.state is DisplayState.INITIALS


def test_absent_logo_uses_given_team_name() -> None:
    display = LogoDisplay(None, team_name="Bravo Team")
    assert display.state is DisplayState.INITIALS
    assert display.sources == []
    assert display.initials == "BT"


def test_logo_team_name_wins_over_given_name() -> None:
    display = LogoDisplay(TeamLogo(url="/x.png", team_name="Alpha"), team_name="Other")
    assert display.initials == "A"


def test_no_fallback_or_name_is_empty() -> None:
    assert LogoDisplay(None).state is DisplayState.EMPTY
    assert LogoDisplay(None, team_name="Alpha", show_fallback=False).state is DisplayState.EMPTY
