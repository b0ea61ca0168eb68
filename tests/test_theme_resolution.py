import pytest
from pydantic import ValidationError

from sitesmith.config import ThemeOverrides
from sitesmith.pipeline import resolve_theme, theme_layers
from sitesmith.pipeline.theme import DARK_COLORS, FALLBACK_COLORS, HEADING_FONT_STACKS, MEDIUM_COLORS, PALETTE_KEYS
from sitesmith.registry import default_registry


@pytest.fixture()
def local():
    return default_registry().archetype("local")


def test_archetype_colours_are_used_and_gaps_filled(local) -> None:
    theme = resolve_theme(local)
    assert theme.mode == "light"
    assert theme.palette.primary == "#8B4513"
    assert theme.palette.background == "#FFFAF5"
    assert theme.palette.card_bg == FALLBACK_COLORS["card_bg"]
    assert theme.palette.border_color == FALLBACK_COLORS["border_color"]
    for key in PALETTE_KEYS:
        assert getattr(theme.palette, key)


def test_dark_mode_replaces_surface_colours(local) -> None:
    theme = resolve_theme(local, ThemeOverrides(is_dark=True))
    assert theme.mode == "dark"
    assert theme.palette.background == DARK_COLORS["background"]
    assert theme.palette.text == DARK_COLORS["text"]
    assert theme.palette.primary == "#8B4513"
    assert theme.palette.secondary == "#3b82f6"
    assert resolve_theme(local).palette.secondary != "#3b82f6"


def test_medium_mode(local) -> None:
    theme = resolve_theme(local, ThemeOverrides(is_medium=True))
    assert theme.mode == "medium"
    assert theme.palette.background_alt == MEDIUM_COLORS["background_alt"]


def test_dark_wins_when_both_modes_are_set(local) -> None:
    both = resolve_theme(local, ThemeOverrides(is_dark=True, is_medium=True))
    dark = resolve_theme(local, ThemeOverrides(is_dark=True))
    assert both == dark
    assert [layer.name for layer in theme_layers(local, ThemeOverrides(is_dark=True, is_medium=True))] == [
        "archetype",
        "ai-guidance",
        "dark",
        "overrides",
        "fallback",
    ]


def test_explicit_overrides_beat_mode_and_ai(local) -> None:
    overrides = ThemeOverrides(
        is_dark=True,
        colors={"backgroundAlt": "#101010", "primary": "#ff0000", "sparkle": "#abcdef"},
        border_radius="0px",
        font_heading="'Comic Neue', cursive",
    )
    ai = {
        "colorStrategy": {"palette": {"primary": "#00ff00"}},
        "typographyStrategy": {"headingStyle": "serif"},
    }
    theme = resolve_theme(local, overrides, ai)
    assert theme.palette.primary == "#ff0000"
    assert theme.palette.background_alt == "#101010"
    assert theme.spacing.border_radius == "0px"
    assert theme.typography.font_heading == "'Comic Neue', cursive"


def test_ai_guidance_beats_archetype_defaults(local) -> None:
    ai = {
        "colorStrategy": {"palette": {"primary": "#123456", "accent": "tomato", "background": "#000000"}},
        "typographyStrategy": {"headingStyle": "Serif"},
    }
    theme = resolve_theme(local, ai_content=ai)
    assert theme.palette.primary == "#123456"
    assert theme.palette.accent == "#F4A460"
    assert theme.palette.background == "#FFFAF5"
    assert theme.typography.font_heading == HEADING_FONT_STACKS["serif"]


def test_malformed_ai_content_is_ignored(local) -> None:
    ai = {"colorStrategy": "bold", "typographyStrategy": ["serif"], "imageryGuidance": {"style": 7}}
    assert resolve_theme(local, ai_content=ai) == resolve_theme(local)


def test_image_filter_precedence() -> None:
    registry = default_registry()
    assert resolve_theme(registry.archetype("luxury")).image_filter == "grayscale(20%)"
    assert resolve_theme(registry.archetype("zen-peaceful")).image_filter == "none"

    local = registry.archetype("local")
    ai = {"imageryGuidance": {"style": "natural-light"}}
    assert resolve_theme(local, ai_content=ai).image_filter == "brightness(1.05)"
    assert resolve_theme(local, ThemeOverrides(image_filter="sepia(1)"), ai).image_filter == "sepia(1)"


def test_resolved_theme_is_immutable(local) -> None:
    theme = resolve_theme(local)
    with pytest.raises(ValidationError):
        theme.palette.primary = "#000000"  # type: ignore[misc]
