"""
Theme resolution: archetype defaults, AI guidance, mode blocks and caller
overrides reduced into one complete ResolvedTheme.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Literal, Mapping, NamedTuple, Optional

from pydantic import BaseModel

from ..config.models import ThemeOverrides
from ..registry import Archetype
from ..util.text import first_present
from .aicontent import ai_body_style, ai_heading_style, ai_imagery_style, ai_palette

logger = logging.getLogger(__name__)

Mode = Literal["light", "medium", "dark"]

PALETTE_KEYS = (
    "primary",
    "secondary",
    "accent",
    "background",
    "background_alt",
    "text",
    "text_muted",
    "card_bg",
    "border_color",
)

DARK_COLORS: Mapping[str, str] = MappingProxyType({
    "background": "#0f172a",
    "background_alt": "#1e293b",
    "text": "#f8fafc",
    "text_muted": "#94a3b8",
    "card_bg": "#1e293b",
    "border_color": "#334155",
    "secondary": "#3b82f6",
})

MEDIUM_COLORS: Mapping[str, str] = MappingProxyType({
    "background": "#f0f0f0",
    "background_alt": "#e5e5e5",
    "text": "#1f2937",
    "text_muted": "#4b5563",
    "card_bg": "#ffffff",
    "border_color": "#d1d5db",
})

FALLBACK_COLORS: Mapping[str, str] = MappingProxyType({
    "primary": "#2563eb",
    "secondary": "#1e293b",
    "accent": "#f59e0b",
    "background": "#ffffff",
    "text": "#1e293b",
    "text_muted": "#64748b",
    "card_bg": "#ffffff",
    "border_color": "#e2e8f0",
})

FALLBACK_BACKGROUND_ALT: Mapping[str, str] = MappingProxyType({
    "dark": "#1e293b",
    "medium": "#e5e5e5",
    "light": "#f8fafc",
})

HEADING_FONT_STACKS: Mapping[str, str] = MappingProxyType({
    "serif": "'Playfair Display', Georgia, serif",
    "sans": "'Inter', system-ui, sans-serif",
    "display": "'Bebas Neue', 'Oswald', sans-serif",
})

BODY_FONT_STACKS: Mapping[str, str] = MappingProxyType({
    "serif": "'Lora', Georgia, serif",
    "sans": "system-ui, sans-serif",
})

DEFAULT_HEADING_FONT = "'Inter', system-ui, sans-serif"
DEFAULT_BODY_FONT = "system-ui, sans-serif"
DEFAULT_HEADING_WEIGHT = "700"
DEFAULT_HEADING_STYLE = "none"
DEFAULT_LETTER_SPACING = "0"
DEFAULT_BORDER_RADIUS = "12px"
DEFAULT_SECTION_PADDING = "80px 24px"
DEFAULT_CARD_PADDING = "32px"
DEFAULT_GAP = "32px"
DEFAULT_BUTTON_PADDING = "16px 32px"
DEFAULT_IMAGE_FILTER = "none"


class Palette(BaseModel):
    primary: str
    secondary: str
    accent: str
    background: str
    background_alt: str
    text: str
    text_muted: str
    card_bg: str
    border_color: str

    model_config = {"frozen": True, "extra": "forbid"}


class Typography(BaseModel):
    font_heading: str
    font_body: str
    heading_weight: str
    heading_style: str
    letter_spacing: str

    model_config = {"frozen": True, "extra": "forbid"}


class Spacing(BaseModel):
    border_radius: str
    section_padding: str
    card_padding: str
    gap: str
    button_padding: str

    model_config = {"frozen": True, "extra": "forbid"}


class ResolvedTheme(BaseModel):
    """A complete theme; every field is required so partial themes cannot exist."""

    archetype_id: str
    mode: Mode
    palette: Palette
    typography: Typography
    spacing: Spacing
    image_filter: str

    model_config = {"frozen": True, "extra": "forbid"}


class ThemeLayer(NamedTuple):
    """One named colour layer; ``fill_only`` layers never replace a value already set."""

    name: str
    colors: Mapping[str, str]
    fill_only: bool = False


def resolve_mode(overrides: ThemeOverrides) -> Mode:
    # dark wins when both flags are set
    if overrides.is_dark:
        return "dark"
    if overrides.is_medium:
        return "medium"
    return "light"


def _override_colors(overrides: ThemeOverrides) -> Dict[str, str]:
    colors: Dict[str, str] = {}
    for key, value in overrides.colors.items():
        if key not in PALETTE_KEYS:
            logger.debug("Ignoring unknown colour override '%s'", key)
            continue
        if isinstance(value, str) and value.strip():
            colors[key] = value.strip()
    return colors


def theme_layers(
    archetype: Archetype,
    overrides: Optional[ThemeOverrides] = None,
    ai_content: Optional[Mapping[str, Any]] = None,
) -> List[ThemeLayer]:
    """
    The colour layers for a theme, lowest precedence first.

    Mode layers are only present when their flag applies, so the list itself
    documents which substitutions took part.
    """
    overrides = overrides or ThemeOverrides()
    mode = resolve_mode(overrides)
    layers = [
        ThemeLayer("archetype", archetype.style.colors),
        ThemeLayer("ai-guidance", MappingProxyType(ai_palette(ai_content))),
    ]
    if mode == "dark":
        layers.append(ThemeLayer("dark", DARK_COLORS))
    elif mode == "medium":
        layers.append(ThemeLayer("medium", MEDIUM_COLORS))
    layers.append(ThemeLayer("overrides", MappingProxyType(_override_colors(overrides))))
    fallback = dict(FALLBACK_COLORS, background_alt=FALLBACK_BACKGROUND_ALT[mode])
    layers.append(ThemeLayer("fallback", MappingProxyType(fallback), fill_only=True))
    return layers


def reduce_layers(layers: List[ThemeLayer]) -> Dict[str, str]:
    merged: Dict[str, str] = {}
    for layer in layers:
        for key, value in layer.colors.items():
            if layer.fill_only and key in merged:
                continue
            merged[key] = value
    return merged


def _resolve_typography(
    archetype: Archetype,
    overrides: ThemeOverrides,
    ai_content: Optional[Mapping[str, Any]],
) -> Typography:
    style = archetype.style.typography
    ai_heading = HEADING_FONT_STACKS.get(ai_heading_style(ai_content) or "")
    ai_body = BODY_FONT_STACKS.get(ai_body_style(ai_content) or "")
    return Typography(
        font_heading=first_present(overrides.font_heading, ai_heading, style.heading_font,
                                   default=DEFAULT_HEADING_FONT),
        font_body=first_present(overrides.font_body, ai_body, style.body_font, default=DEFAULT_BODY_FONT),
        heading_weight=first_present(style.heading_weight, default=DEFAULT_HEADING_WEIGHT),
        heading_style=first_present(overrides.headline_style, style.heading_style, default=DEFAULT_HEADING_STYLE),
        letter_spacing=first_present(style.letter_spacing, default=DEFAULT_LETTER_SPACING),
    )


def _resolve_spacing(archetype: Archetype, overrides: ThemeOverrides) -> Spacing:
    style = archetype.style
    return Spacing(
        border_radius=first_present(overrides.border_radius, style.border_radius, default=DEFAULT_BORDER_RADIUS),
        section_padding=first_present(overrides.section_padding, style.section_padding,
                                      default=DEFAULT_SECTION_PADDING),
        card_padding=first_present(overrides.card_padding, default=DEFAULT_CARD_PADDING),
        gap=first_present(overrides.gap, default=DEFAULT_GAP),
        button_padding=first_present(overrides.button_padding, default=DEFAULT_BUTTON_PADDING),
    )


def _resolve_image_filter(
    archetype: Archetype,
    overrides: ThemeOverrides,
    ai_content: Optional[Mapping[str, Any]],
) -> str:
    imagery = ai_imagery_style(ai_content)
    by_style = archetype.image_filters.get(imagery) if imagery else None
    return first_present(overrides.image_filter, by_style, archetype.default_image_filter,
                         default=DEFAULT_IMAGE_FILTER)


def resolve_theme(
    archetype: Archetype,
    overrides: Optional[ThemeOverrides] = None,
    ai_content: Optional[Mapping[str, Any]] = None,
) -> ResolvedTheme:
    """
    Merge every theme source for an archetype into a ResolvedTheme.

    Args:
        archetype: Registry archetype supplying the base palette and style.
        overrides: Caller overrides, including dark/medium mode flags.
        ai_content: Raw AI content; only colour, typography and imagery
            guidance are read.
    """
    overrides = overrides or ThemeOverrides()
    colors = reduce_layers(theme_layers(archetype, overrides, ai_content))
    return ResolvedTheme(
        archetype_id=archetype.id,
        mode=resolve_mode(overrides),
        palette=Palette(**{key: colors[key] for key in PALETTE_KEYS}),
        typography=_resolve_typography(archetype, overrides, ai_content),
        spacing=_resolve_spacing(archetype, overrides),
        image_filter=_resolve_image_filter(archetype, overrides, ai_content),
    )

