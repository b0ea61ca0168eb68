"""
Shape-checked accessors for untrusted AI-authored content.

AI content arrives as a raw mapping with camelCase keys. Any part of it may be
missing or of the wrong type; every accessor here returns ``None`` or an empty
container in that case and logs the discard at DEBUG instead of raising.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

_HEX_COLOUR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

IMAGERY_STYLES = ("moody-dark", "bright-airy", "soft-muted", "high-contrast", "natural-light")
BRAND_COLOURS = ("primary", "secondary", "accent")


def _walk(ai_content: Optional[Mapping[str, Any]], path: tuple) -> Any:
    node: Any = ai_content
    for key in path:
        if not isinstance(node, Mapping):
            if node is not None:
                logger.debug("Discarding AI content at %s: expected an object, got %s", ".".join(path),
                             type(node).__name__)
            return None
        node = node.get(key)
    return node


def ai_text(ai_content: Optional[Mapping[str, Any]], *path: str) -> Optional[str]:
    """Return a non-blank string at ``path`` or None."""
    value = _walk(ai_content, path)
    if value is None:
        return None
    if not isinstance(value, str):
        logger.debug("Discarding AI content at %s: expected text, got %s", ".".join(path), type(value).__name__)
        return None
    return value.strip() or None


def ai_list(ai_content: Optional[Mapping[str, Any]], *path: str) -> List[Any]:
    """Return the list at ``path`` or an empty list."""
    value = _walk(ai_content, path)
    if value is None:
        return []
    if not isinstance(value, list):
        logger.debug("Discarding AI content at %s: expected a list, got %s", ".".join(path), type(value).__name__)
        return []
    return value


def ai_paragraphs(ai_content: Optional[Mapping[str, Any]]) -> List[str]:
    return [text.strip() for text in ai_list(ai_content, "about", "paragraphs") if isinstance(text, str) and text.strip()]


def ai_menu_categories(ai_content: Optional[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    return [category for category in ai_list(ai_content, "menu", "categories") if isinstance(category, dict)]


def ai_menu_items(ai_content: Optional[Mapping[str, Any]], *, all_categories: bool = False) -> List[Any]:
    """
    Raw menu entries: the first category's items, or every category's items
    flattened in order when ``all_categories`` is set.
    """
    categories = ai_menu_categories(ai_content)
    if not categories:
        return []
    selected = categories if all_categories else categories[:1]
    items: List[Any] = []
    for category in selected:
        entries = category.get("items")
        if isinstance(entries, list):
            items.extend(entries)
        elif entries is not None:
            logger.debug("Discarding AI menu category '%s': items is not a list", category.get("name"))
    return items


def ai_service_items(ai_content: Optional[Mapping[str, Any]]) -> List[Any]:
    return ai_list(ai_content, "services", "items")


def ai_testimonials(ai_content: Optional[Mapping[str, Any]]) -> List[Any]:
    return ai_list(ai_content, "testimonials")


def ai_palette(ai_content: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Brand colours from ``colorStrategy.palette``; anything not a hex colour is dropped."""
    palette = _walk(ai_content, ("colorStrategy", "palette"))
    if not isinstance(palette, Mapping):
        return {}
    colours: Dict[str, str] = {}
    for key in BRAND_COLOURS:
        value = palette.get(key)
        if isinstance(value, str) and _HEX_COLOUR.match(value.strip()):
            colours[key] = value.strip()
        elif value is not None:
            logger.debug("Ignoring AI palette %s=%r: not a hex colour", key, value)
    return colours


def ai_imagery_style(ai_content: Optional[Mapping[str, Any]]) -> Optional[str]:
    style = ai_text(ai_content, "imageryGuidance", "style")
    if style is None:
        return None
    style = style.lower()
    if style not in IMAGERY_STYLES:
        logger.debug("Ignoring unknown imagery style '%s'", style)
        return None
    return style


def ai_heading_style(ai_content: Optional[Mapping[str, Any]]) -> Optional[str]:
    style = ai_text(ai_content, "typographyStrategy", "headingStyle")
    return style.lower() if style else None


def ai_body_style(ai_content: Optional[Mapping[str, Any]]) -> Optional[str]:
    style = ai_text(ai_content, "typographyStrategy", "bodyStyle")
    return style.lower() if style else None
