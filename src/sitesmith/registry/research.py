"""
Industry design research: layout variants, winning elements and colour guidance.

The dataset ships as ``data/research.json`` inside the package and is parsed
once into frozen records.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

RESEARCH_RESOURCE = "data/research.json"
VARIANT_KEYS = ("A", "B", "C")
DEFAULT_MENU_STYLE = "photo-grid"


@dataclass(frozen=True)
class ResearchSection:
    type: str
    config: Mapping[str, Any]


@dataclass(frozen=True)
class LayoutVariant:
    """One research-backed home page structure (A, B or C)."""

    key: str
    name: str
    description: str
    hero_type: str
    hero_config: Mapping[str, Any]
    sections: Tuple[ResearchSection, ...]
    features: Tuple[str, ...]
    mood: str


@dataclass(frozen=True)
class IndustryResearch:
    key: str
    name: str
    style_note: str
    layout_variants: Mapping[str, LayoutVariant]
    winning_elements: Tuple[str, ...]
    color_guidance: Mapping[str, Tuple[str, ...]]


@dataclass(frozen=True)
class ResearchData:
    """
    Parsed research dataset.

    Attributes:
        hero_types: Hero type -> component name.
        section_types: Section type -> component name.
        menu_styles: Menu style -> {name, description}.
        industry_menu_styles: Industry -> variant -> menu style.
        industries: Industry key -> IndustryResearch.
    """

    hero_types: Mapping[str, str]
    section_types: Mapping[str, str]
    menu_styles: Mapping[str, Mapping[str, str]]
    industry_menu_styles: Mapping[str, Mapping[str, str]]
    industries: Mapping[str, IndustryResearch]


def freeze_data(value: Any) -> Any:
    """Recursively turn decoded JSON into read-only mappings and tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_data(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_data(item) for item in value)
    return value


def thaw_data(value: Any) -> Any:
    """Inverse of freeze_data, for JSON output."""
    if isinstance(value, Mapping):
        return {key: thaw_data(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw_data(item) for item in value]
    return value


def _parse_variant(key: str, raw: Mapping[str, Any]) -> LayoutVariant:
    sections = tuple(
        ResearchSection(type=str(entry.get("type", "")), config=freeze_data(entry.get("config") or {}))
        for entry in raw.get("sections", [])
        if isinstance(entry, dict) and entry.get("type")
    )
    return LayoutVariant(
        key=key,
        name=str(raw.get("name", key)),
        description=str(raw.get("description", "")),
        hero_type=str(raw.get("hero_type", "image-overlay")),
        hero_config=freeze_data(raw.get("hero_config") or {}),
        sections=sections,
        features=tuple(str(item) for item in raw.get("features", [])),
        mood=str(raw.get("mood", "")),
    )


def _parse_industry(key: str, raw: Mapping[str, Any]) -> IndustryResearch:
    variants = {
        variant_key: _parse_variant(variant_key, variant)
        for variant_key, variant in (raw.get("layout_variants") or {}).items()
        if isinstance(variant, dict)
    }
    guidance = {
        name: tuple(str(colour) for colour in colours)
        for name, colours in (raw.get("color_guidance") or {}).items()
        if isinstance(colours, list)
    }
    return IndustryResearch(
        key=key,
        name=str(raw.get("name", key)),
        style_note=str(raw.get("style_note", "")),
        layout_variants=MappingProxyType(variants),
        winning_elements=tuple(str(item) for item in raw.get("winning_elements", [])),
        color_guidance=MappingProxyType(guidance),
    )


def parse_research(payload: Mapping[str, Any]) -> ResearchData:
    """Build a ResearchData from the decoded JSON document."""
    industries = {
        key: _parse_industry(key, value)
        for key, value in (payload.get("industries") or {}).items()
        if isinstance(value, dict)
    }
    return ResearchData(
        hero_types=freeze_data(payload.get("hero_types") or {}),
        section_types=freeze_data(payload.get("section_types") or {}),
        menu_styles=freeze_data(payload.get("menu_styles") or {}),
        industry_menu_styles=freeze_data(payload.get("industry_menu_styles") or {}),
        industries=MappingProxyType(industries),
    )


def load_research(path: Optional[Path] = None) -> ResearchData:
    """
    Load the research dataset.

    Args:
        path: Alternative JSON file; defaults to the copy bundled with the package.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    if path is None:
        return _bundled_research()
    logger.debug("Loading research data from %s", path)
    return parse_research(json.loads(Path(path).read_text(encoding="utf-8")))


@lru_cache(maxsize=1)
def _bundled_research() -> ResearchData:
    text = resources.files(__package__).joinpath(RESEARCH_RESOURCE).read_text(encoding="utf-8")
    return parse_research(json.loads(text))
