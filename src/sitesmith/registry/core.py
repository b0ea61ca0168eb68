"""
The Registry: one immutable bundle of every reference table the pipeline reads.

Build it once with :func:`default_registry` and pass it by parameter; nothing
in the pipeline reaches for module-level tables directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from ..config.models import ArchetypeNotFoundError, ConfigurationError, PageKind, parse_page_kind
from ..util.text import normalize_key
from .archetypes import GENERIC_PAGE_SECTIONS, Archetype, SectionDescriptor, build_archetypes
from .defaults import PageDefaults, resolve_page_defaults
from .features import DEFAULT_MODULES, INDUSTRY_MODULES, module_label
from .images import HERO_IMAGES
from .industries import (
    DEFAULT_FAMILY,
    DEFAULT_INDUSTRY,
    FOOD_SERVICE,
    INDUSTRY_ALIASES,
    canonical_industries,
    family_index,
)
from .research import DEFAULT_MENU_STYLE, VARIANT_KEYS, IndustryResearch, LayoutVariant, ResearchData, load_research

logger = logging.getLogger(__name__)

DEFAULT_HERO_COMPONENT = "ImageOverlayHero"
PRIMARY_IMAGES = "primary"

FOOD_PAGES: Tuple[PageKind, ...] = (PageKind.HOME, PageKind.MENU, PageKind.ABOUT, PageKind.CONTACT, PageKind.GALLERY)
SERVICE_PAGES: Tuple[PageKind, ...] = (PageKind.HOME, PageKind.SERVICES, PageKind.ABOUT, PageKind.CONTACT)


@dataclass(frozen=True)
class Registry:
    """
    Read-only reference dataset.

    Attributes:
        industries: Canonical industry keys in lookup order ("default" last).
        aliases: Normalised alias -> canonical key.
        families: Canonical key -> family name.
        images: Canonical key -> image category -> URLs.
        archetypes: Archetype id -> Archetype, in declaration order.
        research_data: Parsed industry design research.
        modules: Canonical key -> feature module name -> module type.
    """

    industries: Tuple[str, ...]
    aliases: Mapping[str, str]
    families: Mapping[str, str]
    images: Mapping[str, Mapping[str, Tuple[str, ...]]]
    archetypes: Mapping[str, Archetype]
    research_data: ResearchData
    modules: Mapping[str, Mapping[str, str]]

    # industries ---------------------------------------------------------

    def lookup_industry(self, raw_name: Optional[str]) -> str:
        """
        Resolve free text to a canonical industry key.

        Order: alias table, exact key, substring containment in either
        direction (registry order), then ``default``. Never raises.
        """
        key = normalize_key(raw_name)
        if not key:
            return DEFAULT_INDUSTRY
        if key in self.aliases:
            return self.aliases[key]
        if key in self.families:
            return key
        for candidate in self.industries:
            if candidate == DEFAULT_INDUSTRY:
                continue
            if candidate in key or key in candidate:
                logger.debug("Industry '%s' matched '%s' by substring", raw_name, candidate)
                return candidate
        logger.debug("Industry '%s' not recognised; using default", raw_name)
        return DEFAULT_INDUSTRY

    def family_for(self, industry: Optional[str]) -> str:
        return self.families.get(self.lookup_industry(industry), DEFAULT_FAMILY)

    def get_image_set(self, industry: Optional[str], category: str = PRIMARY_IMAGES) -> Tuple[str, ...]:
        """Images for a category, else the industry's primary set, else the default primary set."""
        key = industry if industry in self.images else self.lookup_industry(industry)
        sets = self.images.get(key) or self.images[DEFAULT_INDUSTRY]
        if category in sets:
            return sets[category]
        if PRIMARY_IMAGES in sets:
            return sets[PRIMARY_IMAGES]
        return self.images[DEFAULT_INDUSTRY][PRIMARY_IMAGES]

    def get_hero_image(self, industry: Optional[str], category: str = PRIMARY_IMAGES, index: Optional[int] = None) -> str:
        images = self.get_image_set(industry, category)
        if index is not None and 0 <= index < len(images):
            return images[index]
        return images[0]

    # archetypes ---------------------------------------------------------

    def archetype(self, archetype_id: str) -> Archetype:
        """
        Raises:
            ArchetypeNotFoundError: If the id is not registered.
        """
        try:
            return self.archetypes[archetype_id]
        except KeyError:
            raise ArchetypeNotFoundError(archetype_id, list(self.archetypes)) from None

    def archetypes_for_family(self, family: str) -> List[Archetype]:
        return [archetype for archetype in self.archetypes.values() if archetype.family == family]

    def page_sections(self, archetype_id: str, page_kind: PageKind | str) -> Tuple[SectionDescriptor, ...]:
        kind = parse_page_kind(page_kind)
        return self.archetype(archetype_id).sections_for(kind.value) or GENERIC_PAGE_SECTIONS

    def page_defaults(self, archetype_id: str, page_kind: PageKind | str) -> PageDefaults:
        archetype = self.archetype(archetype_id)
        return resolve_page_defaults(archetype.family, archetype.id, parse_page_kind(page_kind).value)

    def default_pages(self, family: str) -> Tuple[PageKind, ...]:
        return FOOD_PAGES if family == FOOD_SERVICE else SERVICE_PAGES

    # research -----------------------------------------------------------

    def research(self, industry: Optional[str]) -> Optional[IndustryResearch]:
        return self.research_data.industries.get(self.lookup_industry(industry))

    def layout_variant(self, industry: Optional[str], key: str) -> Optional[LayoutVariant]:
        """
        Return a research layout variant, or None when the industry has no research.

        Raises:
            ConfigurationError: If ``key`` is not one of A, B or C, or the
                industry's research does not define it.
        """
        variant_key = str(key).strip().upper()
        if variant_key not in VARIANT_KEYS:
            raise ConfigurationError(f"Unknown layout variant '{key}'. Expected one of: {', '.join(VARIANT_KEYS)}.")
        research = self.research(industry)
        if research is None:
            return None
        try:
            return research.layout_variants[variant_key]
        except KeyError:
            raise ConfigurationError(f"Industry '{research.key}' has no layout variant '{variant_key}'.") from None

    def winning_elements(self, industry: Optional[str]) -> Tuple[str, ...]:
        research = self.research(industry)
        return research.winning_elements if research else ()

    def color_guidance(self, industry: Optional[str]) -> Mapping[str, Tuple[str, ...]]:
        research = self.research(industry)
        return research.color_guidance if research else MappingProxyType({})

    def menu_style(self, industry: Optional[str], variant: Optional[str] = None) -> str:
        styles = self.research_data.industry_menu_styles.get(self.lookup_industry(industry))
        if not styles:
            return DEFAULT_MENU_STYLE
        return styles.get(variant or "A") or styles.get("A") or DEFAULT_MENU_STYLE

    def hero_component(self, hero_type: Optional[str]) -> str:
        return self.research_data.hero_types.get(hero_type or "", DEFAULT_HERO_COMPONENT)

    def section_component(self, section_type: str) -> str:
        return self.research_data.section_types.get(section_type, "")

    # feature modules ----------------------------------------------------

    def modules_for(self, industry: Optional[str]) -> Mapping[str, str]:
        return self.modules.get(self.lookup_industry(industry), DEFAULT_MODULES)

    def module_triples(self, industry: Optional[str]) -> Tuple[Tuple[str, str, str], ...]:
        return tuple((name, kind, module_label(name)) for name, kind in self.modules_for(industry).items())


def build_registry(research: Optional[ResearchData] = None) -> Registry:
    """Assemble a Registry from the bundled tables."""
    return Registry(
        industries=canonical_industries(),
        aliases=INDUSTRY_ALIASES,
        families=family_index(),
        images=HERO_IMAGES,
        archetypes=build_archetypes(),
        research_data=research or load_research(),
        modules=INDUSTRY_MODULES,
    )


@lru_cache(maxsize=1)
def default_registry() -> Registry:
    """Process-wide registry built from the bundled data."""
    return build_registry()


def lookup_industry(raw_name: Optional[str], registry: Optional[Registry] = None) -> str:
    return (registry or default_registry()).lookup_industry(raw_name)


def family_for(industry: Optional[str], registry: Optional[Registry] = None) -> str:
    return (registry or default_registry()).family_for(industry)


def get_image_set(industry: Optional[str], category: str = PRIMARY_IMAGES, registry: Optional[Registry] = None) -> Tuple[str, ...]:
    return (registry or default_registry()).get_image_set(industry, category)


def get_hero_image(
    industry: Optional[str],
    category: str = PRIMARY_IMAGES,
    index: Optional[int] = None,
    registry: Optional[Registry] = None,
) -> str:
    return (registry or default_registry()).get_hero_image(industry, category, index)
