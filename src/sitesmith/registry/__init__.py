"""
Immutable reference data: industries, archetypes, research and feature modules.
"""

from .archetypes import Archetype, ArchetypeStyle, ArchetypeTypography, SectionDescriptor
from .core import (
    DEFAULT_HERO_COMPONENT,
    Registry,
    build_registry,
    default_registry,
    family_for,
    get_hero_image,
    get_image_set,
    lookup_industry,
)
from .defaults import ItemDefault, PageDefaults, StatDefault, TestimonialDefault
from .industries import (
    DEFAULT_FAMILY,
    DEFAULT_INDUSTRY,
    FITNESS,
    FOOD_SERVICE,
    GROOMING,
    HEALTHCARE,
    HOME_SERVICES,
    PROFESSIONAL_SERVICES,
    TECHNOLOGY,
)
from .research import IndustryResearch, LayoutVariant, ResearchData, load_research

__all__ = [
    "Archetype",
    "ArchetypeStyle",
    "ArchetypeTypography",
    "SectionDescriptor",
    "DEFAULT_HERO_COMPONENT",
    "Registry",
    "build_registry",
    "default_registry",
    "family_for",
    "get_hero_image",
    "get_image_set",
    "lookup_industry",
    "ItemDefault",
    "PageDefaults",
    "StatDefault",
    "TestimonialDefault",
    "DEFAULT_FAMILY",
    "DEFAULT_INDUSTRY",
    "FITNESS",
    "FOOD_SERVICE",
    "GROOMING",
    "HEALTHCARE",
    "HOME_SERVICES",
    "PROFESSIONAL_SERVICES",
    "TECHNOLOGY",
    "IndustryResearch",
    "LayoutVariant",
    "ResearchData",
    "load_research",
]
