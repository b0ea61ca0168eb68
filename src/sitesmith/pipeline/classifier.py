"""
Keyword-rule archetype classification.

Each industry family owns an ordered tuple of rules and a default archetype.
Rules are evaluated in order and the first rule with any keyword contained in
the business text wins, so overlapping keywords always resolve the same way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..config.models import BusinessProfile, GenerationOptions
from ..registry import (
    FITNESS,
    FOOD_SERVICE,
    GROOMING,
    HEALTHCARE,
    HOME_SERVICES,
    PROFESSIONAL_SERVICES,
    TECHNOLOGY,
    Registry,
    default_registry,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeywordRule:
    keywords: Tuple[str, ...]
    archetype_id: str

    def match(self, haystack: str) -> Optional[str]:
        """Return the first keyword found in ``haystack``, if any."""
        for keyword in self.keywords:
            if keyword in haystack:
                return keyword
        return None


@dataclass(frozen=True)
class FamilyRules:
    rules: Tuple[KeywordRule, ...]
    default: str
    include_tagline: bool = False


FAMILY_RULES: Mapping[str, FamilyRules] = MappingProxyType({
    FOOD_SERVICE: FamilyRules(
        rules=(
            KeywordRule(("order online", "shipping", "nationwide", "delivery", "gift", "shop now", "cart",
                         "checkout"), "ecommerce"),
            KeywordRule(("artisan", "boutique", "patisserie", "specialty", "handcrafted", "premium", "luxury",
                         "elegant", "fine", "gourmet", "exclusive"), "luxury"),
        ),
        default="local",
    ),
    HOME_SERVICES: FamilyRules(
        rules=(
            KeywordRule(("emergency", "24/7", "24-hour", "plumb", "hvac", "locksmith", "water damage", "flood",
                         "drain"), "emergency"),
            KeywordRule(("commercial", "contractor", "construction", "roofing", "industrial", "llc", "inc",
                         "corp"), "professional"),
        ),
        default="neighborhood",
    ),
    HEALTHCARE: FamilyRules(
        rules=(
            KeywordRule(("modern", "advanced", "cosmetic", "laser", "technology"), "modern-clinical"),
            KeywordRule(("specialist", "surgical", "center", "institute", "associates"), "professional-trust"),
        ),
        default="warm-caring",
    ),
    TECHNOLOGY: FamilyRules(
        rules=(
            KeywordRule(("enterprise", "b2b", "consulting", "agency", "solutions", "services"),
                        "enterprise-corporate"),
            KeywordRule(("startup", "disrupt", "innovative", "bold", "new"), "bold-dynamic"),
        ),
        default="minimal-clean",
    ),
    PROFESSIONAL_SERVICES: FamilyRules(
        rules=(
            KeywordRule(("law", "attorney", "legal", "insurance", "wealth", "established"), "trust-authority"),
            KeywordRule(("consulting", "enterprise", "corporate", "strategy", "solutions"), "corporate-modern"),
        ),
        default="boutique-personal",
    ),
    FITNESS: FamilyRules(
        rules=(
            KeywordRule(("yoga", "pilates", "meditation", "zen", "wellness", "mindful"), "zen-peaceful"),
            KeywordRule(("crossfit", "bootcamp", "boxing", "intense", "power", "strength"), "energetic-bold"),
        ),
        default="community-social",
    ),
    GROOMING: FamilyRules(
        rules=(
            KeywordRule(("classic", "traditional", "vintage", "heritage", "old school", "1920", "gentleman",
                         "barber"), "vintage-classic"),
            KeywordRule(("modern", "sleek", "luxury", "upscale", "premium", "spa", "boutique", "studio"),
                        "modern-sleek"),
        ),
        default="neighborhood-friendly",
        include_tagline=True,
    ),
})


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one business, including the rule that fired."""

    industry: str
    family: str
    archetype_id: str
    matched_keyword: Optional[str] = None

    @property
    def used_default(self) -> bool:
        return self.matched_keyword is None


def _haystack(profile: BusinessProfile, include_tagline: bool) -> str:
    parts = [profile.name or "", profile.description or "", profile.industry or ""]
    if include_tagline:
        parts.append(profile.tagline or "")
    return " ".join(parts).lower()


def classify_with_rule(profile: BusinessProfile, registry: Optional[Registry] = None) -> Classification:
    """Classify a business and report which keyword (if any) decided it."""
    registry = registry or default_registry()
    industry = registry.lookup_industry(profile.industry)
    family = registry.family_for(industry)
    family_rules = FAMILY_RULES[family]
    haystack = _haystack(profile, family_rules.include_tagline)

    for rule in family_rules.rules:
        keyword = rule.match(haystack)
        if keyword is not None:
            return Classification(industry, family, rule.archetype_id, keyword)
    return Classification(industry, family, family_rules.default)


def classify(profile: BusinessProfile, registry: Optional[Registry] = None) -> str:
    """Return the archetype id for a business. Deterministic; never raises on empty input."""
    return classify_with_rule(profile, registry).archetype_id


def select_archetype(
    profile: BusinessProfile,
    options: Optional[GenerationOptions] = None,
    registry: Optional[Registry] = None,
) -> str:
    """
    Pick the archetype for a request, honouring an explicit override.

    Raises:
        ArchetypeNotFoundError: If the override names an unknown archetype.
    """
    registry = registry or default_registry()
    override = options.archetype_override if options else None
    if override:
        archetype = registry.archetype(override.strip())
        logger.info("Using archetype override '%s'", archetype.id)
        return archetype.id

    result = classify_with_rule(profile, registry)
    if result.used_default:
        logger.info("Classified '%s' as %s (family default for %s)", profile.name, result.archetype_id, result.family)
    else:
        logger.info(
            "Classified '%s' as %s (matched '%s')", profile.name, result.archetype_id, result.matched_keyword
        )
    return result.archetype_id


GOAL_VARIANTS: Mapping[str, str] = MappingProxyType({
    "conversion": "A",
    "branding": "C",
    "trust": "B",
    "booking": "A",
    "portfolio": "B",
    "story": "C",
    "order": "A",
    "experience": "C",
})


def recommend_layout_variant(goal: Optional[str]) -> str:
    """Map a business goal to a research layout variant; unknown goals get A."""
    return GOAL_VARIANTS.get((goal or "").strip().lower(), "A")
