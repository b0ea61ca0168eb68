"""
Page specification composition.

A PageSpecification bundles the resolved theme and content with the section
structure, hero component, feature flags and research data for one page, so
that emitters never consult the registry or raw AI content themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, field_serializer, field_validator

from ..config.models import BusinessProfile, GenerationOptions, PageKind, parse_page_kind
from ..registry import DEFAULT_INDUSTRY, FOOD_SERVICE, Archetype, Registry, default_registry
from ..registry.features import BOOKING, INQUIRIES, LISTINGS
from ..registry.research import freeze_data, thaw_data
from .classifier import recommend_layout_variant, select_archetype
from .content import Catalog, ResolvedContent, resolve_content
from .theme import ResolvedTheme, resolve_theme

logger = logging.getLogger(__name__)


class SectionSpec(BaseModel):
    type: str
    layout: str = "default"
    title: str = ""
    component: str = ""
    config: Mapping[str, Any] = Field(default_factory=lambda: MappingProxyType({}))

    model_config = {"frozen": True}

    @field_validator("config", mode="after")
    @classmethod
    def _freeze_config(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return freeze_data(value)

    @field_serializer("config")
    def _serialize_config(self, value: Mapping[str, Any]) -> dict:
        return thaw_data(value)

    def __hash__(self) -> int:
        return hash((self.type, self.layout, self.title))


class FeatureModule(BaseModel):
    name: str
    type: str
    label: str

    model_config = {"frozen": True}


class FeatureFlags(BaseModel):
    show_loyalty_banner: bool = True
    show_order_button: bool = False
    show_booking_button: bool = False
    show_listings_search: bool = False
    show_inquiry_form: bool = False
    modules: Tuple[FeatureModule, ...] = ()

    model_config = {"frozen": True}


class PageSpecification(BaseModel):
    """Everything an emitter needs to render one page."""

    archetype_id: str
    archetype_name: str
    family: str
    industry: str
    page_kind: PageKind
    theme: ResolvedTheme
    content: ResolvedContent
    hero_type: str
    hero_component: str
    sections: Tuple[SectionSpec, ...]
    features: FeatureFlags
    winning_elements: Tuple[str, ...]
    menu_style: str
    variant: Optional[str] = None
    images: Tuple[str, ...] = ()
    color_guidance: Mapping[str, Tuple[str, ...]] = Field(default_factory=lambda: MappingProxyType({}))

    model_config = {"frozen": True}

    @field_validator("color_guidance", mode="after")
    @classmethod
    def _freeze_guidance(cls, value: Mapping[str, Tuple[str, ...]]) -> Mapping[str, Tuple[str, ...]]:
        return freeze_data(value)

    @field_serializer("color_guidance")
    def _serialize_guidance(self, value: Mapping[str, Tuple[str, ...]]) -> dict:
        return thaw_data(value)


class SiteSpecification(BaseModel):
    """All pages generated for one business."""

    business: BusinessProfile
    archetype_id: str
    industry: str
    family: str
    variant: Optional[str] = None
    pages: Tuple[PageSpecification, ...]

    model_config = {"frozen": True}

    def page(self, page_kind: PageKind | str) -> PageSpecification:
        kind = parse_page_kind(page_kind)
        for spec in self.pages:
            if spec.page_kind is kind:
                return spec
        raise KeyError(kind.value)


def feature_flags(industry: str, registry: Registry) -> FeatureFlags:
    """Derive feature flags from the industry's feature modules."""
    triples = registry.module_triples(industry)
    module_types = {module_type for _, module_type, _ in triples}
    names = {name for name, _, _ in triples}
    return FeatureFlags(
        show_loyalty_banner=True,
        show_order_button="orders" in names,
        show_booking_button=BOOKING in module_types,
        show_listings_search=LISTINGS in module_types,
        show_inquiry_form=INQUIRIES in module_types,
        modules=tuple(FeatureModule(name=name, type=kind, label=label) for name, kind, label in triples),
    )


def compose(
    archetype_id: str,
    theme: ResolvedTheme,
    content: ResolvedContent,
    page_kind: PageKind | str,
    *,
    industry: str = DEFAULT_INDUSTRY,
    variant: Optional[str] = None,
    registry: Optional[Registry] = None,
) -> PageSpecification:
    """
    Build the PageSpecification for one page.

    Raises:
        ArchetypeNotFoundError: If ``archetype_id`` is not registered.
        ConfigurationError: If ``page_kind`` or ``variant`` is invalid.
    """
    registry = registry or default_registry()
    kind = parse_page_kind(page_kind)
    archetype = registry.archetype(archetype_id)
    industry_key = registry.lookup_industry(industry)

    layout = registry.layout_variant(industry_key, variant) if variant else None
    sections = tuple(
        SectionSpec(type=section.type, layout=section.layout, title=section.title)
        for section in registry.page_sections(archetype.id, kind)
    )
    hero_type = archetype.hero_type
    if layout is not None and kind is PageKind.HOME:
        hero_type = layout.hero_type
        sections = (SectionSpec(type="hero", layout=layout.hero_type, config=layout.hero_config),) + tuple(
            SectionSpec(
                type=section.type,
                component=registry.section_component(section.type),
                config=section.config,
            )
            for section in layout.sections
        )

    return PageSpecification(
        archetype_id=archetype.id,
        archetype_name=archetype.name,
        family=archetype.family,
        industry=industry_key,
        page_kind=kind,
        theme=theme,
        content=content,
        hero_type=hero_type,
        hero_component=registry.hero_component(hero_type),
        sections=sections,
        features=feature_flags(industry_key, registry),
        winning_elements=registry.winning_elements(industry_key),
        menu_style=registry.menu_style(industry_key, layout.key if layout else None),
        variant=layout.key if layout else None,
        images=registry.get_image_set(industry_key),
        color_guidance=registry.color_guidance(industry_key),
    )

@dataclass(frozen=True)
class SitePlan:
    """Request-wide decisions shared by every page of one site."""

    profile: BusinessProfile
    options: GenerationOptions
    archetype: Archetype
    industry: str
    variant: Optional[str]
    pages: Tuple[PageKind, ...]
    theme: ResolvedTheme
    catalog: Catalog
    hero_image: str


def plan_site(
    profile: BusinessProfile,
    options: Optional[GenerationOptions] = None,
    pages: Optional[Sequence[PageKind | str]] = None,
    registry: Optional[Registry] = None,
) -> SitePlan:
    """
    Classify the business and resolve the site-wide theme and page list.

    Page kinds default to ``options.pages``, then the family's default set.

    Raises:
        ConfigurationError: For invalid options (unknown archetype, page kind
            or layout variant).
    """
    registry = registry or default_registry()
    options = options or GenerationOptions()
    archetype = registry.archetype(select_archetype(profile, options, registry))
    industry = registry.lookup_industry(profile.industry)
    variant = options.variant or (recommend_layout_variant(options.goal) if options.goal else None)
    if variant and registry.research(industry) is None:
        logger.debug("No layout research for '%s'; ignoring variant %s", industry, variant)
        variant = None

    requested = pages or options.pages or registry.default_pages(archetype.family)
    kinds = tuple(dict.fromkeys(parse_page_kind(kind) for kind in requested))
    return SitePlan(
        profile=profile,
        options=options,
        archetype=archetype,
        industry=industry,
        variant=variant,
        pages=kinds,
        theme=resolve_theme(archetype, options.theme, options.ai_content),
        catalog="menu" if archetype.family == FOOD_SERVICE else "services",
        hero_image=registry.get_hero_image(industry),
    )


def compose_page(plan: SitePlan, page_kind: PageKind | str, registry: Optional[Registry] = None) -> PageSpecification:
    """Resolve content for one page of a planned site and compose its specification."""
    registry = registry or default_registry()
    content = resolve_content(
        page_kind,
        plan.profile,
        plan.options.ai_content,
        registry.page_defaults(plan.archetype.id, page_kind),
        hero_image=plan.hero_image,
        catalog=plan.catalog,
    )
    return compose(
        plan.archetype.id,
        plan.theme,
        content,
        page_kind,
        industry=plan.industry,
        variant=plan.variant,
        registry=registry,
    )


def build_site(
    profile: BusinessProfile,
    options: Optional[GenerationOptions] = None,
    pages: Optional[Sequence[PageKind | str]] = None,
    registry: Optional[Registry] = None,
) -> SiteSpecification:
    """Run classification, resolution and composition for every requested page."""
    registry = registry or default_registry()
    plan = plan_site(profile, options, pages, registry)
    return SiteSpecification(
        business=profile,
        archetype_id=plan.archetype.id,
        industry=plan.industry,
        family=plan.archetype.family,
        variant=plan.variant,
        pages=tuple(compose_page(plan, kind, registry) for kind in plan.pages),
    )
