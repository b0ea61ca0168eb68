"""
Archetype reference data: one structural template set per industry family.

An archetype couples a default palette and typography with the ordered
sections each page kind is built from. Records are frozen dataclasses over
read-only mappings so the dataset can be shared freely between threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .industries import (
    FITNESS,
    FOOD_SERVICE,
    GROOMING,
    HEALTHCARE,
    HOME_SERVICES,
    PROFESSIONAL_SERVICES,
    TECHNOLOGY,
)

@dataclass(frozen=True)
class SectionDescriptor:
    """One section of a page: component type, layout hint and optional title."""

    type: str
    layout: str = "default"
    title: str = ""


@dataclass(frozen=True)
class ArchetypeTypography:
    heading_font: Optional[str] = None
    body_font: Optional[str] = None
    heading_weight: Optional[str] = None
    heading_style: Optional[str] = None
    letter_spacing: Optional[str] = None


@dataclass(frozen=True)
class ArchetypeStyle:
    """Visual defaults; any field left as None falls through to the theme fallbacks."""

    vibe: str
    colors: Mapping[str, str]
    heading_font: Optional[str] = None
    body_font: Optional[str] = None
    heading_weight: Optional[str] = None
    heading_style: Optional[str] = None
    letter_spacing: Optional[str] = None
    border_radius: Optional[str] = None
    section_padding: Optional[str] = None

    @property
    def typography(self) -> ArchetypeTypography:
        return ArchetypeTypography(
            heading_font=self.heading_font,
            body_font=self.body_font,
            heading_weight=self.heading_weight,
            heading_style=self.heading_style,
            letter_spacing=self.letter_spacing,
        )


@dataclass(frozen=True)
class Archetype:
    """A structural template applicable to one industry family."""

    id: str
    name: str
    description: str
    family: str
    best_for: Tuple[str, ...]
    style: ArchetypeStyle
    hero_type: str
    pages: Mapping[str, Tuple[SectionDescriptor, ...]]
    image_filters: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    default_image_filter: str = "none"

    def sections_for(self, page_kind: str) -> Optional[Tuple[SectionDescriptor, ...]]:
        return self.pages.get(page_kind)


def _sections(*specs: str) -> Tuple[SectionDescriptor, ...]:
    """Build descriptors from compact "type:layout:title" strings."""
    descriptors = []
    for spec in specs:
        parts = spec.split(":", 2)
        descriptors.append(SectionDescriptor(*parts))
    return tuple(descriptors)


def _pages(**pages: Tuple[SectionDescriptor, ...]) -> Mapping[str, Tuple[SectionDescriptor, ...]]:
    return MappingProxyType(dict(pages))


def _colors(**colors: str) -> Mapping[str, str]:
    return MappingProxyType(dict(colors))


# CSS filters keyed by AI imagery style.
GENERIC_IMAGE_FILTERS: Mapping[str, str] = MappingProxyType({
    "moody-dark": "brightness(0.92) contrast(1.1)",
    "bright-airy": "brightness(1.05) saturate(1.1)",
    "soft-muted": "saturate(0.85) brightness(1.02)",
    "high-contrast": "contrast(1.15) saturate(1.1)",
    "natural-light": "brightness(1.03) saturate(1.05)",
})

_LUXURY_IMAGE_FILTERS: Mapping[str, str] = MappingProxyType({
    "moody-dark": "grayscale(30%) brightness(0.9)",
    "bright-airy": "brightness(1.05) saturate(1.1)",
    "soft-muted": "grayscale(15%) saturate(0.9)",
    "high-contrast": "contrast(1.1) saturate(1.2)",
})

_LOCAL_IMAGE_FILTERS: Mapping[str, str] = MappingProxyType({
    "moody-dark": "brightness(0.95) saturate(1.1)",
    "bright-airy": "brightness(1.08) saturate(1.15)",
    "soft-muted": "saturate(0.9) brightness(1.02)",
    "high-contrast": "contrast(1.1) saturate(1.1)",
    "natural-light": "brightness(1.05)",
})

# Page structures shared by every archetype of a non-food family.
_SERVICE_PAGES = dict(
    services=_sections("page-header:compact:Our Services", "services-list:grid", "faq-accordion", "cta:banner"),
    about=_sections("page-header:compact", "story:split", "values-3col:grid-3", "team-grid:grid-3", "cta:banner"),
    contact=_sections("page-header:compact", "contact-info:two-column", "map:embed", "contact-form:stacked"),
    gallery=_sections("page-header:compact", "gallery:simple-grid"),
)

_FOOD_SHARED_PAGES = dict(
    services=_sections("page-header:compact:Catering & Events", "services-list:grid", "cta:banner"),
)


_FOOD_ARCHETYPES = (
    Archetype(
        id="ecommerce",
        name="E-Commerce Focus",
        description="Modern, conversion-focused, product-forward. Best for online ordering & shipping.",
        family=FOOD_SERVICE,
        best_for=("online ordering", "nationwide shipping", "gift-focused", "high-volume"),
        style=ArchetypeStyle(
            vibe="modern, conversion-focused, product-forward",
            colors=_colors(primary="#E91E63", secondary="#1a1a1a", accent="#D4AF37", background="#ffffff",
                           background_alt="#FFF8F5", text="#1a1a1a", text_muted="#666666"),
            heading_font="'DM Sans', 'Montserrat', sans-serif",
            body_font="'Inter', 'Open Sans', sans-serif",
            heading_weight="700",
            heading_style="uppercase",
            letter_spacing="0.02em",
            border_radius="8px",
        ),
        hero_type="split-animated",
        pages=_pages(
            home=_sections("hero:split", "trust-strip:scrolling-marquee", "featured-products:grid-4:Fan Favorites",
                           "promo:split", "categories:grid-3", "newsletter:centered"),
            menu=_sections("page-header:compact:Shop", "product-grid:filterable-grid"),
            about=_sections("hero:split", "story:split", "values-3col:grid-3", "team-grid:grid-3", "cta:banner"),
            contact=_sections("contact-info:two-column", "map:embed", "contact-form:stacked"),
            gallery=_sections("gallery:filterable-masonry"),
            **_FOOD_SHARED_PAGES,
        ),
        image_filters=GENERIC_IMAGE_FILTERS,
    ),
    Archetype(
        id="luxury",
        name="Brand Story / Luxury",
        description="Elegant, editorial, lots of whitespace. Best for upscale/premium positioning.",
        family=FOOD_SERVICE,
        best_for=("upscale", "boutique", "artisan", "patisserie", "specialty", "signature products"),
        style=ArchetypeStyle(
            vibe="elegant, editorial, sophisticated, premium",
            colors=_colors(primary="#1a365d", secondary="#D4AF37", accent="#8B4513", background="#FDFCFB",
                           background_alt="#F5F3F0", text="#2d2d2d", text_muted="#6b6b6b"),
            heading_font="'Playfair Display', 'Cormorant Garamond', serif",
            body_font="'Lato', 'Source Sans Pro', sans-serif",
            heading_weight="500",
            heading_style="none",
            letter_spacing="0.08em",
            border_radius="0px",
            section_padding="120px 24px",
        ),
        hero_type="gallery-fullbleed",
        pages=_pages(
            home=_sections("hero:fullscreen-carousel", "brand-statement:centered", "signature-products:grid-3",
                           "story-teaser:split", "craftsmanship:editorial:The Art of Fine Baking",
                           "visit-us:location-cards"),
            menu=_sections("page-header:editorial:Collections", "product-grid:elegant-grid"),
            about=_sections("hero:editorial", "story:long", "craftsmanship:editorial", "heritage-timeline:vertical",
                            "cta:elegant"),
            contact=_sections("contact-info:minimal", "map:embed", "contact-form:minimal"),
            gallery=_sections("gallery:editorial-slideshow"),
            **_FOOD_SHARED_PAGES,
        ),
        image_filters=_LUXURY_IMAGE_FILTERS,
        default_image_filter="grayscale(20%)",
    ),
    Archetype(
        id="local",
        name="Local / Community-Focused",
        description="Warm, welcoming, emphasizes location/hours. Best for neighborhood businesses.",
        family=FOOD_SERVICE,
        best_for=("neighborhood", "local", "family-owned", "walk-in focused", "community"),
        style=ArchetypeStyle(
            vibe="warm, welcoming, authentic",
            colors=_colors(primary="#8B4513", secondary="#D2691E", accent="#F4A460", background="#FFFAF5",
                           background_alt="#FFF8F0", text="#3E2723", text_muted="#6D4C41"),
            heading_font="'Lora', 'Nunito', serif",
            body_font="'Open Sans', 'Roboto', sans-serif",
            heading_weight="600",
            heading_style="none",
            letter_spacing="0",
            border_radius="12px",
        ),
        hero_type="image-overlay",
        pages=_pages(
            home=_sections("hero:fullwidth-image", "why-choose-us:grid-3", "specials:featured-row:Today's Specials",
                           "about-snippet:split", "location-hours:map-with-info", "reviews:carousel"),
            menu=_sections("page-header:compact:Our Menu", "menu-list:category-list"),
            about=_sections("hero:fullwidth-image", "story:split", "values-3col:grid-3", "owner-feature:split",
                            "community:grid-3", "cta:banner"),
            contact=_sections("contact-info:two-column", "map:embed", "contact-form:stacked"),
            gallery=_sections("gallery:simple-grid"),
            **_FOOD_SHARED_PAGES,
        ),
        image_filters=_LOCAL_IMAGE_FILTERS,
    ),
)


def _service_archetype(
    archetype_id: str,
    name: str,
    description: str,
    family: str,
    best_for: Tuple[str, ...],
    style: ArchetypeStyle,
    hero_type: str,
    home: Tuple[SectionDescriptor, ...],
) -> Archetype:
    return Archetype(
        id=archetype_id,
        name=name,
        description=description,
        family=family,
        best_for=best_for,
        style=style,
        hero_type=hero_type,
        pages=_pages(home=home, **_SERVICE_PAGES),
        image_filters=GENERIC_IMAGE_FILTERS,
    )


_SERVICE_ARCHETYPES = (
    # home services
    _service_archetype(
        "emergency", "Emergency Response",
        "Urgent, action-focused with prominent contact. Best for 24/7 emergency services.",
        HOME_SERVICES, ("plumber", "hvac", "locksmith", "water damage", "emergency repair"),
        ArchetypeStyle(
            vibe="urgent, trustworthy, action-focused",
            colors=_colors(primary="#DC2626", secondary="#1E40AF", accent="#F59E0B", background="#ffffff",
                           background_alt="#F8FAFC", text="#1e293b", text_muted="#64748b"),
            heading_font="'Inter', 'Roboto', sans-serif", body_font="'Inter', system-ui, sans-serif",
            heading_weight="800", heading_style="uppercase", letter_spacing="0.01em", border_radius="8px",
        ),
        "centered-cta",
        _sections("emergency-banner:sticky", "hero:split", "services-grid:grid-3:Our Services",
                  "trust-badges:grid-4", "reviews:grid", "cta:call-now"),
    ),
    _service_archetype(
        "professional", "Professional Trust",
        "Clean, corporate with credentials focus. Best for commercial and established businesses.",
        HOME_SERVICES, ("contractor", "construction", "commercial", "roofing", "electrical"),
        ArchetypeStyle(
            vibe="professional, trustworthy, established",
            colors=_colors(primary="#1E40AF", secondary="#047857", accent="#D97706", background="#ffffff",
                           background_alt="#F1F5F9", text="#1e293b", text_muted="#64748b"),
            heading_font="'Inter', 'Roboto', sans-serif", body_font="'Inter', system-ui, sans-serif",
            heading_weight="700", heading_style="none", letter_spacing="0", border_radius="12px",
        ),
        "image-overlay",
        _sections("hero:split", "credentials:grid-4", "services-grid:grid-3:Our Services", "stats-bar:row",
                  "project-gallery:grid-3", "cta:banner"),
    ),
    _service_archetype(
        "neighborhood", "Neighborhood Friendly",
        "Warm, community-focused, family-owned feel. Best for residential local services.",
        HOME_SERVICES, ("landscaping", "cleaning", "handyman", "painting", "pool"),
        ArchetypeStyle(
            vibe="friendly, local, trustworthy",
            colors=_colors(primary="#059669", secondary="#0284C7", accent="#EA580C", background="#ffffff",
                           background_alt="#F0FDF4", text="#1e293b", text_muted="#64748b"),
            heading_font="'DM Sans', 'Inter', sans-serif", body_font="'Inter', system-ui, sans-serif",
            heading_weight="700", heading_style="none", letter_spacing="0", border_radius="16px",
        ),
        "image-overlay",
        _sections("hero:fullwidth-image", "values:grid-4", "services-grid:grid-3:What We Do",
                  "reviews:carousel", "service-area:map", "cta:banner"),
    ),
    # healthcare
    _service_archetype(
        "modern-clinical", "Modern Clinical",
        "Clean, professional, technology-forward. Great for modern practices.",
        HEALTHCARE, ("dental", "medical clinic", "specialist", "surgery center"),
        ArchetypeStyle(vibe="clean, precise, modern",
                       colors=_colors(primary="#0891b2", secondary="#06b6d4", accent="#22d3ee"),
                       heading_font="'Inter', sans-serif", heading_weight="600", border_radius="12px"),
        "split-animated",
        _sections("hero:split", "services-grid:grid-4:Our Services", "why-choose-us:grid-2:Why Choose Us",
                  "cta:banner:New Patients Welcome!"),
    ),
    _service_archetype(
        "warm-caring", "Warm & Caring",
        "Friendly, approachable, patient-focused. Ideal for family practices.",
        HEALTHCARE, ("family practice", "pediatrics", "wellness center", "holistic"),
        ArchetypeStyle(vibe="friendly, reassuring, patient-first",
                       colors=_colors(primary="#059669", secondary="#34d399", accent="#fbbf24"),
                       heading_font="'Nunito', sans-serif", heading_weight="600", border_radius="16px"),
        "image-overlay",
        _sections("hero:fullwidth-image", "services-grid:grid-4:How We Can Help", "team-grid:grid-3:Meet Our Team",
                  "reviews:carousel", "cta:banner:New Patients Welcome!"),
    ),
    _service_archetype(
        "professional-trust", "Professional Trust",
        "Established, credible, expertise-focused. Perfect for specialists.",
        HEALTHCARE, ("specialist", "surgical", "orthopedic", "cardiology"),
        ArchetypeStyle(vibe="established, credible, expert",
                       colors=_colors(primary="#1e40af", secondary="#3b82f6", accent="#60a5fa"),
                       heading_font="'Playfair Display', serif", heading_weight="700", border_radius="8px"),
        "image-overlay",
        _sections("hero:split", "credentials:grid-4", "services-grid:grid-4:Specialties", "stats-bar:row",
                  "cta:banner:Schedule a Consultation"),
    ),
    # technology
    _service_archetype(
        "minimal-clean", "Minimal & Clean",
        "Simple, elegant, modern. Perfect for SaaS products.",
        TECHNOLOGY, ("saas", "software", "app", "platform", "tool"),
        ArchetypeStyle(vibe="simple, elegant, modern",
                       colors=_colors(primary="#0f172a", secondary="#3b82f6", accent="#06b6d4"),
                       heading_font="'Inter', sans-serif", heading_weight="600", border_radius="12px"),
        "minimal-text",
        _sections("hero:centered", "logo-strip:row", "features-grid:grid-3:Everything you need",
                  "stats-bar:row", "pricing-tiers:grid-3", "cta:banner"),
    ),
    _service_archetype(
        "bold-dynamic", "Bold & Dynamic",
        "Vibrant, energetic, disruptive. Great for startups.",
        TECHNOLOGY, ("startup", "disruptor", "innovative", "new"),
        ArchetypeStyle(vibe="vibrant, energetic, disruptive",
                       colors=_colors(primary="#7c3aed", secondary="#ec4899", accent="#f97316"),
                       heading_font="'Space Grotesk', sans-serif", heading_weight="700", border_radius="16px"),
        "split-animated",
        _sections("hero:split", "features-grid:bento:Built different", "stats-bar:row",
                  "testimonials:carousel", "cta:gradient"),
    ),
    _service_archetype(
        "enterprise-corporate", "Enterprise Corporate",
        "Professional, trustworthy, established. Ideal for B2B.",
        TECHNOLOGY, ("enterprise", "b2b", "consulting", "agency", "corporate"),
        ArchetypeStyle(vibe="professional, trustworthy, established",
                       colors=_colors(primary="#1e40af", secondary="#3b82f6", accent="#10b981"),
                       heading_font="'Inter', sans-serif", heading_weight="600", border_radius="8px"),
        "centered-cta",
        _sections("hero:split", "logo-strip:row", "features-grid:grid-3:Platform capabilities",
                  "stats-bar:row", "case-studies:grid-2", "cta:banner:Talk to sales"),
    ),
    # professional services
    _service_archetype(
        "trust-authority", "Trust & Authority",
        "Established, credible, trustworthy. Perfect for law firms and financial services.",
        PROFESSIONAL_SERVICES, ("law firm", "attorney", "financial advisor", "insurance", "wealth management"),
        ArchetypeStyle(vibe="established, credible, trustworthy",
                       colors=_colors(primary="#1e3a5f", secondary="#c9a227", accent="#2563eb"),
                       heading_font="'Playfair Display', serif", heading_weight="700", border_radius="4px"),
        "image-overlay",
        _sections("hero:fullwidth-image", "practice-areas:grid-4:Practice Areas", "stats-bar:row",
                  "testimonials:carousel", "cta:banner:Schedule a Consultation"),
    ),
    _service_archetype(
        "boutique-personal", "Boutique & Personal",
        "Personal, approachable, relationship-focused. Great for small practices.",
        PROFESSIONAL_SERVICES, ("small firm", "solo practice", "personal service", "boutique consulting"),
        ArchetypeStyle(vibe="personal, approachable, relationship-focused",
                       colors=_colors(primary="#059669", secondary="#10b981", accent="#f59e0b"),
                       heading_font="'Inter', sans-serif", heading_weight="600", border_radius="12px"),
        "story-split",
        _sections("hero:split", "about-snippet:split", "services-grid:grid-3:How I Can Help",
                  "testimonials:carousel", "cta:banner"),
    ),
    _service_archetype(
        "corporate-modern", "Corporate Modern",
        "Sleek, professional, enterprise-grade. Ideal for consulting and corporate services.",
        PROFESSIONAL_SERVICES, ("consulting", "enterprise", "corporate", "B2B services"),
        ArchetypeStyle(vibe="sleek, professional, enterprise-grade",
                       colors=_colors(primary="#0f172a", secondary="#3b82f6", accent="#8b5cf6"),
                       heading_font="'Inter', sans-serif", heading_weight="600", border_radius="8px"),
        "minimal-text",
        _sections("hero:centered", "services-grid:grid-3:What We Do", "stats-bar:row", "case-studies:grid-2",
                  "cta:banner"),
    ),
    # fitness
    _service_archetype(
        "energetic-bold", "Energetic & Bold",
        "High energy, motivating, intense. Perfect for gyms and fitness centers.",
        FITNESS, ("gym", "crossfit", "bootcamp", "fitness center", "boxing"),
        ArchetypeStyle(vibe="high energy, motivating, intense",
                       colors=_colors(primary="#dc2626", secondary="#f97316", accent="#fbbf24"),
                       heading_font="'Oswald', sans-serif", heading_weight="700", heading_style="uppercase",
                       border_radius="8px"),
        "video",
        _sections("hero:fullscreen", "programs:grid-4:Programs", "stats-bar:row", "membership-comparison:grid-3",
                  "cta:banner:Start Your Free Trial"),
    ),
    _service_archetype(
        "zen-peaceful", "Zen & Peaceful",
        "Calm, serene, mindful. Ideal for yoga and meditation studios.",
        FITNESS, ("yoga", "pilates", "meditation", "wellness", "spa"),
        ArchetypeStyle(vibe="calm, serene, mindful",
                       colors=_colors(primary="#059669", secondary="#10b981", accent="#d4a574"),
                       heading_font="'Cormorant Garamond', serif", heading_weight="500", border_radius="24px"),
        "minimal-text",
        _sections("hero:centered", "class-types:grid-4:Our Classes", "philosophy:split", "class-schedule:table",
                  "testimonials:carousel", "cta:soft"),
    ),
    _service_archetype(
        "community-social", "Community & Social",
        "Friendly, inclusive, community-focused. Great for group fitness.",
        FITNESS, ("community gym", "group fitness", "dance studio", "martial arts"),
        ArchetypeStyle(vibe="friendly, inclusive, community-focused",
                       colors=_colors(primary="#7c3aed", secondary="#a78bfa", accent="#f472b6"),
                       heading_font="'Poppins', sans-serif", heading_weight="600", border_radius="16px"),
        "image-overlay",
        _sections("hero:fullwidth-image", "class-schedule:grid-4:This Week", "community:grid-3",
                  "testimonials:carousel", "cta:banner:Join the Community"),
    ),
    # grooming
    _service_archetype(
        "vintage-classic", "Vintage Classic",
        "Traditional, masculine, heritage feel. Perfect for classic barbershops.",
        GROOMING, ("barbershop", "traditional salon", "mens grooming"),
        ArchetypeStyle(vibe="traditional, heritage, masculine",
                       colors=_colors(primary="#1A1A2E", secondary="#C9A227", accent="#E43F5A"),
                       heading_font="'Bebas Neue', sans-serif", heading_weight="700", heading_style="uppercase",
                       border_radius="4px"),
        "dark-luxury",
        _sections("hero:fullscreen", "services-pricing:list:Services", "about-snippet:split",
                  "gallery:grid-3", "cta:banner:Book Your Chair"),
    ),
    _service_archetype(
        "modern-sleek", "Modern Sleek",
        "Clean, contemporary, minimalist. Great for upscale salons.",
        GROOMING, ("modern salon", "spa", "beauty bar", "upscale grooming"),
        ArchetypeStyle(vibe="clean, contemporary, minimalist",
                       colors=_colors(primary="#18181B", secondary="#A855F7", accent="#F472B6"),
                       heading_font="'Inter', sans-serif", heading_weight="600", heading_style="none",
                       border_radius="12px"),
        "minimal-text",
        _sections("hero:split", "services-pricing:grid-2:Services", "team-grid:grid-3:Our Stylists",
                  "gallery:masonry", "cta:banner:Book an Appointment"),
    ),
    _service_archetype(
        "neighborhood-friendly", "Neighborhood Friendly",
        "Warm, welcoming, community-focused. Ideal for family salons.",
        GROOMING, ("family salon", "neighborhood barbershop", "community beauty"),
        ArchetypeStyle(vibe="warm, welcoming, community-focused",
                       colors=_colors(primary="#059669", secondary="#34D399", accent="#FCD34D"),
                       heading_font="'Poppins', sans-serif", heading_weight="600", heading_style="none",
                       border_radius="16px"),
        "image-overlay",
        _sections("hero:fullwidth-image", "services-pricing:list:Services & Prices", "reviews:carousel",
                  "location-hours:map-with-info", "cta:banner:Walk-ins Welcome"),
    ),
)


def build_archetypes() -> Mapping[str, Archetype]:
    """Index every archetype by id, in declaration order."""
    index: Dict[str, Archetype] = {}
    for archetype in _FOOD_ARCHETYPES + _SERVICE_ARCHETYPES:
        if archetype.id in index:
            raise ValueError(f"Duplicate archetype id: {archetype.id}")
        index[archetype.id] = archetype
    return MappingProxyType(index)


# Page structure used when an archetype declares nothing for a page kind.
GENERIC_PAGE_SECTIONS: Tuple[SectionDescriptor, ...] = _sections(
    "hero-centered", "services-grid", "testimonials-carousel", "cta-simple",
)
