import json

import pytest
from pydantic import ValidationError

from sitesmith.config import BusinessProfile, ConfigurationError, GenerationOptions, PageKind
from sitesmith.pipeline import build_site, compose, plan_site, resolve_content, resolve_theme
from sitesmith.pipeline.composer import feature_flags
from sitesmith.registry import default_registry
from sitesmith.registry.archetypes import GENERIC_PAGE_SECTIONS


@pytest.fixture()
def bakery() -> BusinessProfile:
    return BusinessProfile(name="Corner Bakery", industry="bakery", phone="555-0101")


def test_build_site_is_idempotent(bakery) -> None:
    options = GenerationOptions(ai_content={"hero": {"headline": "Warm Bread"}})
    assert build_site(bakery, options) == build_site(bakery, options)


def test_default_pages_follow_family(bakery) -> None:
    site = build_site(bakery)
    assert [page.page_kind for page in site.pages] == [
        PageKind.HOME,
        PageKind.MENU,
        PageKind.ABOUT,
        PageKind.CONTACT,
        PageKind.GALLERY,
    ]
    law = build_site(BusinessProfile(name="Smith & Jones", industry="attorney"))
    assert [page.page_kind.value for page in law.pages] == ["home", "services", "about", "contact"]


def test_requested_pages_are_deduplicated(bakery) -> None:
    site = build_site(bakery, pages=["home", "HOME", PageKind.CONTACT])
    assert [page.page_kind for page in site.pages] == [PageKind.HOME, PageKind.CONTACT]
    with pytest.raises(KeyError):
        site.page("menu")


def test_page_specification_is_immutable(bakery) -> None:
    home = build_site(bakery, pages=["home"]).page("home")
    with pytest.raises(ValidationError):
        home.hero_type = "video"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        home.content.headline = "changed"  # type: ignore[misc]


def test_section_config_cannot_be_mutated() -> None:
    pizzeria = BusinessProfile(name="Bella Napoli", industry="pizza")
    home = build_site(pizzeria, GenerationOptions(variant="A"), pages=["home"]).page("home")
    with pytest.raises(TypeError):
        home.sections[0].config["autoplay"] = False  # type: ignore[index]
    assert home.sections[0].config["autoplay"] is True

    payload = home.model_dump(mode="json")
    assert payload["sections"][0]["config"]["autoplay"] is True
    assert json.loads(home.model_dump_json())["sections"][0]["config"] == payload["sections"][0]["config"]


def test_home_sections_come_from_archetype(bakery) -> None:
    home = build_site(bakery, pages=["home"]).page("home")
    assert home.archetype_id == "local"
    assert home.hero_type == "image-overlay"
    assert home.hero_component == "ImageOverlayHero"
    assert home.sections[0].type == "hero"
    assert home.sections[2].title == "Today's Specials"
    assert home.images
    assert home.content.hero_image == home.images[0]


def test_page_kind_without_archetype_sections_uses_generic_structure() -> None:
    registry = default_registry()
    archetype = registry.archetype("minimal-clean")
    theme = resolve_theme(archetype)
    content = resolve_content("menu", BusinessProfile())
    spec = compose("minimal-clean", theme, content, "menu", industry="saas", registry=registry)
    assert tuple(section.type for section in spec.sections) == tuple(section.type for section in GENERIC_PAGE_SECTIONS)


def test_compose_rejects_unknown_archetype_and_page_kind() -> None:
    registry = default_registry()
    theme = resolve_theme(registry.archetype("local"))
    content = resolve_content("home", BusinessProfile())
    with pytest.raises(ConfigurationError):
        compose("brutalist", theme, content, "home")
    with pytest.raises(ConfigurationError):
        compose("local", theme, content, "blog")


def test_layout_variant_replaces_home_sections() -> None:
    pizzeria = BusinessProfile(name="Bella Napoli", industry="pizza")
    site = build_site(pizzeria, GenerationOptions(variant="a"), pages=["home", "contact"])
    home = site.page("home")
    assert site.variant == "A"
    assert home.variant == "A"
    assert home.hero_type == "video"
    assert home.hero_component == "VideoHero"
    assert home.sections[0].type == "hero"
    assert home.sections[0].config["autoplay"] is True
    assert home.sections[1].type == "menu-scroll-reveal"
    assert home.sections[1].component == "MenuScrollReveal"
    assert "online-ordering" in home.winning_elements
    # variants only restructure the home page
    assert site.page("contact").sections[0].type == "contact-info"


def test_goal_recommends_a_variant() -> None:
    plan = plan_site(BusinessProfile(industry="pizza"), GenerationOptions(goal="trust"))
    assert plan.variant == "B"


def test_variant_is_dropped_for_industries_without_research() -> None:
    plan = plan_site(BusinessProfile(industry="roofing"), GenerationOptions(variant="B"))
    assert plan.variant is None


def test_menu_style_follows_variant() -> None:
    steakhouse = BusinessProfile(name="Prime Cut", industry="steakhouse")
    assert build_site(steakhouse, pages=["menu"]).page("menu").menu_style == "elegant-list"
    with_variant = build_site(steakhouse, GenerationOptions(variant="C"), pages=["menu"])
    assert with_variant.page("menu").menu_style == "compact-table"


def test_feature_flags_from_modules() -> None:
    registry = default_registry()
    pizza = feature_flags("pizza-restaurant", registry)
    assert pizza.show_order_button
    assert pizza.show_inquiry_form
    assert not pizza.show_booking_button
    assert [module.label for module in pizza.modules] == ["Menu", "Orders"]

    realtor = feature_flags("real-estate", registry)
    assert realtor.show_listings_search
    assert not realtor.show_order_button

    unknown = feature_flags("default", registry)
    assert unknown.show_loyalty_banner
    assert [module.name for module in unknown.modules] == ["services"]


def test_research_colour_guidance_reaches_the_spec() -> None:
    pizzeria = BusinessProfile(name="Bella Napoli", industry="pizza")
    home = build_site(pizzeria, pages=["home"]).page("home")
    assert home.color_guidance["warm"] == ("#DC2626", "#F59E0B", "#78350F")
    with pytest.raises(TypeError):
        home.color_guidance["warm"] = ()  # type: ignore[index]
    assert home.model_dump(mode="json")["color_guidance"]["accent"] == ["#FCD34D", "#FBBF24"]

    roofer = build_site(BusinessProfile(name="Top Roofs", industry="roofing"), pages=["home"]).page("home")
    assert dict(roofer.color_guidance) == {}


def test_spec_serialises_to_json(bakery) -> None:
    home = build_site(bakery, GenerationOptions(variant="B"), pages=["home"]).page("home")
    payload = home.model_dump(mode="json")
    assert payload["page_kind"] == "home"
    assert payload["theme"]["palette"]["primary"]
    assert payload["content"]["contact"]["phone"] == "555-0101"
