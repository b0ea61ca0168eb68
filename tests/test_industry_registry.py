import json
from types import MappingProxyType

import pytest

from sitesmith.config import ArchetypeNotFoundError, ConfigurationError
from sitesmith.registry import (
    Archetype,
    ArchetypeStyle,
    DEFAULT_INDUSTRY,
    FOOD_SERVICE,
    PROFESSIONAL_SERVICES,
    build_registry,
    default_registry,
    get_hero_image,
    get_image_set,
    load_research,
    lookup_industry,
)
from sitesmith.registry.research import DEFAULT_MENU_STYLE


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Cafe", "coffee-cafe"),
        ("coffee shop", "coffee-cafe"),
        ("Coffee_Shop", "coffee-cafe"),
        ("  PIZZA!! ", "pizza-restaurant"),
        ("bakery", "bakery"),
        ("Dental Clinic", "dental"),
        ("lawyer", "law-firm"),
        ("Real Estate", "real-estate"),
        ("hair salon", "salon-spa"),
        ("software", "saas"),
    ],
)
def test_lookup_industry_resolves_aliases_and_variants(raw: str, expected: str) -> None:
    assert lookup_industry(raw) == expected


@pytest.mark.parametrize("raw", ["", None, "   ", "!!!", "underwater basket weaving"])
def test_lookup_industry_falls_back_to_default(raw) -> None:
    assert lookup_industry(raw) == DEFAULT_INDUSTRY


def test_lookup_industry_always_returns_registry_key() -> None:
    registry = default_registry()
    for raw in ["Steak House", "yoga studio", "HVAC repair", "x", "Auto Body", "", "Gym & Spa"]:
        assert registry.lookup_industry(raw) in registry.industries


def test_family_for_known_and_unknown_industries() -> None:
    registry = default_registry()
    assert registry.family_for("bakery") == FOOD_SERVICE
    assert registry.family_for("something unheard of") == PROFESSIONAL_SERVICES


def test_get_image_set_category_fallbacks() -> None:
    interior = get_image_set("bakery", "interior")
    primary = get_image_set("bakery")
    assert interior and primary
    assert interior != primary
    assert get_image_set("bakery", "no-such-category") == primary
    assert get_image_set("") == get_image_set("default")
    assert get_image_set("mystery trade") == get_image_set("default")


def test_get_hero_image_respects_index_bounds() -> None:
    images = get_image_set("yoga")
    assert get_hero_image("yoga") == images[0]
    assert get_hero_image("yoga", index=1) == images[1]
    assert get_hero_image("yoga", index=99) == images[0]


def test_unknown_archetype_raises_configuration_error() -> None:
    registry = default_registry()
    with pytest.raises(ArchetypeNotFoundError) as exc:
        registry.archetype("brutalist")
    assert isinstance(exc.value, ConfigurationError)
    assert "local" in exc.value.known


def test_every_family_has_archetypes() -> None:
    registry = default_registry()
    for family in set(registry.families.values()):
        assert registry.archetypes_for_family(family), family


def test_research_menu_style_and_hero_component() -> None:
    registry = default_registry()
    assert registry.menu_style("steakhouse", "C") == "compact-table"
    assert registry.menu_style("steakhouse", None) == "elegant-list"
    assert registry.menu_style("plumber", "B") == "photo-grid"
    assert registry.hero_component("video") == "VideoHero"
    assert registry.hero_component("not-a-hero") == "ImageOverlayHero"


def test_layout_variant_lookup() -> None:
    registry = default_registry()
    variant = registry.layout_variant("pizza", "a")
    assert variant is not None
    assert variant.key == "A"
    assert variant.hero_type == "video"
    assert variant.sections
    assert registry.layout_variant("roofing", "B") is None
    with pytest.raises(ConfigurationError):
        registry.layout_variant("pizza", "Z")


def test_winning_elements_and_color_guidance() -> None:
    registry = default_registry()
    assert "online-ordering" in registry.winning_elements("pizza-restaurant")
    assert registry.winning_elements("roofing") == ()
    assert registry.color_guidance("roofing") == {}


def test_modules_default_to_services_catalog() -> None:
    registry = default_registry()
    assert dict(registry.modules_for("mystery")) == {"services": "catalog"}
    assert ("demos", "booking", "Demo Requests") in registry.module_triples("saas")


def test_registry_tables_are_read_only() -> None:
    registry = default_registry()
    with pytest.raises(TypeError):
        registry.aliases["cafe"] = "bakery"  # type: ignore[index]
    with pytest.raises(TypeError):
        registry.archetype("local").style.colors["primary"] = "#000000"  # type: ignore[index]


def test_research_can_be_loaded_from_a_file(tmp_path) -> None:
    path = tmp_path / "research.json"
    payload = {
        "hero_types": {"video": "CustomVideoHero"},
        "section_types": {"menu-wall": "MenuWall"},
        "industries": {
            "pizza-restaurant": {
                "winning_elements": ["by-the-slice"],
                "layout_variants": {
                    "A": {"hero_type": "video", "sections": [{"type": "menu-wall"}, {"config": {}}], "mood": "loud"},
                    "B": "not a variant",
                },
            },
            "broken": [],
        },
    }
    path.write_text(json.dumps(payload), encoding="utf-8")

    registry = build_registry(load_research(path))
    assert registry.hero_component("video") == "CustomVideoHero"
    assert registry.section_component("menu-wall") == "MenuWall"
    assert registry.section_component("menu-tabs") == ""
    assert registry.winning_elements("pizza") == ("by-the-slice",)
    assert registry.menu_style("pizza", "A") == DEFAULT_MENU_STYLE

    variant = registry.layout_variant("pizza", "A")
    assert [section.type for section in variant.sections] == ["menu-wall"]
    assert variant.mood == "loud"
    with pytest.raises(ConfigurationError):
        registry.layout_variant("pizza", "B")
    assert registry.research("broken") is None


def test_every_research_entry_is_reachable_by_lookup() -> None:
    registry = default_registry()
    for key in registry.research_data.industries:
        assert registry.lookup_industry(key) == key
    for key in registry.research_data.industry_menu_styles:
        assert registry.lookup_industry(key) == key


def test_archetype_image_filters_default_to_an_empty_read_only_mapping() -> None:
    archetype = Archetype(
        id="pop-up",
        name="Pop-up",
        description="",
        family=FOOD_SERVICE,
        best_for=(),
        style=ArchetypeStyle(vibe="", colors=MappingProxyType({})),
        hero_type="image-overlay",
        pages=MappingProxyType({}),
    )
    assert dict(archetype.image_filters) == {}
    with pytest.raises(TypeError):
        archetype.image_filters["bright-airy"] = "none"  # type: ignore[index]
