import logging

import pytest

from sitesmith.config import ArchetypeNotFoundError, BusinessProfile, GenerationOptions
from sitesmith.pipeline import classify, classify_with_rule, recommend_layout_variant, select_archetype
from sitesmith.pipeline.classifier import FAMILY_RULES
from sitesmith.registry import FOOD_SERVICE, default_registry


@pytest.mark.parametrize(
    "profile, expected",
    [
        (BusinessProfile(name="Modern Analytics B2B Solutions", industry="saas"), "enterprise-corporate"),
        (BusinessProfile(industry="yoga"), "zen-peaceful"),
        (BusinessProfile(name="Sweet Crumbs", industry="bakery", description="Order online, nationwide shipping"),
         "ecommerce"),
        (BusinessProfile(name="Maison Dore", industry="Patisserie", description="Artisan pastry"), "luxury"),
        (BusinessProfile(name="Corner Bakery", industry="bakery"), "local"),
        (BusinessProfile(name="Rapid Rooter", industry="plumbing", description="24/7 drain service"), "emergency"),
        (BusinessProfile(name="Green Lawns", industry="landscaping"), "neighborhood"),
        (BusinessProfile(name="Iron Works", industry="gym", description="Strength and boxing"), "energetic-bold"),
    ],
)
def test_classify_examples(profile: BusinessProfile, expected: str) -> None:
    assert classify(profile) == expected


def test_empty_profile_gets_a_family_default() -> None:
    result = classify_with_rule(BusinessProfile())
    assert result.used_default
    assert result.archetype_id == FAMILY_RULES[result.family].default


def test_classification_is_deterministic() -> None:
    profile = BusinessProfile(name="Bella Napoli", industry="pizza", description="Family pizzeria with delivery")
    assert len({classify(profile) for _ in range(20)}) == 1


def test_first_matching_rule_wins() -> None:
    # "delivery" (ecommerce) and "gourmet" (luxury) both match; ecommerce rule comes first
    profile = BusinessProfile(name="Gourmet Box", industry="restaurant", description="Gourmet meals with delivery")
    result = classify_with_rule(profile)
    assert result.family == FOOD_SERVICE
    assert result.archetype_id == "ecommerce"
    assert result.matched_keyword == "delivery"


def test_grooming_rules_read_the_tagline() -> None:
    plain = BusinessProfile(name="Cuts", industry="salon")
    tagged = BusinessProfile(name="Cuts", industry="salon", tagline="A vintage shave parlour")
    assert classify(plain) == "neighborhood-friendly"
    assert classify(tagged) == "vintage-classic"


def test_override_beats_classification(caplog) -> None:
    profile = BusinessProfile(name="Corner Bakery", industry="bakery")
    with caplog.at_level(logging.INFO):
        assert select_archetype(profile, GenerationOptions(archetype="luxury")) == "luxury"
    assert "override" in caplog.text


def test_unknown_override_raises() -> None:
    with pytest.raises(ArchetypeNotFoundError):
        select_archetype(BusinessProfile(industry="bakery"), GenerationOptions(archetype="brutalist"))


def test_every_rule_targets_an_archetype_of_its_family() -> None:
    registry = default_registry()
    for family, family_rules in FAMILY_RULES.items():
        targets = [rule.archetype_id for rule in family_rules.rules] + [family_rules.default]
        for archetype_id in targets:
            assert registry.archetype(archetype_id).family == family


@pytest.mark.parametrize(
    "goal, expected",
    [("conversion", "A"), ("Trust", "B"), ("  story ", "C"), (None, "A"), ("world domination", "A")],
)
def test_recommend_layout_variant(goal, expected) -> None:
    assert recommend_layout_variant(goal) == expected
