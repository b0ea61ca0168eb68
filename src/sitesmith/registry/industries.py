"""
Canonical industry keys, their aliases and the family each belongs to.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

DEFAULT_INDUSTRY = "default"

FOOD_SERVICE = "food-service"
HEALTHCARE = "healthcare"
FITNESS = "fitness"
GROOMING = "grooming"
HOME_SERVICES = "home-services"
TECHNOLOGY = "technology"
PROFESSIONAL_SERVICES = "professional-services"

# Order matters: substring matching walks families in this order and
# "default" must stay last.
INDUSTRY_FAMILIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    FOOD_SERVICE: ("bakery", "cake-shop", "coffee-cafe", "restaurant", "pizza-restaurant", "steakhouse"),
    HEALTHCARE: ("dental", "healthcare", "chiropractic"),
    GROOMING: ("salon-spa", "barbershop"),
    FITNESS: ("fitness-gym", "yoga"),
    PROFESSIONAL_SERVICES: ("law-firm", "real-estate", "accounting", "consulting"),
    HOME_SERVICES: ("auto-shop", "plumber", "electrician", "hvac", "landscaping", "roofing", "cleaning"),
    TECHNOLOGY: ("saas", "agency"),
})

# Unknown businesses get professional-services archetypes.
DEFAULT_FAMILY = PROFESSIONAL_SERVICES

INDUSTRY_ALIASES: Mapping[str, str] = MappingProxyType({
    # food & beverage
    "patisserie": "bakery",
    "cafe": "coffee-cafe",
    "coffee": "coffee-cafe",
    "coffee-shop": "coffee-cafe",
    "coffeeshop": "coffee-cafe",
    "pizzeria": "pizza-restaurant",
    "pizza": "pizza-restaurant",
    # health, beauty, fitness
    "dentist": "dental",
    "chiropractor": "chiropractic",
    "spa": "salon-spa",
    "salon": "salon-spa",
    "beauty": "salon-spa",
    "hair-salon": "salon-spa",
    "nail-salon": "salon-spa",
    "gym": "fitness-gym",
    "fitness": "fitness-gym",
    "barber": "barbershop",
    "barber-shop": "barbershop",
    "medical": "healthcare",
    "clinic": "healthcare",
    "doctor": "healthcare",
    # professional
    "lawyer": "law-firm",
    "attorney": "law-firm",
    "legal": "law-firm",
    "realtor": "real-estate",
    "realestate": "real-estate",
    "accountant": "accounting",
    "cpa": "accounting",
    "tax": "accounting",
    "consultant": "consulting",
    "advisory": "consulting",
    # trades & home
    "plumbing": "plumber",
    "mechanic": "auto-shop",
    "automotive": "auto-shop",
    "auto": "auto-shop",
    "electrical": "electrician",
    "heating": "hvac",
    "cooling": "hvac",
    "air-conditioning": "hvac",
    "lawn": "landscaping",
    "lawn-care": "landscaping",
    "landscaper": "landscaping",
    "roofer": "roofing",
    "cleaning-service": "cleaning",
    "maid": "cleaning",
    "house-cleaning": "cleaning",
    # technology
    "software": "saas",
    "tech": "saas",
    "technology": "saas",
    "startup": "saas",
    "app": "saas",
    "marketing-agency": "agency",
    "design-agency": "agency",
})


def canonical_industries() -> Tuple[str, ...]:
    """All canonical keys in lookup order, ending with the default sentinel."""
    keys = [key for members in INDUSTRY_FAMILIES.values() for key in members]
    keys.append(DEFAULT_INDUSTRY)
    return tuple(keys)


def family_index() -> Mapping[str, str]:
    """Map every canonical key to its family."""
    index = {key: family for family, members in INDUSTRY_FAMILIES.items() for key in members}
    index[DEFAULT_INDUSTRY] = DEFAULT_FAMILY
    return MappingProxyType(index)
