"""
Feature modules each industry's generated site exposes (menu, bookings, ...).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

CATALOG = "catalog"
BOOKING = "booking"
INQUIRIES = "inquiries"
LISTINGS = "listings"

DEFAULT_MODULES: Mapping[str, str] = MappingProxyType({"services": CATALOG})


def _modules(**modules: str) -> Mapping[str, str]:
    return MappingProxyType(dict(modules))


# module name -> module type, in display order
INDUSTRY_MODULES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "pizza-restaurant": _modules(menu=CATALOG, orders=INQUIRIES),
    "steakhouse": _modules(menu=CATALOG, reservations=BOOKING),
    "coffee-cafe": _modules(menu=CATALOG, orders=INQUIRIES, reservations=BOOKING),
    "restaurant": _modules(menu=CATALOG, reservations=BOOKING),
    "bakery": _modules(menu=CATALOG, orders=INQUIRIES),
    "salon-spa": _modules(services=CATALOG, appointments=BOOKING),
    "barbershop": _modules(services=CATALOG, appointments=BOOKING),
    "dental": _modules(services=CATALOG, appointments=BOOKING),
    "yoga": _modules(classes=CATALOG, bookings=BOOKING),
    "fitness-gym": _modules(classes=CATALOG, memberships=INQUIRIES),
    "law-firm": _modules(services=CATALOG, consultations=BOOKING),
    "healthcare": _modules(services=CATALOG, appointments=BOOKING),
    "real-estate": _modules(listings=LISTINGS, inquiries=INQUIRIES),
    "plumber": _modules(services=CATALOG, quotes=INQUIRIES),
    "cleaning": _modules(services=CATALOG, quotes=INQUIRIES),
    "auto-shop": _modules(services=CATALOG, appointments=BOOKING),
    "saas": _modules(features=CATALOG, demos=BOOKING),
})

MODULE_LABELS: Mapping[str, str] = MappingProxyType({
    "menu": "Menu",
    "services": "Services",
    "classes": "Classes",
    "features": "Features",
    "reservations": "Reservations",
    "appointments": "Appointments",
    "consultations": "Consultations",
    "bookings": "Bookings",
    "demos": "Demo Requests",
    "listings": "Listings",
    "orders": "Orders",
    "quotes": "Quote Requests",
    "memberships": "Memberships",
    "inquiries": "Inquiries",
})


def module_label(name: str) -> str:
    return MODULE_LABELS.get(name, name.replace("-", " ").title())


# booking module name -> header button text
BOOKING_ACTIONS: Mapping[str, str] = MappingProxyType({
    "reservations": "Reserve a Table",
    "appointments": "Book an Appointment",
    "consultations": "Book a Consultation",
    "bookings": "Book a Class",
    "demos": "Request a Demo",
})


def booking_action(name: str) -> str:
    return BOOKING_ACTIONS.get(name, "Book Now")
