"""
Fallback copy for every page kind, layered generic -> family -> archetype.

Default text may contain ``{name}``, ``{industry}``, ``{year}`` and
``{tagline}`` placeholders; they are filled in by the content resolver.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from .industries import (
    FITNESS,
    FOOD_SERVICE,
    GROOMING,
    HEALTHCARE,
    HOME_SERVICES,
    PROFESSIONAL_SERVICES,
    TECHNOLOGY,
)

ALL_PAGES = "*"


@dataclass(frozen=True)
class ItemDefault:
    name: str
    price: Union[str, float, None] = None
    description: str = ""


@dataclass(frozen=True)
class TestimonialDefault:
    text: str
    author: str
    stars: int = 5


@dataclass(frozen=True)
class StatDefault:
    value: str
    label: str


@dataclass(frozen=True)
class PageDefaults:
    """
    Partial page copy. ``None`` means "not specified at this level" so that a
    more specific level only replaces what it actually declares.
    """

    tagline: Optional[str] = None
    headline: Optional[str] = None
    subheadline: Optional[str] = None
    primary_cta: Optional[str] = None
    secondary_cta: Optional[str] = None
    body: Optional[Tuple[str, ...]] = None
    cta_headline: Optional[str] = None
    cta_subtext: Optional[str] = None
    items: Optional[Tuple[ItemDefault, ...]] = None
    testimonials: Optional[Tuple[TestimonialDefault, ...]] = None
    stats: Optional[Tuple[StatDefault, ...]] = None

    def merged(self, other: Optional["PageDefaults"]) -> "PageDefaults":
        """Return a copy where every field ``other`` declares replaces ours."""
        if other is None:
            return self
        values = {}
        for item in fields(self):
            override = getattr(other, item.name)
            values[item.name] = override if override is not None else getattr(self, item.name)
        return PageDefaults(**values)


def _items(*entries: Tuple) -> Tuple[ItemDefault, ...]:
    return tuple(ItemDefault(*entry) for entry in entries)


def _stats(*entries: Tuple[str, str]) -> Tuple[StatDefault, ...]:
    return tuple(StatDefault(*entry) for entry in entries)


def _reviews(*entries: Tuple[str, str]) -> Tuple[TestimonialDefault, ...]:
    return tuple(TestimonialDefault(*entry) for entry in entries)


def _table(**pages: PageDefaults) -> Mapping[str, PageDefaults]:
    return MappingProxyType({(ALL_PAGES if key == "all" else key): value for key, value in pages.items()})


GENERIC_DEFAULTS: Mapping[str, PageDefaults] = _table(
    all=PageDefaults(
        tagline="Your trusted local {industry}",
        headline="Welcome to {name}",
        subheadline="{tagline}",
        primary_cta="Get Started",
        secondary_cta="Learn More",
        body=(
            "{name} has proudly served our community since {year}.",
            "We combine experience with genuine care for every customer who walks through our door.",
        ),
        cta_headline="Ready to get started?",
        cta_subtext="Contact {name} today and see the difference.",
        items=_items(
            ("Consultation", None, "A conversation about what you need and how we can help."),
            ("Core Service", None, "Our signature offering, delivered with care."),
            ("Ongoing Support", None, "We stay with you long after the first visit."),
        ),
        testimonials=_reviews(
            ("Professional, friendly and reliable. Highly recommended.", "Jordan P."),
            ("They went above and beyond for us. We will be back.", "Alex K."),
            ("Great experience from start to finish.", "Sam L."),
        ),
        stats=_stats(
            ("Since {year}", "Serving Our Community"),
            ("5★", "Average Rating"),
            ("100%", "Satisfaction Focused"),
        ),
    ),
    menu=PageDefaults(headline="Our Menu", subheadline="Made fresh, every day", primary_cta="Order Now"),
    services=PageDefaults(headline="Our Services", subheadline="What we can do for you", primary_cta="Get in Touch"),
    about=PageDefaults(headline="About {name}", subheadline="Our story", primary_cta="Contact Us"),
    contact=PageDefaults(
        headline="Contact Us",
        subheadline="We'd love to hear from you",
        primary_cta="Send Message",
    ),
    gallery=PageDefaults(headline="Gallery", subheadline="A look inside {name}", primary_cta="Visit Us"),
)


FAMILY_DEFAULTS: Mapping[str, Mapping[str, PageDefaults]] = MappingProxyType({
    FOOD_SERVICE: _table(
        all=PageDefaults(cta_headline="Come hungry, leave happy", cta_subtext="Stop by {name} or order ahead."),
        services=PageDefaults(headline="Catering & Events", subheadline="Let {name} cater your next celebration"),
    ),
    HOME_SERVICES: _table(
        all=PageDefaults(
            items=_items(
                ("Repairs", None, "Fast diagnosis and lasting fixes."),
                ("Installations", None, "New equipment installed right the first time."),
                ("Maintenance", None, "Scheduled care that prevents costly breakdowns."),
                ("Inspections", None, "Honest assessments with clear, upfront pricing."),
            ),
            stats=_stats(("Since {year}", "Locally Owned"), ("24/7", "Availability"), ("100%", "Licensed & Insured")),
            cta_headline="Need help today?",
            cta_subtext="Call {name} for fast, friendly service.",
        ),
    ),
    HEALTHCARE: _table(
        all=PageDefaults(
            items=_items(
                ("General Dentistry", None, "Cleanings, exams and preventive care for the whole family."),
                ("Cosmetic Dentistry", None, "Whitening, veneers and smile makeovers."),
                ("Restorative Care", None, "Crowns, bridges and implants that last."),
                ("Emergency Care", None, "Same-day appointments when you need us most."),
            ),
            cta_headline="New Patients Welcome!",
            cta_subtext="Schedule your first visit with {name} today.",
        ),
        home=PageDefaults(
            headline="Compassionate Care for the Whole Family",
            subheadline="Modern treatment in a comfortable, welcoming setting.",
            primary_cta="Book Appointment",
            secondary_cta="Our Services",
        ),
    ),
    PROFESSIONAL_SERVICES: _table(
        all=PageDefaults(
            items=_items(
                ("Business Law", None, "Formation, contracts and disputes handled with care."),
                ("Estate Planning", None, "Wills, trusts and peace of mind for your family."),
                ("Real Estate", None, "Closings, leases and title work."),
                ("Family Law", None, "Compassionate guidance through difficult transitions."),
            ),
            stats=_stats(
                ("25+", "Years Experience"),
                ("5,000+", "Clients Served"),
                ("98%", "Success Rate"),
                ("24/7", "Client Support"),
            ),
            cta_headline="Let's talk about your situation",
            cta_subtext="Schedule a confidential consultation with {name}.",
        ),
        home=PageDefaults(
            headline="Experienced Guidance You Can Trust",
            subheadline="{name} has delivered results for clients since {year}.",
            primary_cta="Schedule a Consultation",
            secondary_cta="Our Practice Areas",
        ),
    ),
    TECHNOLOGY: _table(
        all=PageDefaults(
            items=_items(
                ("Lightning Fast", None, "Built for speed at every layer."),
                ("Enterprise Security", None, "SOC 2 ready controls and encryption everywhere."),
                ("Powerful Analytics", None, "Real-time insight into everything that matters."),
                ("Seamless Integration", None, "Connects with the tools your team already uses."),
                ("Global Scale", None, "Infrastructure that grows with you."),
                ("Team Collaboration", None, "Shared workspaces keep everyone in sync."),
            ),
            stats=_stats(
                ("10K+", "Companies"),
                ("99.9%", "Uptime"),
                ("50M+", "Users"),
                ("150+", "Countries"),
            ),
            cta_headline="Ready to get started?",
            cta_subtext="Join thousands of teams building with {name}.",
        ),
        home=PageDefaults(
            headline="Build faster with {name}",
            subheadline="The platform modern teams use to ship with confidence.",
            primary_cta="Start Free Trial",
            secondary_cta="Book a Demo",
        ),
    ),
    FITNESS: _table(
        all=PageDefaults(
            items=_items(
                ("HIIT Training", None, "High-intensity intervals that torch calories."),
                ("Strength Training", None, "Build power with expert coaching."),
                ("Group Classes", None, "Sweat it out with the community."),
                ("Personal Training", None, "One-on-one programs built around your goals."),
            ),
            stats=_stats(
                ("50+", "Classes Weekly"),
                ("20+", "Expert Trainers"),
                ("10K+", "Members Strong"),
                ("24/7", "Access"),
            ),
            cta_headline="Your first class is on us",
            cta_subtext="Start your free trial at {name} today.",
        ),
    ),
    GROOMING: _table(
        all=PageDefaults(
            cta_headline="Look sharp, feel great",
            cta_subtext="Book your next appointment at {name}.",
        ),
        home=PageDefaults(primary_cta="Book Now", secondary_cta="View Services"),
    ),
})


ARCHETYPE_DEFAULTS: Mapping[str, Mapping[str, PageDefaults]] = MappingProxyType({
    "ecommerce": _table(
        all=PageDefaults(
            items=_items(
                ("Signature Item", 4.50, "Our most-loved creation"),
                ("Popular Pick", 6.00, "A customer favorite"),
                ("Fresh Daily", 4.00, "Baked fresh every morning"),
                ("New Arrival", 3.50, "Just added to the lineup"),
            ),
            stats=_stats(("Free Shipping", "On orders $50+"), ("4.9★", "Customer Rating"), ("Since {year}", "Baking Daily")),
        ),
        home=PageDefaults(
            headline="{tagline}",
            subheadline="Fresh-baked happiness delivered to your door. Order online for pickup or nationwide shipping.",
            primary_cta="Order Pickup",
            secondary_cta="Ship Nationwide",
        ),
    ),
    "luxury": _table(
        all=PageDefaults(
            items=_items(
                ("Signature Item", 48, "Our house masterpiece"),
                ("Popular Choice", 52, "A celebrated favorite"),
                ("Classic", 6, "Timeless and refined"),
            ),
            body=(
                "Where tradition meets artistry. Each creation is a testament to our unwavering commitment to "
                "excellence.",
            ),
            cta_headline="Experience Excellence",
            cta_subtext="Visit our atelier or order for delivery",
        ),
        home=PageDefaults(
            headline="The Art of Pastry",
            subheadline="Handcrafted with passion",
            primary_cta="Explore Collection",
            secondary_cta="Our Story",
        ),
    ),
    "local": _table(
        all=PageDefaults(
            items=_items(
                ("Butter Croissant", 4.50, "Flaky, golden, fresh from the oven"),
                ("Red Velvet Cupcake", 5.00, "Cream cheese frosting, moist cake"),
                ("Sourdough Loaf", 8.00, "24-hour fermented, crusty perfection"),
            ),
            testimonials=_reviews(
                ("Best bakery in town! The croissants are out of this world.", "Sarah M."),
                ("My family has been coming here for years. Always fresh, always delicious.", "Mike R."),
                ("The birthday cake they made for my daughter was perfect!", "Lisa T."),
            ),
        ),
        home=PageDefaults(headline="{name}", primary_cta="View Our Menu", secondary_cta="Visit Us"),
    ),
    "emergency": _table(
        home=PageDefaults(
            headline="Fast, Reliable {industry} Service",
            subheadline=(
                "When emergencies strike, we're there. Professional service you can trust, "
                "24 hours a day, 7 days a week."
            ),
            primary_cta="Call Now",
            secondary_cta="Request Service",
        ),
    ),
    "professional": _table(
        home=PageDefaults(
            headline="Professional {industry} Services You Can Trust",
            subheadline="Licensed, insured and committed to quality workmanship on every project.",
            primary_cta="Get a Free Quote",
            secondary_cta="View Our Work",
        ),
    ),
    "neighborhood": _table(
        home=PageDefaults(
            headline="Your Neighborhood {industry} Experts",
            subheadline="Friendly, honest service from people who live in your community.",
            primary_cta="Schedule Service",
            secondary_cta="Meet the Team",
        ),
    ),
    "energetic-bold": _table(
        home=PageDefaults(headline="Stronger Every Day", subheadline="No excuses. Just results.",
                          primary_cta="Start Free Trial", secondary_cta="View Classes"),
    ),
    "zen-peaceful": _table(
        all=PageDefaults(
            items=_items(
                ("Vinyasa Flow", None, "Breath-led movement for every level."),
                ("Restorative", None, "Slow, supported postures to release tension."),
                ("Meditation", None, "Guided stillness for a quieter mind."),
                ("Yin Yoga", None, "Long holds that reach deep connective tissue."),
            ),
        ),
        home=PageDefaults(headline="Find Your Balance", subheadline="A calm space to breathe, move and rest.",
                          primary_cta="Book a Class", secondary_cta="View Schedule"),
    ),
    "community-social": _table(
        home=PageDefaults(headline="Fitness Is Better Together", subheadline="Classes, coaches and friends at {name}.",
                          primary_cta="Join Today", secondary_cta="See the Schedule"),
    ),
    "vintage-classic": _table(
        all=PageDefaults(
            items=_items(
                ("Classic Haircut", 35, "Precision cut with hot lather neck shave."),
                ("Beard Trim", 20, "Shape, line and condition."),
                ("Hot Towel Shave", 40, "Straight razor, the old-school way."),
                ("The Works", 65, "Cut, shave and hot towel treatment."),
            ),
        ),
        home=PageDefaults(headline="Classic Cuts. Timeless Style.", subheadline="Traditional barbering since {year}."),
    ),
    "modern-sleek": _table(
        all=PageDefaults(
            items=_items(
                ("Signature Cut", 55, "Consultation, cut and style."),
                ("Color Service", "From $85", "Dimensional color by our specialists."),
                ("Blowout & Style", 45, "Smooth, voluminous finish."),
                ("Spa Treatment", 75, "Restorative scalp and hair ritual."),
            ),
        ),
        home=PageDefaults(headline="Elevate Your Look", subheadline="Contemporary styling in a calm, modern studio."),
    ),
    "neighborhood-friendly": _table(
        all=PageDefaults(
            items=_items(
                ("Haircut", 30, "Friendly cuts for everyone."),
                ("Kids Cut", 20, "Patient stylists for little ones."),
                ("Beard Trim", 15, "Clean lines, every time."),
                ("Full Service", 50, "Cut, wash and style."),
            ),
        ),
        home=PageDefaults(headline="Your Neighborhood Salon", subheadline="Great cuts and good company at {name}."),
    ),
})


def resolve_page_defaults(family: str, archetype_id: str, page_kind: str) -> PageDefaults:
    """Merge generic, family and archetype defaults for one page kind."""
    resolved = PageDefaults()
    for table in (GENERIC_DEFAULTS, FAMILY_DEFAULTS.get(family, {}), ARCHETYPE_DEFAULTS.get(archetype_id, {})):
        resolved = resolved.merged(table.get(ALL_PAGES)).merged(table.get(page_kind))
    return resolved
