"""
Content resolution: per-field precedence of business profile, AI copy and
archetype defaults, producing a ResolvedContent with no missing values.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Callable, List, Literal, Mapping, Optional, Sequence, Tuple, TypeVar

from pydantic import BaseModel

from ..config.models import BusinessProfile, PageKind, parse_page_kind
from ..registry import DEFAULT_FAMILY, ItemDefault, PageDefaults, StatDefault, TestimonialDefault
from ..registry.defaults import resolve_page_defaults
from ..util.text import first_present
from .aicontent import ai_menu_items, ai_paragraphs, ai_service_items, ai_testimonials, ai_text

logger = logging.getLogger(__name__)

CURRENCY_SYMBOLS = ("$", "€", "£", "¥")
_CENT = Decimal("0.01")

NAME_FALLBACK = "Business"
INDUSTRY_FALLBACK = "business"
YEAR_FALLBACK = "2020"
DEFAULT_STARS = 5

Catalog = Literal["menu", "services"]
T = TypeVar("T")


class ContentItem(BaseModel):
    name: str
    price: str = ""
    description: str = ""

    model_config = {"frozen": True}


class Testimonial(BaseModel):
    text: str
    author: str
    stars: int = DEFAULT_STARS

    model_config = {"frozen": True}


class Stat(BaseModel):
    value: str
    label: str

    model_config = {"frozen": True}


class ContactDetails(BaseModel):
    address: str = ""
    phone: str = ""
    email: str = ""
    year_founded: str = ""

    model_config = {"frozen": True}


class ResolvedContent(BaseModel):
    """Fully defaulted copy for one page; text fields are always strings."""

    page_kind: PageKind
    business_name: str
    tagline: str
    headline: str
    subheadline: str
    primary_cta: str
    secondary_cta: str
    hero_image: str
    body: Tuple[str, ...]
    cta_headline: str
    cta_subtext: str
    items: Tuple[ContentItem, ...]
    testimonials: Tuple[Testimonial, ...]
    stats: Tuple[Stat, ...]
    contact: ContactDetails

    model_config = {"frozen": True}


def format_price(value: Any) -> str:
    """
    Render a price for display.

    Numbers become ``$x.xx`` (half-up) and numeric strings are parsed first.
    A string that already carries a currency symbol keeps its symbol and is
    only normalised to two decimals ("€8.5" -> "€8.50"). Any other text such
    as "From $85" or "Market price" is returned unchanged. ``None`` and
    booleans give an empty string.
    """
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, (int, float, Decimal)):
        return _format_amount(value)
    text = str(value).strip()
    if not text:
        return text
    symbol = "$"
    number = text
    if text.startswith(CURRENCY_SYMBOLS):
        symbol, number = text[0], text[1:].strip()
    try:
        amount = Decimal(number.replace(",", ""))
    except InvalidOperation:
        return text
    return _format_amount(amount, symbol) or text


def _format_amount(value: Any, symbol: str = "$") -> str:
    if isinstance(value, float) and not math.isfinite(value):
        return ""
    amount = Decimal(str(value))
    if not amount.is_finite():
        return ""
    try:
        return f"{symbol}{amount.quantize(_CENT, rounding=ROUND_HALF_UP)}"
    except InvalidOperation:
        # too many digits for the decimal context
        return ""


class _Placeholders:
    """Fills ``{name}``-style placeholders in default text."""

    def __init__(self, profile: BusinessProfile):
        self.values = {
            "name": profile.name or NAME_FALLBACK,
            "industry": profile.industry or INDUSTRY_FALLBACK,
            "year": profile.year_founded or YEAR_FALLBACK,
            "tagline": "",
        }

    def __call__(self, text: Optional[str]) -> str:
        result = text or ""
        for key, value in self.values.items():
            result = result.replace("{" + key + "}", value)
        return result


def _item_from_ai(raw: Any) -> Optional[ContentItem]:
    if isinstance(raw, str) and raw.strip():
        return ContentItem(name=raw.strip())
    if not isinstance(raw, Mapping):
        return None
    name = first_present(raw.get("name"), raw.get("title"))
    if not isinstance(name, str):
        return None
    description = raw.get("description")
    return ContentItem(
        name=name.strip(),
        price=format_price(raw.get("price")),
        description=description.strip() if isinstance(description, str) else "",
    )


def _testimonial_from_ai(raw: Any) -> Optional[Testimonial]:
    if not isinstance(raw, Mapping):
        return None
    text = raw.get("text")
    author = raw.get("author")
    if not isinstance(text, str) or not text.strip():
        return None
    stars = raw.get("stars")
    if isinstance(stars, bool) or not isinstance(stars, int) or not 1 <= stars <= 5:
        stars = DEFAULT_STARS
    author_name = author.strip() if isinstance(author, str) and author.strip() else "Happy Customer"
    return Testimonial(text=text.strip(), author=author_name, stars=stars)


def _merge_list(
    raw_entries: Sequence[Any],
    defaults: Sequence[T],
    parse: Callable[[Any], Optional[T]],
    *,
    label: str,
    keep_extra: bool = False,
) -> List[T]:
    """
    AI entries first, padded positionally with defaults to the slot count.

    Malformed entries take the default for their slot. Entries beyond the slot
    count are dropped unless ``keep_extra`` is set.
    """
    slots = len(defaults)
    limit = max(slots, len(raw_entries)) if keep_extra else slots
    merged: List[T] = []
    for index in range(limit):
        parsed = parse(raw_entries[index]) if index < len(raw_entries) else None
        if index < len(raw_entries) and parsed is None:
            logger.debug("Discarding malformed AI %s entry at position %d", label, index)
        if parsed is None:
            if index >= slots:
                continue
            parsed = defaults[index]
        merged.append(parsed)
    if len(raw_entries) > limit:
        logger.debug("Truncated %d AI %s entries to %d slots", len(raw_entries), label, limit)
    return merged


def _select_ai_items(kind: PageKind, ai_content: Optional[Mapping[str, Any]], catalog: Catalog) -> List[Any]:
    if kind is PageKind.MENU:
        return ai_menu_items(ai_content, all_categories=True)
    if kind is PageKind.SERVICES:
        return ai_service_items(ai_content)
    if catalog == "menu":
        return ai_menu_items(ai_content)
    return ai_service_items(ai_content)


def _hero_copy(kind: PageKind, profile: BusinessProfile, ai_content: Optional[Mapping[str, Any]]) -> dict:
    """Business and AI candidates for the hero fields of one page kind."""
    if kind is PageKind.HOME:
        return {
            "headline": (profile.hero_headline, ai_text(ai_content, "hero", "headline")),
            "subheadline": (profile.hero_subheadline, ai_text(ai_content, "hero", "subheadline")),
            "primary_cta": (profile.hero_cta, ai_text(ai_content, "hero", "cta")),
            "secondary_cta": (profile.hero_secondary_cta, ai_text(ai_content, "hero", "secondaryCta")),
        }
    if kind is PageKind.ABOUT:
        return {"headline": (None, ai_text(ai_content, "about", "headline"))}
    if kind in (PageKind.SERVICES, PageKind.MENU):
        return {"subheadline": (None, ai_text(ai_content, "services", "intro"))}
    return {}


def resolve_content(
    page_kind: PageKind | str,
    profile: BusinessProfile,
    ai_content: Optional[Mapping[str, Any]] = None,
    defaults: Optional[PageDefaults] = None,
    *,
    hero_image: str = "",
    catalog: Catalog = "menu",
) -> ResolvedContent:
    """
    Resolve every content field for one page.

    Args:
        page_kind: Page being resolved.
        profile: Business profile; its non-empty values always win.
        ai_content: Raw AI content, used where the profile is silent.
        defaults: Archetype/page-kind defaults; generic defaults when omitted.
        hero_image: Default hero image URL (usually from the registry).
        catalog: Which AI list feeds the home page items ("menu" or "services").

    Raises:
        ConfigurationError: If ``page_kind`` is not a known page kind.
    """
    kind = parse_page_kind(page_kind)
    if defaults is None:
        defaults = resolve_page_defaults(DEFAULT_FAMILY, "", kind.value)
    fill = _Placeholders(profile)
    tagline = first_present(profile.tagline, default=fill(defaults.tagline))
    fill.values["tagline"] = tagline

    hero = _hero_copy(kind, profile, ai_content)

    def pick(field: str) -> str:
        business, ai_value = hero.get(field, (None, None))
        return first_present(business, ai_value, default=fill(getattr(defaults, field)))

    paragraphs = ai_paragraphs(ai_content) if kind is PageKind.ABOUT else []
    if kind is PageKind.ABOUT and profile.description:
        body: Tuple[str, ...] = (profile.description,)
    elif paragraphs:
        body = tuple(paragraphs)
    else:
        body = tuple(fill(paragraph) for paragraph in defaults.body or ())

    item_defaults = [_item_default(item, fill) for item in defaults.items or ()]
    items = _merge_list(
        _select_ai_items(kind, ai_content, catalog),
        item_defaults,
        _item_from_ai,
        label="item",
        keep_extra=kind in (PageKind.MENU, PageKind.SERVICES),
    )
    testimonials = _merge_list(
        ai_testimonials(ai_content),
        [_testimonial_default(entry, fill) for entry in defaults.testimonials or ()],
        _testimonial_from_ai,
        label="testimonial",
    )
    stats = tuple(_stat_default(stat, fill) for stat in defaults.stats or ())

    return ResolvedContent(
        page_kind=kind,
        business_name=first_present(profile.name, default=NAME_FALLBACK),
        tagline=tagline,
        headline=pick("headline"),
        subheadline=pick("subheadline"),
        primary_cta=pick("primary_cta"),
        secondary_cta=pick("secondary_cta"),
        hero_image=first_present(profile.hero_image, hero_image, default=""),
        body=body,
        cta_headline=first_present(ai_text(ai_content, "ctaSection", "headline"), default=fill(defaults.cta_headline)),
        cta_subtext=first_present(ai_text(ai_content, "ctaSection", "subtext"), default=fill(defaults.cta_subtext)),
        items=tuple(items),
        testimonials=tuple(testimonials),
        stats=stats,
        contact=ContactDetails(
            address=profile.address,
            phone=profile.phone,
            email=profile.email,
            year_founded=profile.year_founded,
        ),
    )


def _item_default(item: ItemDefault, fill: _Placeholders) -> ContentItem:
    return ContentItem(name=fill(item.name), price=format_price(item.price), description=fill(item.description))


def _testimonial_default(entry: TestimonialDefault, fill: _Placeholders) -> Testimonial:
    return Testimonial(text=fill(entry.text), author=entry.author, stars=entry.stars)


def _stat_default(stat: StatDefault, fill: _Placeholders) -> Stat:
    return Stat(value=fill(stat.value), label=fill(stat.label))
