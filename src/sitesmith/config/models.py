"""
Pydantic models for site generation requests and the TOML loader that builds them.
"""

from __future__ import annotations

import hashlib
import json
import logging
import re
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when a request, option or override cannot be honoured as given."""


class ArchetypeNotFoundError(ConfigurationError):
    """Raised when an explicit archetype id is not present in the registry."""

    def __init__(self, archetype_id: str, known: Optional[List[str]] = None):
        self.archetype_id = archetype_id
        self.known = sorted(known or [])
        hint = f" Known archetypes: {', '.join(self.known)}." if self.known else ""
        super().__init__(f"Unknown archetype '{archetype_id}'.{hint}")


class PageKind(str, Enum):
    """Page types a site can be generated with."""

    HOME = "home"
    MENU = "menu"
    SERVICES = "services"
    ABOUT = "about"
    CONTACT = "contact"
    GALLERY = "gallery"


def parse_page_kind(value: PageKind | str) -> PageKind:
    """
    Coerce a page kind name into a PageKind.

    Raises:
        ConfigurationError: If the name is not a known page kind.
    """
    if isinstance(value, PageKind):
        return value
    try:
        return PageKind(str(value).strip().lower())
    except ValueError as exc:
        known = ", ".join(kind.value for kind in PageKind)
        raise ConfigurationError(f"Unknown page kind '{value}'. Expected one of: {known}.") from exc


class BusinessProfile(BaseModel):
    """
    The business a site is generated for.

    Every field is optional; blank values fall through to AI content or
    archetype defaults during resolution.

    Attributes:
        name: Trading name (may be empty).
        tagline: Short strapline.
        industry: Free-text industry, normalised by the registry.
        address, phone, email: Contact details.
        year_founded: Founding year as text ("1998").
        description: Longer free text used by the classifier.
        hero_headline, hero_subheadline, hero_cta, hero_secondary_cta: Explicit
            copy that always beats AI-authored copy.
        hero_image: Explicit hero image URL.
    """
    name: str = ""
    tagline: str = ""
    industry: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    year_founded: str = ""
    description: str = ""
    hero_headline: Optional[str] = None
    hero_subheadline: Optional[str] = None
    hero_cta: Optional[str] = None
    hero_secondary_cta: Optional[str] = None
    hero_image: Optional[str] = None

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "str_strip_whitespace": True,
    }

    @field_validator("name", "tagline", "industry", "address", "phone", "email", "description", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("year_founded", mode="before")
    @classmethod
    def _year_as_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).replace("-", "_").lower()


class ThemeOverrides(BaseModel):
    """
    Caller-supplied partial theme.

    Attributes:
        is_dark: Apply the dark substitution block (wins over is_medium).
        is_medium: Apply the medium substitution block.
        colors: Explicit colours; keys may be snake_case or camelCase.
        font_heading, font_body: Font stacks.
        border_radius, section_padding, card_padding, gap, button_padding: Spacing.
        headline_style: CSS text-transform for headings ("uppercase", "none").
        image_filter: CSS filter applied to imagery.
    """
    is_dark: bool = False
    is_medium: bool = False
    colors: Dict[str, str] = Field(default_factory=dict)
    font_heading: Optional[str] = None
    font_body: Optional[str] = None
    border_radius: Optional[str] = None
    section_padding: Optional[str] = None
    card_padding: Optional[str] = None
    gap: Optional[str] = None
    button_padding: Optional[str] = None
    headline_style: Optional[str] = None
    image_filter: Optional[str] = None

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "populate_by_name": True,
    }

    @field_validator("colors", mode="before")
    @classmethod
    def _normalise_color_keys(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {_snake_case(str(key)): colour for key, colour in value.items()}


class GenerationOptions(BaseModel):
    """
    Optional knobs for one generation request.

    Attributes:
        archetype_override: Explicit archetype id; unknown ids are a configuration error.
        variant: Research layout variant ("A", "B" or "C") for the home page.
        goal: Business goal used to recommend a variant when none is given.
        pages: Page kinds to generate; empty means the archetype family default.
        theme: Theme overrides.
        ai_content: Raw, untrusted AI-authored content.
    """
    archetype_override: Optional[str] = Field(default=None, alias="archetype")
    variant: Optional[Literal["A", "B", "C"]] = None
    goal: Optional[str] = None
    pages: List[PageKind] = Field(default_factory=list)
    theme: ThemeOverrides = Field(default_factory=ThemeOverrides)
    ai_content: Optional[Dict[str, Any]] = None

    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
    }

    @field_validator("variant", mode="before")
    @classmethod
    def _upper_variant(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper() or None
        return value

    @field_validator("ai_content", mode="before")
    @classmethod
    def _drop_non_object_ai_content(cls, value: Any) -> Any:
        if value is None or isinstance(value, Mapping):
            return value
        logger.debug("Ignoring AI content with a %s root; expected an object", type(value).__name__)
        return None


class SiteRequest(BaseModel):
    """A loaded request file: the business plus its generation options."""

    business: BusinessProfile
    options: GenerationOptions = Field(default_factory=GenerationOptions)
    source: Optional[Path] = None

    model_config = {
        "arbitrary_types_allowed": True,
    }

    @property
    def hash(self) -> str:
        """
        Deterministic hash of the normalised request, used to name cached output.
        """
        payload = self.model_dump(mode="json", exclude={"source"})
        blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
        return hashlib.sha256(blob).hexdigest()


def load_request(path: Path | str) -> SiteRequest:
    """
    Load and validate a TOML site request.

    Layout::

        [business]        # BusinessProfile fields
        [options]         # archetype, variant, goal, pages
        [theme]           # ThemeOverrides fields
        ai_content = "ai.json"   # or an inline [ai_content] table

    Raises:
        ConfigurationError: If the file is missing, unreadable, or invalid.
    """
    request_path = Path(path).expanduser().resolve()
    if not request_path.exists():
        raise ConfigurationError(f"Request file not found: {request_path}")

    try:
        with request_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigurationError(f"Unable to read request file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in request file: {exc}") from exc

    payload = _normalize_request_schema(raw_data, request_path.parent)
    payload["source"] = request_path

    try:
        return SiteRequest.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def _normalize_request_schema(data: Dict[str, Any], base_dir: Path) -> Dict[str, Any]:
    """
    Map the flat TOML tables onto the nested SiteRequest shape.
    """
    unknown = sorted(set(data) - {"business", "options", "theme", "ai_content"})
    if unknown:
        raise ConfigurationError(f"Unexpected top-level keys in request: {', '.join(unknown)}")
    business = data.get("business")
    if not isinstance(business, dict):
        raise ConfigurationError("Request must contain a [business] table.")

    options = _require_table(data.get("options"), "options")
    theme = _require_table(data.get("theme"), "theme")
    if theme:
        options["theme"] = theme

    ai_source = data.get("ai_content")
    if isinstance(ai_source, str):
        options["ai_content"] = _load_ai_content(base_dir / ai_source)
    elif isinstance(ai_source, dict):
        options["ai_content"] = ai_source
    elif ai_source is not None:
        raise ConfigurationError("ai_content must be a JSON file path or an inline table.")

    if "pages" in options:
        options["pages"] = [parse_page_kind(page) for page in _as_list(options["pages"])]

    return {"business": business, "options": options}


def _require_table(value: Any, label: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"[{label}] must be a table.")
    return dict(value)


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, str):
        return [part for part in (piece.strip() for piece in value.split(",")) if part]
    if isinstance(value, list):
        return value
    raise ConfigurationError("options.pages must be a list or a comma-separated string.")


def _load_ai_content(path: Path) -> Optional[Dict[str, Any]]:
    """
    Read an AI content JSON document.

    The document itself is untrusted: only an unreadable or undecodable file
    is a configuration problem. A root that is not an object is treated as
    absent.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Unable to read AI content file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in AI content file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        logger.debug("AI content file %s does not hold a JSON object; ignoring it", path)
        return None
    return raw
