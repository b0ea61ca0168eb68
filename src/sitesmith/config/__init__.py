"""
Request models and settings for sitesmith.
"""

from .models import (
    ArchetypeNotFoundError,
    BusinessProfile,
    ConfigurationError,
    GenerationOptions,
    PageKind,
    SiteRequest,
    ThemeOverrides,
    load_request,
    parse_page_kind,
)
from .settings import Settings, get_settings

__all__ = [
    "ArchetypeNotFoundError",
    "BusinessProfile",
    "ConfigurationError",
    "GenerationOptions",
    "PageKind",
    "SiteRequest",
    "ThemeOverrides",
    "load_request",
    "parse_page_kind",
    "Settings",
    "get_settings",
]
