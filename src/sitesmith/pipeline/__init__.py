from .classifier import (
    Classification,
    KeywordRule,
    classify,
    classify_with_rule,
    recommend_layout_variant,
    select_archetype,
)
from .composer import (
    FeatureFlags,
    PageSpecification,
    SectionSpec,
    SitePlan,
    SiteSpecification,
    build_site,
    compose,
    compose_page,
    plan_site,
)
from .content import ContactDetails, ContentItem, ResolvedContent, Stat, Testimonial, format_price, resolve_content
from .executor import SiteReport, generate_site, write_site
from .theme import ResolvedTheme, ThemeLayer, resolve_theme, theme_layers

__all__ = [
    "Classification",
    "KeywordRule",
    "classify",
    "classify_with_rule",
    "recommend_layout_variant",
    "select_archetype",
    "FeatureFlags",
    "PageSpecification",
    "SectionSpec",
    "SitePlan",
    "SiteSpecification",
    "build_site",
    "compose",
    "compose_page",
    "plan_site",
    "ContactDetails",
    "ContentItem",
    "ResolvedContent",
    "Stat",
    "Testimonial",
    "format_price",
    "resolve_content",
    "SiteReport",
    "generate_site",
    "write_site",
    "ThemeLayer",
    "ResolvedTheme",
    "resolve_theme",
    "theme_layers",
]
