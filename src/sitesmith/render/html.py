"""
HTML emitter for composed page specifications.
"""

from __future__ import annotations

import html
import re
from typing import TYPE_CHECKING, Callable, Dict, Tuple

from ..config.models import PageKind
from ..registry.features import booking_action

if TYPE_CHECKING:
    from ..pipeline.composer import PageSpecification, SectionSpec
    from ..pipeline.content import ResolvedContent
    from ..pipeline.theme import ResolvedTheme


def _esc(value: object) -> str:
    return html.escape(str(value), quote=True)


_CSS_UNSAFE = re.compile(r"[<>{};\\]")
_CSS_NAME_UNSAFE = re.compile(r"[^a-z0-9-]+")


def _css_value(value: str) -> str:
    # values land inside a raw <style> element where entities are not decoded
    return _CSS_UNSAFE.sub("", value)


def page_filename(page_kind: PageKind) -> str:
    return "index.html" if page_kind is PageKind.HOME else f"{page_kind.value}.html"


def theme_css_variables(theme: ResolvedTheme) -> Dict[str, str]:
    """CSS custom properties for a theme, e.g. ``--color-primary``."""
    variables = {f"--color-{key.replace('_', '-')}": value for key, value in theme.palette.model_dump().items()}
    typography = theme.typography
    spacing = theme.spacing
    variables.update({
        "--font-heading": typography.font_heading,
        "--font-body": typography.font_body,
        "--heading-weight": typography.heading_weight,
        "--heading-transform": typography.heading_style,
        "--letter-spacing": typography.letter_spacing,
        "--border-radius": spacing.border_radius,
        "--section-padding": spacing.section_padding,
        "--card-padding": spacing.card_padding,
        "--gap": spacing.gap,
        "--button-padding": spacing.button_padding,
        "--image-filter": theme.image_filter,
    })
    return variables


def render_page(spec: PageSpecification) -> str:
    """
    Render a page specification to a standalone HTML document.

    Only the specification is read; all text is escaped.
    """
    content = spec.content
    business_name = _esc(content.business_name)
    title = business_name if spec.page_kind is PageKind.HOME else f"{_esc(content.headline)} | {business_name}"

    body_parts = [_render_header(spec)]
    if spec.features.show_loyalty_banner:
        body_parts.append('<div class="loyalty-banner">Join our rewards program and earn points on every visit.</div>')
    body_parts.append("<main>")
    for section in spec.sections:
        body_parts.append(_render_section(section, spec))
    if spec.page_kind is PageKind.CONTACT and spec.features.show_inquiry_form:
        body_parts.append(_render_inquiry_form(content))
    body_parts.append("</main>")
    body_parts.append(_render_footer(spec))

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="generator" content="sitesmith">
  <title>{title}</title>
  <style>
{_css_variables_block(spec)}
  </style>
  {_STYLE_BLOCK}
</head>
<body class="archetype-{_esc(spec.archetype_id)} mode-{_esc(spec.theme.mode)}">
{chr(10).join(body_parts)}
</body>
</html>
"""


def guidance_css_variables(spec: PageSpecification) -> Dict[str, str]:
    """Research colour suggestions as ``--guidance-<group>-<n>`` properties."""
    return {
        f"--guidance-{_CSS_NAME_UNSAFE.sub('-', group.lower())}-{index}": colour
        for group, colours in spec.color_guidance.items()
        for index, colour in enumerate(colours, start=1)
    }


def _css_variables_block(spec: PageSpecification) -> str:
    variables = {**theme_css_variables(spec.theme), **guidance_css_variables(spec)}
    lines = [f"    {name}: {_css_value(value)};" for name, value in variables.items()]
    return "  :root {\n" + "\n".join(lines) + "\n  }"


def _render_header(spec: PageSpecification) -> str:
    content = spec.content
    links = ['<a href="index.html">Home</a>']
    for module in spec.features.modules:
        if module.type == "catalog":
            target = PageKind.MENU if module.name == "menu" else PageKind.SERVICES
            links.append(f'<a href="{page_filename(target)}">{_esc(module.label)}</a>')
    links.extend(['<a href="about.html">About</a>', '<a href="contact.html">Contact</a>'])

    actions = []
    if spec.features.show_order_button:
        actions.append('<a class="button button-primary" href="contact.html#order">Order Online</a>')
    if spec.features.show_booking_button:
        booking = next((module.name for module in spec.features.modules if module.type == "booking"), "")
        actions.append(f'<a class="button button-primary" href="contact.html#book">{_esc(booking_action(booking))}</a>')

    search = ""
    if spec.features.show_listings_search:
        search = (
            '<form class="listings-search" action="#listings" method="get">'
            '<input type="search" name="q" placeholder="Search listings" aria-label="Search listings">'
            "</form>"
        )
    return f"""<header class="site-header">
  <a class="brand" href="index.html">{_esc(content.business_name)}</a>
  <nav>{" ".join(links)}</nav>
  {search}{"".join(actions)}
</header>"""


def _component_attr(section: SectionSpec) -> str:
    return f' data-component="{_esc(section.component)}"' if section.component else ""


def _section_heading(section: SectionSpec, fallback: str = "") -> str:
    title = section.title or fallback
    return f"<h2>{_esc(title)}</h2>" if title else ""


def _render_hero(section: SectionSpec, spec: PageSpecification) -> str:
    content = spec.content
    image = ""
    if content.hero_image:
        image = f'<img class="hero-image" src="{_esc(content.hero_image)}" alt="{_esc(content.business_name)}">'
    secondary = ""
    if content.secondary_cta:
        secondary = f'<a class="button button-secondary" href="about.html">{_esc(content.secondary_cta)}</a>'
    return f"""<section class="hero hero-{_esc(section.layout)}" data-component="{_esc(spec.hero_component)}">
  {image}
  <div class="hero-copy">
    <h1>{_esc(content.headline)}</h1>
    <p class="subheadline">{_esc(content.subheadline)}</p>
    <a class="button button-primary" href="contact.html">{_esc(content.primary_cta)}</a>
    {secondary}
  </div>
</section>"""


def _render_page_header(section: SectionSpec, spec: PageSpecification) -> str:
    content = spec.content
    return f"""<section class="page-header">
  <h1>{_esc(content.headline)}</h1>
  <p class="subheadline">{_esc(content.subheadline)}</p>
</section>"""


def _render_items(section: SectionSpec, spec: PageSpecification) -> str:
    cards = []
    for item in spec.content.items:
        price = f'<span class="price">{_esc(item.price)}</span>' if item.price else ""
        description = f"<p>{_esc(item.description)}</p>" if item.description else ""
        cards.append(f'<article class="card"><h3>{_esc(item.name)}</h3>{price}{description}</article>')
    return f"""<section class="items {_esc(section.type)} layout-{_esc(section.layout)} menu-style-{_esc(spec.menu_style)}"{_component_attr(section)}>
  {_section_heading(section)}
  <div class="card-grid">{"".join(cards)}</div>
</section>"""


def _render_testimonials(section: SectionSpec, spec: PageSpecification) -> str:
    quotes = []
    for testimonial in spec.content.testimonials:
        stars = "★" * testimonial.stars
        quotes.append(
            f'<blockquote class="card"><span class="stars" aria-label="{testimonial.stars} stars">{stars}</span>'
            f"<p>{_esc(testimonial.text)}</p><cite>{_esc(testimonial.author)}</cite></blockquote>"
        )
    return f"""<section class="testimonials layout-{_esc(section.layout)}">
  {_section_heading(section, "What Our Customers Say")}
  <div class="card-grid">{"".join(quotes)}</div>
</section>"""


def _render_stats(section: SectionSpec, spec: PageSpecification) -> str:
    stats = "".join(
        f'<div class="stat"><strong>{_esc(stat.value)}</strong><span>{_esc(stat.label)}</span></div>'
        for stat in spec.content.stats
    )
    return f'<section class="stats {_esc(section.type)}">{_section_heading(section)}<div class="stat-row">{stats}</div></section>'


def _render_story(section: SectionSpec, spec: PageSpecification) -> str:
    paragraphs = "".join(f"<p>{_esc(paragraph)}</p>" for paragraph in spec.content.body)
    return f"""<section class="story {_esc(section.type)} layout-{_esc(section.layout)}"{_component_attr(section)}>
  {_section_heading(section)}
  {paragraphs}
</section>"""


def _render_cta(section: SectionSpec, spec: PageSpecification) -> str:
    content = spec.content
    return f"""<section class="cta layout-{_esc(section.layout)}">
  <h2>{_esc(section.title or content.cta_headline)}</h2>
  <p>{_esc(content.cta_subtext)}</p>
  <a class="button button-primary" href="contact.html">{_esc(content.primary_cta)}</a>
</section>"""


def _render_contact(section: SectionSpec, spec: PageSpecification) -> str:
    contact = spec.content.contact
    rows = []
    if contact.address:
        rows.append(f'<p class="address">{_esc(contact.address)}</p>')
    if contact.phone:
        rows.append(f'<p class="phone"><a href="tel:{_esc(contact.phone)}">{_esc(contact.phone)}</a></p>')
    if contact.email:
        rows.append(f'<p class="email"><a href="mailto:{_esc(contact.email)}">{_esc(contact.email)}</a></p>')
    return f"""<section class="contact {_esc(section.type)} layout-{_esc(section.layout)}">
  {_section_heading(section, "Visit Us")}
  {"".join(rows)}
</section>"""


def _render_gallery(section: SectionSpec, spec: PageSpecification) -> str:
    images = "".join(
        f'<img src="{_esc(url)}" alt="{_esc(spec.content.business_name)} photo {index + 1}" loading="lazy">'
        for index, url in enumerate(spec.images)
    )
    return f'<section class="gallery layout-{_esc(section.layout)}">{_section_heading(section)}<div class="gallery-grid">{images}</div></section>'


def _render_generic(section: SectionSpec, spec: PageSpecification) -> str:
    return f"""<section class="{_esc(section.type)} layout-{_esc(section.layout)}"{_component_attr(section)}>
  {_section_heading(section)}
  <p>{_esc(spec.content.tagline)}</p>
</section>"""


def _render_inquiry_form(content: ResolvedContent) -> str:
    return f"""<section class="inquiry-form" id="order">
  <h2>Send an Inquiry</h2>
  <form method="post" action="#">
    <label>Name <input type="text" name="name" required></label>
    <label>Email <input type="email" name="email" required></label>
    <label>Message <textarea name="message" rows="4"></textarea></label>
    <button class="button button-primary" type="submit">{_esc(content.primary_cta)}</button>
  </form>
</section>"""


# First matching prefix wins.
_SECTION_RENDERERS: Tuple[Tuple[Tuple[str, ...], Callable[[SectionSpec, PageSpecification], str]], ...] = (
    (("hero",), _render_hero),
    (("page-header",), _render_page_header),
    (("reviews", "testimonials"), _render_testimonials),
    (("stats", "trust-strip", "trust-badges", "credentials"), _render_stats),
    (("cta",), _render_cta),
    (("contact", "location", "visit-us", "map", "service-area"), _render_contact),
    (("gallery", "project-gallery", "instagram"), _render_gallery),
    (("story", "about", "brand-statement", "philosophy", "origin", "craftsmanship", "owner", "heritage",
      "community", "values", "why-choose-us"), _render_story),
    (("featured", "signature", "specials", "product", "menu", "services", "features", "practice", "programs",
      "class", "categories", "pricing", "membership"), _render_items),
)


def _render_section(section: SectionSpec, spec: PageSpecification) -> str:
    for prefixes, renderer in _SECTION_RENDERERS:
        if section.type.startswith(prefixes):
            return renderer(section, spec)
    return _render_generic(section, spec)


def _render_footer(spec: PageSpecification) -> str:
    contact = spec.content.contact
    since = f" · Since {_esc(contact.year_founded)}" if contact.year_founded else ""
    return f"""<footer class="site-footer">
  <p>{_esc(spec.content.business_name)}{since}</p>
  <p>{_esc(spec.content.tagline)}</p>
</footer>"""


_STYLE_BLOCK = """<style>
body { font-family: var(--font-body); background: var(--color-background); color: var(--color-text); margin: 0; line-height: 1.6; }
h1, h2, h3 { font-family: var(--font-heading); font-weight: var(--heading-weight); text-transform: var(--heading-transform); letter-spacing: var(--letter-spacing); }
main > section { padding: var(--section-padding); }
main > section:nth-child(even) { background: var(--color-background-alt); }
.site-header { display: flex; align-items: center; gap: var(--gap); padding: 16px 24px; border-bottom: 1px solid var(--color-border-color); }
.site-header nav { display: flex; gap: 16px; flex: 1; }
.site-header a { color: var(--color-text); text-decoration: none; }
.brand { font-family: var(--font-heading); font-weight: var(--heading-weight); color: var(--color-primary) !important; }
.loyalty-banner { background: var(--color-accent); color: var(--color-secondary); text-align: center; padding: 8px; font-size: 0.9em; }
.button { display: inline-block; padding: var(--button-padding); border-radius: var(--border-radius); text-decoration: none; font-weight: 600; }
.button-primary { background: var(--color-primary); color: #ffffff; }
.button-secondary { border: 2px solid var(--color-primary); color: var(--color-primary); margin-left: 12px; }
.hero { position: relative; min-height: 60vh; display: flex; align-items: center; }
.hero-image { position: absolute; inset: 0; width: 100%; height: 100%; object-fit: cover; filter: var(--image-filter); z-index: -1; }
.hero-copy { max-width: 640px; }
.subheadline { color: var(--color-text-muted); font-size: 1.2em; }
.card-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: var(--gap); }
.card { background: var(--color-card-bg); border: 1px solid var(--color-border-color); border-radius: var(--border-radius); padding: var(--card-padding); margin: 0; }
.price { color: var(--color-primary); font-weight: 700; }
.stars { color: var(--color-accent); }
.stat-row { display: flex; justify-content: space-around; flex-wrap: wrap; gap: var(--gap); text-align: center; }
.stat strong { display: block; font-size: 2em; color: var(--color-primary); }
.gallery-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(240px, 1fr)); gap: 8px; }
.gallery-grid img { width: 100%; height: 240px; object-fit: cover; filter: var(--image-filter); border-radius: var(--border-radius); }
.cta { text-align: center; background: var(--color-primary) !important; color: #ffffff; }
.cta .button-primary { background: var(--color-accent); color: var(--color-secondary); }
.inquiry-form form { display: grid; gap: 12px; max-width: 480px; }
.site-footer { padding: 32px 24px; text-align: center; color: var(--color-text-muted); border-top: 1px solid var(--color-border-color); }
@media (max-width: 600px) { .site-header { flex-wrap: wrap; } .hero { min-height: 40vh; } }
</style>"""
