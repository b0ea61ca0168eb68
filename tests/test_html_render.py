import logging

import pytest

from sitesmith.config import BusinessProfile, ConfigurationError, GenerationOptions, PageKind, ThemeOverrides
from sitesmith.pipeline import build_site, generate_site
from sitesmith.pipeline import executor
from sitesmith.render import guidance_css_variables, page_filename, render_page, theme_css_variables


@pytest.fixture()
def bakery() -> BusinessProfile:
    return BusinessProfile(
        name="Rise & Shine <Bakery>",
        industry="bakery",
        address="12 Main Street",
        phone="555-0100",
        year_founded="2004",
    )


def test_page_filenames() -> None:
    assert page_filename(PageKind.HOME) == "index.html"
    assert page_filename(PageKind.MENU) == "menu.html"


def test_render_escapes_business_text(bakery) -> None:
    ai = {"hero": {"headline": "<script>alert('x')</script>"}}
    home = build_site(bakery, GenerationOptions(ai_content=ai), pages=["home"]).page("home")
    document = render_page(home)
    assert "<script>" not in document
    assert "&lt;script&gt;" in document
    assert "Rise &amp; Shine &lt;Bakery&gt;" in document


def test_render_emits_theme_variables(bakery) -> None:
    home = build_site(bakery, GenerationOptions(theme=ThemeOverrides(is_dark=True)), pages=["home"]).page("home")
    variables = theme_css_variables(home.theme)
    assert variables["--color-background"] == "#0f172a"
    assert variables["--color-primary"] == home.theme.palette.primary
    document = render_page(home)
    assert "--color-background: #0f172a;" in document
    assert 'class="archetype-local mode-dark"' in document


def test_render_emits_research_colour_guidance() -> None:
    home = build_site(BusinessProfile(name="Bella Napoli", industry="pizza"), pages=["home"]).page("home")
    assert guidance_css_variables(home)["--guidance-warm-1"] == "#DC2626"
    assert "--guidance-accent-2: #FBBF24;" in render_page(home)


def test_css_values_cannot_break_out_of_style(bakery) -> None:
    overrides = ThemeOverrides(colors={"primary": "red;}</style><script>x()</script>"})
    home = build_site(bakery, GenerationOptions(theme=overrides), pages=["home"]).page("home")
    document = render_page(home)
    assert "</style><script>" not in document


def test_render_features_and_sections(bakery) -> None:
    site = build_site(bakery, pages=["home", "contact"])
    home = render_page(site.page("home"))
    assert "Order Online" in home
    assert 'href="menu.html">Menu</a>' in home
    assert "loyalty-banner" in home
    assert 'data-component="ImageOverlayHero"' in home
    assert "Today&#x27;s Specials" in home
    assert "Since 2004" in home

    contact = render_page(site.page("contact"))
    assert "inquiry-form" in contact
    assert "tel:555-0100" in contact


@pytest.mark.parametrize(
    "industry, button",
    [
        ("steakhouse", "Reserve a Table"),
        ("dental", "Book an Appointment"),
        ("saas", "Request a Demo"),
    ],
)
def test_booking_button_uses_an_action_phrase(industry: str, button: str) -> None:
    home = build_site(BusinessProfile(name="Acme", industry=industry), pages=["home"]).page("home")
    document = render_page(home)
    assert f'href="contact.html#book">{button}</a>' in document
    assert ">Book Reservations<" not in document
    assert ">Book Demo Requests<" not in document


def test_generate_site_writes_pages(bakery, tmp_path) -> None:
    report = generate_site(bakery, pages=["home", "menu", "contact"], output_dir=tmp_path / "out")
    assert report.ok
    assert sorted(path.name for path in (tmp_path / "out").glob("*.html")) == ["contact.html", "index.html", "menu.html"]
    assert report.written["home"] == (tmp_path / "out" / "index.html").resolve()
    assert [row[1] for row in report.summary_rows()] == ["written", "written", "written"]


def test_dry_run_writes_nothing(bakery, tmp_path) -> None:
    report = generate_site(bakery, pages=["home"], output_dir=tmp_path / "out", dry_run=True)
    assert report.documents["home"].startswith("<!DOCTYPE html>")
    assert not report.written
    assert not (tmp_path / "out").exists()
    assert report.summary_rows()[0][1] == "rendered"


def test_one_failing_page_does_not_stop_the_others(bakery, tmp_path, monkeypatch, caplog) -> None:
    original = executor.render_page

    def flaky_render(spec):
        if spec.page_kind is PageKind.MENU:
            raise ValueError("menu exploded")
        return original(spec)

    monkeypatch.setattr(executor, "render_page", flaky_render)
    with caplog.at_level(logging.ERROR):
        report = generate_site(bakery, pages=["home", "menu", "contact"], output_dir=tmp_path)

    assert not report.ok
    assert report.failures == {"menu": "menu exploded"}
    assert set(report.written) == {"home", "contact"}
    assert not (tmp_path / "menu.html").exists()
    assert "Failed to generate menu page" in caplog.text
    assert ("menu", "failed", "menu exploded") in report.summary_rows()


def test_configuration_errors_abort_generation(bakery, tmp_path) -> None:
    with pytest.raises(ConfigurationError):
        generate_site(bakery, GenerationOptions(archetype="brutalist"), output_dir=tmp_path)
    with pytest.raises(ConfigurationError):
        generate_site(bakery, pages=["home", "blog"], output_dir=tmp_path)
    assert not any(tmp_path.iterdir())
