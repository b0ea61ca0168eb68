import json

import pytest

from sitesmith import __version__, cli
from sitesmith.config import ConfigurationError, settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SITESMITH_DEFAULT_PAGES", raising=False)
    monkeypatch.delenv("SITESMITH_OUTPUT_DIR", raising=False)
    settings.get_settings.cache_clear()
    yield
    settings.get_settings.cache_clear()


def test_version_flag(runner) -> None:
    result = runner.invoke(cli.app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_generate_writes_requested_pages(runner, sample_request) -> None:
    output_dir = sample_request["output_dir"]
    result = runner.invoke(cli.app, ["generate", str(sample_request["path"]), "--output", str(output_dir)])

    assert result.exit_code == 0, result.output
    assert sorted(path.name for path in output_dir.glob("*.html")) == ["contact.html", "index.html", "menu.html"]
    assert "Site Request Summary" in result.output
    assert "Site generated." in result.output

    home = (output_dir / "index.html").read_text(encoding="utf-8")
    assert "Baked Before Sunrise" in home
    menu = (output_dir / "menu.html").read_text(encoding="utf-8")
    assert "Country Loaf" in menu
    assert "Kouign-Amann" in menu
    assert "$5.25" in menu


def test_generate_page_option_overrides_request_pages(runner, sample_request) -> None:
    output_dir = sample_request["output_dir"]
    result = runner.invoke(
        cli.app,
        ["generate", str(sample_request["path"]), "-o", str(output_dir), "--page", "about"],
    )
    assert result.exit_code == 0, result.output
    assert [path.name for path in output_dir.glob("*.html")] == ["about.html"]


def test_generate_defaults_output_to_settings_dir(runner, sample_request, tmp_path) -> None:
    result = runner.invoke(cli.app, ["generate", str(sample_request["path"])])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "site" / "rise-shine-bakery" / "index.html").exists()


def test_generate_dry_run(runner, sample_request) -> None:
    output_dir = sample_request["output_dir"]
    result = runner.invoke(cli.app, ["generate", str(sample_request["path"]), "-o", str(output_dir), "--dry-run"])
    assert result.exit_code == 0, result.output
    assert "Dry run complete." in result.output
    assert not output_dir.exists()


def test_generate_rejects_unknown_page(runner, sample_request) -> None:
    result = runner.invoke(cli.app, ["generate", str(sample_request["path"]), "--page", "blog"])
    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_bad_default_pages_setting_is_reported(runner, sample_request, monkeypatch) -> None:
    monkeypatch.setenv("SITESMITH_DEFAULT_PAGES", "home,blog")
    settings.get_settings.cache_clear()
    result = runner.invoke(cli.app, ["generate", str(sample_request["path"]), "--dry-run"])
    assert result.exit_code == 1
    assert "Configuration error" in result.output
    assert "blog" in result.output
    assert not isinstance(result.exception, ConfigurationError)


def test_invalid_config_exits_with_error(runner, tmp_path) -> None:
    bad = tmp_path / "bad.toml"
    bad.write_text("[options]\nvariant = 'A'\n", encoding="utf-8")
    result = runner.invoke(cli.app, ["generate", str(bad)])
    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_missing_config_is_a_usage_error(runner, tmp_path) -> None:
    result = runner.invoke(cli.app, ["generate", str(tmp_path / "missing.toml")])
    assert result.exit_code == 2


def test_classify_command(runner, sample_request) -> None:
    result = runner.invoke(cli.app, ["classify", str(sample_request["path"])])
    assert result.exit_code == 0, result.output
    assert "bakery" in result.output
    assert "food-service" in result.output
    assert "local" in result.output


@pytest.mark.parametrize(
    "options, expected",
    [
        ("", "archetype default"),
        ("[options]\nvariant = 'b'\n", "B"),
        ("[options]\ngoal = 'branding'\n", "C"),
    ],
)
def test_classify_reports_the_variant_used_for_composition(runner, tmp_path, options: str, expected: str) -> None:
    path = tmp_path / "pizza.toml"
    path.write_text("[business]\nname = 'Bella Napoli'\nindustry = 'pizza'\n" + options, encoding="utf-8")

    classified = runner.invoke(cli.app, ["classify", str(path)])
    assert classified.exit_code == 0, classified.output
    variant_row = next(line for line in classified.output.splitlines() if "Layout variant" in line)
    assert expected in variant_row

    composed = runner.invoke(cli.app, ["spec", str(path)])
    assert json.loads(composed.stdout)["variant"] == (None if expected == "archetype default" else expected)


def test_classify_without_research_reports_archetype_default(runner, tmp_path) -> None:
    path = tmp_path / "roofing.toml"
    path.write_text(
        "[business]\nname = 'Top Roofs'\nindustry = 'roofing'\n[options]\nvariant = 'A'\n",
        encoding="utf-8",
    )
    result = runner.invoke(cli.app, ["classify", str(path)])
    assert result.exit_code == 0, result.output
    assert "archetype default" in result.output


def test_spec_command_prints_json(runner, sample_request) -> None:
    result = runner.invoke(cli.app, ["spec", str(sample_request["path"]), "--page", "menu"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["page_kind"] == "menu"
    assert payload["archetype_id"] == "local"
    assert [item["name"] for item in payload["content"]["items"]][:2] == ["Country Loaf", "Kouign-Amann"]


def test_industries_command(runner) -> None:
    result = runner.invoke(cli.app, ["industries"])
    assert result.exit_code == 0
    assert "pizza-restaurant" in result.output


def test_archetypes_command(runner) -> None:
    result = runner.invoke(cli.app, ["archetypes", "--family", "fitness"])
    assert result.exit_code == 0
    assert "zen-peaceful" in result.output
    assert "ecommerce" not in result.output

    missing = runner.invoke(cli.app, ["archetypes", "-f", "astrology"])
    assert missing.exit_code == 1
