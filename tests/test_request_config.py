import json
from pathlib import Path

import pytest

from sitesmith.config import BusinessProfile, ConfigurationError, GenerationOptions, PageKind, load_request
from sitesmith.pipeline import build_site


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "site.toml"
    path.write_text(body, encoding="utf-8")
    return path


def test_load_request_reads_sample(sample_request) -> None:
    request = load_request(sample_request["path"])
    assert request.business.name == "Rise & Shine Bakery"
    assert request.business.year_founded == "2004"
    assert request.options.pages == [PageKind.HOME, PageKind.MENU, PageKind.CONTACT]
    assert request.options.ai_content["hero"]["headline"] == "Baked Before Sunrise"
    assert request.source == sample_request["path"].resolve()


def test_request_hash_is_stable_and_ignores_source(sample_request, tmp_path) -> None:
    first = load_request(sample_request["path"])
    copy_dir = tmp_path / "copy"
    copy_dir.mkdir()
    (copy_dir / "ai.json").write_text(sample_request["ai_path"].read_text(encoding="utf-8"), encoding="utf-8")
    copy = copy_dir / "site.toml"
    copy.write_text(sample_request["path"].read_text(encoding="utf-8"), encoding="utf-8")
    second = load_request(copy)
    assert first.hash == second.hash
    assert len(first.hash) == 64


def test_inline_ai_content_and_theme_table(tmp_path) -> None:
    path = _write(
        tmp_path,
        """
[business]
name = "Pulse Fitness"
industry = "gym"

[options]
archetype = "energetic-bold"
variant = "b"
pages = "home, services"

[theme]
is_dark = true
colors = { primaryColor = "#ff5500" }

[ai_content.hero]
headline = "Lift Heavy"
""",
    )
    request = load_request(path)
    options = request.options
    assert options.archetype_override == "energetic-bold"
    assert options.variant == "B"
    assert options.pages == [PageKind.HOME, PageKind.SERVICES]
    assert options.theme.is_dark
    assert options.theme.colors == {"primary_color": "#ff5500"}
    assert options.ai_content == {"hero": {"headline": "Lift Heavy"}}


@pytest.mark.parametrize(
    "body, message",
    [
        ("name = 'x'", "[business]"),
        ("[business]\nname = 'x'\n[extras]\nfoo = 1", "Unexpected top-level keys"),
        ("[business]\nname = 'x'\n[options]\npages = ['home', 'blog']", "Unknown page kind"),
        ("[business]\nname = 'x'\n[options]\nvariant = 'Q'", "variant"),
        ("[business]\nnickname = 'x'", "nickname"),
        ("[business\nname = 'x'", "Invalid TOML"),
        ("[business]\nname = 'x'\nai_content = 3", "ai_content"),
    ],
)
def test_invalid_requests_raise_configuration_error(tmp_path, body: str, message: str) -> None:
    path = _write(tmp_path, body)
    with pytest.raises(ConfigurationError) as exc:
        load_request(path)
    assert message in str(exc.value)


def test_missing_request_file(tmp_path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_request(tmp_path / "nope.toml")


def test_ai_content_file_errors(tmp_path) -> None:
    path = _write(tmp_path, "ai_content = 'ai.json'\n[business]\nname = 'x'\n")
    with pytest.raises(ConfigurationError, match="Unable to read"):
        load_request(path)

    (tmp_path / "ai.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Invalid JSON"):
        load_request(path)


def test_malformed_ai_content_values_are_not_a_configuration_error(tmp_path) -> None:
    (tmp_path / "ai.json").write_text(json.dumps({"hero": 12, "menu": "lots"}), encoding="utf-8")
    path = _write(tmp_path, "ai_content = 'ai.json'\n[business]\nname = 'x'\n")
    assert load_request(path).options.ai_content == {"hero": 12, "menu": "lots"}


def test_non_object_ai_file_is_treated_as_absent(tmp_path) -> None:
    (tmp_path / "ai.json").write_text(json.dumps(["hero", "menu"]), encoding="utf-8")
    path = _write(tmp_path, "ai_content = 'ai.json'\n[business]\nname = 'x'\n")
    assert load_request(path).options.ai_content is None


@pytest.mark.parametrize("raw", [["hero", "menu"], "headline", 42])
def test_generation_options_drop_non_object_ai_content(raw) -> None:
    options = GenerationOptions(ai_content=raw)
    assert options.ai_content is None
    home = build_site(BusinessProfile(name="Crumb", industry="bakery"), options, pages=["home"]).page("home")
    assert home.content.headline
