import os
from pathlib import Path

import pytest

from sitesmith.config import ConfigurationError, PageKind, settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    settings.get_settings.cache_clear()
    yield
    settings.get_settings.cache_clear()


def test_project_dotenv_overrides_environment(tmp_path, monkeypatch) -> None:
    project_dir = tmp_path / "project"
    project_env = project_dir / ".env"

    project_dir.mkdir()
    project_env.write_text("SITESMITH_OUTPUT_DIR=from-dotenv\n", encoding="utf-8")

    monkeypatch.chdir(project_dir)
    monkeypatch.setenv("SITESMITH_OUTPUT_DIR", "env-value")

    settings._load_dotenv()

    assert os.getenv("SITESMITH_OUTPUT_DIR") == "from-dotenv"
    assert settings.get_settings().output_dir == Path("from-dotenv")


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("SITESMITH_OUTPUT_DIR", raising=False)
    monkeypatch.delenv("SITESMITH_DEFAULT_PAGES", raising=False)
    loaded = settings.get_settings()
    assert loaded.output_dir == Path("site")
    assert loaded.default_pages == []


def test_default_pages_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SITESMITH_DEFAULT_PAGES", "home, contact")
    assert settings.get_settings().default_pages == [PageKind.HOME, PageKind.CONTACT]


def test_bad_default_page_is_a_configuration_error(monkeypatch) -> None:
    monkeypatch.setenv("SITESMITH_DEFAULT_PAGES", "home,blog")
    with pytest.raises(ConfigurationError):
        settings.get_settings()
