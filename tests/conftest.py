from pathlib import Path
import json
import textwrap

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def sample_request(tmp_path: Path) -> dict:
    """
    Write a bakery site request plus its AI content file and return metadata.
    """
    ai_path = tmp_path / "ai.json"
    ai_path.write_text(
        json.dumps(
            {
                "hero": {"headline": "Baked Before Sunrise", "subheadline": "Small-batch breads and pastries"},
                "menu": {
                    "categories": [
                        {"name": "Breads", "items": [{"name": "Country Loaf", "price": 7, "description": "Crusty"}]},
                        {"name": "Pastries", "items": [{"name": "Kouign-Amann", "price": "5.25"}]},
                    ]
                },
                "testimonials": [{"text": "Worth the early alarm.", "author": "Priya N.", "stars": 5}],
                "imageryGuidance": {"style": "natural-light"},
            }
        ),
        encoding="utf-8",
    )
    output_dir = tmp_path / "site"
    config_text = textwrap.dedent(
        """
        ai_content = "ai.json"

        [business]
        name = "Rise & Shine Bakery"
        tagline = "Fresh bread every morning"
        industry = "Bakery"
        address = "12 Main Street"
        phone = "555-0100"
        email = "hello@riseandshine.test"
        year_founded = 2004
        description = "A neighborhood bakery run by the same family for two decades."

        [options]
        pages = ["home", "menu", "contact"]
        """
    ).strip()
    path = tmp_path / "site.toml"
    path.write_text(config_text + "\n", encoding="utf-8")
    return {"path": path, "output_dir": output_dir, "ai_path": ai_path}
