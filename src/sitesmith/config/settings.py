"""
Process-level settings loaded from the environment and an optional `.env` file.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .models import PageKind, parse_page_kind


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Defaults that apply to every generation run.

    Attributes:
        output_dir: Root directory for written sites.
        default_pages: Page kinds generated when a request names none.
    """
    output_dir: Path = Field(default=Path("site"), alias="SITESMITH_OUTPUT_DIR")
    default_pages: List[PageKind] = Field(default_factory=list, alias="SITESMITH_DEFAULT_PAGES")

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("default_pages", mode="before")
    @classmethod
    def _split_pages(cls, value):
        if isinstance(value, str):
            return [parse_page_kind(part) for part in value.split(",") if part.strip()]
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.
    """
    values = {
        field.alias: os.getenv(field.alias)
        for field in Settings.model_fields.values()
        if os.getenv(field.alias)
    }
    return Settings(**values)
