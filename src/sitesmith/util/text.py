"""
Text-related helpers.
"""

from __future__ import annotations

import hashlib
import re
from typing import Any, Optional

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")
_SEPARATORS = re.compile(r"[\s_]+")
_DISALLOWED = re.compile(r"[^a-z0-9-]")
_REPEATED_HYPHENS = re.compile(r"-{2,}")


def slugify(value: str) -> str:
    """
    Generate a filesystem-friendly slug.

    Falls back to a short digest so distinct empty-looking names never share a slug.
    """
    raw = (value or "").strip().lower()
    slug = _SLUG_PATTERN.sub("-", raw).strip("-")
    if slug:
        return slug
    digest = hashlib.sha1(raw.encode("utf-8")).hexdigest()[:8]
    return f"site-{digest}"


def normalize_key(value: Optional[str]) -> str:
    """
    Normalise free text into a registry-style key ("Coffee Shop!" -> "coffee-shop").
    """
    if not value:
        return ""
    lowered = _SEPARATORS.sub("-", str(value).strip().lower())
    cleaned = _DISALLOWED.sub("", lowered)
    return _REPEATED_HYPHENS.sub("-", cleaned).strip("-")


def first_present(*candidates: Any, default: Any = None) -> Any:
    """Return the first candidate that is not None and not a blank string."""
    for candidate in candidates:
        if candidate is None:
            continue
        if isinstance(candidate, str) and not candidate.strip():
            continue
        return candidate
    return default
