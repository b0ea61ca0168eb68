"""
Shared utility helpers for filesystem access and string handling.
"""

from .filesystem import ensure_directory, write_text_file
from .text import first_present, normalize_key, slugify

__all__ = [
    "ensure_directory",
    "write_text_file",
    "first_present",
    "normalize_key",
    "slugify",
]
