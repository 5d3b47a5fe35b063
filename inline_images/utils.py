"""Utility helpers for name generation and path handling."""

from __future__ import annotations

import os
import re
import uuid
from typing import Union

SLUG_PATTERN = re.compile(r"[^a-z0-9]+")
SEPARATOR_RUN = re.compile(r"/{2,}")


def slugify(value: str, fallback: str = "image") -> str:
    """Generate a filesystem-friendly slug using ASCII characters only."""
    normalized = value.encode("ascii", "ignore").decode("ascii")
    normalized = normalized.lower()
    normalized = SLUG_PATTERN.sub("-", normalized).strip("-")
    return normalized or fallback


def unique_name() -> str:
    """Return a name that will not collide with any other within the process."""
    return uuid.uuid4().hex


def ensure_trailing_slash(path: Union[str, "os.PathLike[str]"]) -> str:
    """Return ``path`` ending in exactly one ``/``."""
    text = os.fspath(path)
    return text.rstrip("/") + "/"


def normalize_dir(path: Union[str, "os.PathLike[str]"]) -> str:
    """Collapse doubled separators and append a trailing ``/``."""
    return SEPARATOR_RUN.sub("/", os.fspath(path) + "/")
