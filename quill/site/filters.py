#!/usr/bin/env python3
"""
filters.py
----------
Custom Jinja2 filters for page layouts.

Filters:
    - date_long: "Friday, July 24, 2020"
    - date_iso: "2020-07-24"
    - reading_time: "3 min read"
    - pluralize: "1 post" / "4 posts"
    - slugify: URL-safe slug
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import math
import re
from datetime import date
from typing import Any, Optional

# --- Local imports ---
from quill.core.validators import DataValidator
from quill.utils.slugify import slugify

WORDS_PER_MINUTE = 200


def _as_date(value: Any) -> Optional[date]:
    return DataValidator.normalize_date(value)


def date_long(value: Any) -> str:
    """
    Format a date (or ISO string) as weekday, month, day, year.

    Returns:
        e.g. "Friday, July 24, 2020", or "" for non-dates
    """
    d = _as_date(value)
    if d is None:
        return ""
    return f"{d.strftime('%A, %B')} {d.day}, {d.year}"


def date_iso(value: Any) -> str:
    d = _as_date(value)
    return d.isoformat() if d else ""


def reading_time(text: str) -> str:
    """Estimated reading time of a markdown body, at least one minute."""
    words = len(re.findall(r"\w+", text or ""))
    minutes = max(1, math.ceil(words / WORDS_PER_MINUTE))
    return f"{minutes} min read"


def pluralize(count: int, singular: str, plural: Optional[str] = None) -> str:
    """
    Return singular or plural form based on count.

    Returns:
        Formatted string like "5 posts" or "1 post"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def register_filters(env) -> None:
    """
    Register all custom filters with a Jinja2 environment.

    Args:
        env: Jinja2 Environment instance
    """
    env.filters["date_long"] = date_long
    env.filters["date_iso"] = date_iso
    env.filters["reading_time"] = reading_time
    env.filters["pluralize"] = pluralize
    env.filters["slugify"] = slugify
