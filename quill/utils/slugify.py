#!/usr/bin/env python3
"""
slugify.py
----------
String slugification for output paths and category URLs.

Usage:
    from quill.utils.slugify import slugify

    slugify("Combine & SwiftUI")  # "combine-and-swiftui"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
import unicodedata


def slugify(text: str, max_length: int = 200) -> str:
    """
    Convert text to a URL- and filesystem-safe slug.

    Lowercases, strips accents and apostrophes, turns ``&`` into ``and``,
    and collapses everything else that is not alphanumeric into single
    hyphens.

    Args:
        text: Input text to slugify
        max_length: Maximum slug length (default 200)

    Returns:
        Slugified string

    Examples:
        >>> slugify("Reactive Programming")
        'reactive-programming'
        >>> slugify("Combine's Publishers (Part 1)")
        'combines-publishers-part-1'
        >>> slugify("Café")
        'cafe'
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower()
    text = text.replace("'", "")
    text = text.replace("&", " and ")
    text = re.sub(r"[^a-z0-9]+", "-", text)
    text = text.strip("-")

    if len(text) > max_length:
        text = text[:max_length].rstrip("-")

    return text
