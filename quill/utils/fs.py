#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for source discovery and filename dates.

Functions:
    find_markdown_files: Discover markdown sources under a directory
    date_from_filename: Extract a leading YYYY-MM-DD date from a filename
    is_within: Check that a path stays inside a directory

Usage:
    from quill.utils.fs import find_markdown_files, date_from_filename

    files = find_markdown_files(Path("posts"))
    post_date = date_from_filename(Path("2020-07-24-combine.md"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

# --- Local imports ---
from quill.core.paths import MARKDOWN_SUFFIXES

DATE_PREFIX_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:-|$)")


def find_markdown_files(
    directory: Path, suffixes: Iterable[str] = MARKDOWN_SUFFIXES
) -> List[Path]:
    """
    Find all markdown files under directory, sorted by path.

    Files and directories whose name starts with ``.`` or ``_`` are
    skipped (hidden files, output directories such as ``_site``).
    """
    if not directory.is_dir():
        return []

    wanted = tuple(suffixes)
    found = []
    for path in directory.rglob("*"):
        rel_parts = path.relative_to(directory).parts
        if any(part.startswith((".", "_")) for part in rel_parts):
            continue
        if path.is_file() and path.suffix.lower() in wanted:
            found.append(path)
    return sorted(found)


def date_from_filename(path: Path) -> Optional[date]:
    """
    Parse a leading ``YYYY-MM-DD`` date from a filename stem.

    Args:
        path: Path or filename, e.g. ``2020-07-24-combine.md``

    Returns:
        The date, or None if the stem has no valid date prefix

    Examples:
        >>> date_from_filename(Path("2020-07-24-combine.md"))
        datetime.date(2020, 7, 24)
        >>> date_from_filename(Path("about.md")) is None
        True
    """
    match = DATE_PREFIX_RE.match(path.stem)
    if not match:
        return None
    year, month, day = map(int, match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def is_within(path: Path, directory: Path) -> bool:
    """Return True if ``path`` resolves to a location inside ``directory``."""
    try:
        path.resolve().relative_to(directory.resolve())
    except ValueError:
        return False
    return True
