#!/usr/bin/env python3
"""
md.py
-------------------
Markdown-specific utilities for Quill.

Splits source files into their YAML front matter and body and parses
the front matter. Type conversion of metadata values is delegated to
DataValidator.
"""
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict, List

# --- Third party imports ---
import yaml

# --- Local imports ---
from quill.core.exceptions import FrontmatterParseError


# ----- YAML Front Matter Parsing -----
def split_frontmatter(content: str) -> tuple[str, List[str]]:
    """
    Split markdown content into YAML front matter and body.

    Expected format:
        ---
        yaml: content
        ---

        Body content here...

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (frontmatter_text, body_lines)
        - frontmatter_text: YAML content as string (empty if none)
        - body_lines: List of body content lines

    Examples:
        >>> content = "---\\ntitle: X\\n---\\n\\nBody text"
        >>> fm, body = split_frontmatter(content)
        >>> fm
        'title: X'
        >>> body
        ['Body text']
    """
    # Byte order mark
    lines = content.removeprefix("\ufeff").splitlines()

    if not lines or lines[0].strip() != "---":
        return "", lines

    frontmatter_end = None
    for i, line in enumerate(lines[1:], 1):
        if line.strip() in ("---", "..."):
            frontmatter_end = i
            break

    if frontmatter_end is None:
        return "", lines

    frontmatter_lines = lines[1:frontmatter_end]
    body_lines = lines[frontmatter_end + 1 :]

    while body_lines and body_lines[0].strip() == "":
        body_lines.pop(0)

    return "\n".join(frontmatter_lines), body_lines


def parse_frontmatter(frontmatter_text: str) -> Dict[str, Any]:
    """
    Parse a YAML front matter block into a mapping.

    Args:
        frontmatter_text: YAML text between the ``---`` fences

    Returns:
        Parsed mapping (empty for an empty block)

    Raises:
        FrontmatterParseError: If YAML is malformed or not a mapping
    """
    if not frontmatter_text.strip():
        return {}

    try:
        metadata: Any = yaml.safe_load(frontmatter_text)
    except yaml.YAMLError as e:
        raise FrontmatterParseError(f"Invalid YAML front matter: {e}") from e

    if metadata is None:
        return {}
    if not isinstance(metadata, dict):
        raise FrontmatterParseError("YAML front matter must be a mapping")

    return metadata
