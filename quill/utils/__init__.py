"""
Utilities package for Quill.

- md: Front matter splitting and parsing
- fs: Source discovery and filename dates
- slugify: URL/filesystem-safe slugs

Import commonly-used utilities directly from this package:
    from quill.utils import split_frontmatter, slugify
"""

from .md import split_frontmatter, parse_frontmatter
from .fs import find_markdown_files, date_from_filename, is_within
from .slugify import slugify

__all__ = [
    "split_frontmatter",
    "parse_frontmatter",
    "find_markdown_files",
    "date_from_filename",
    "is_within",
    "slugify",
]
