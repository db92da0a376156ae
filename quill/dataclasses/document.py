#!/usr/bin/env python3
"""
document.py
-----------
Dataclass representing a post or page with YAML front matter.

A Document is read once per build and never mutated. Its metadata is a
flat mapping of strings; derived values (title, date, category) are
exposed as read-only properties so layouts and listings agree on them.

Usage:
    from quill.dataclasses import Document

    doc = Document.from_file(Path("posts/2020-07-24-combine.md"))
    doc.identifier  # "2020-07-24-combine"
    doc.title       # metadata["title"], or the identifier
    doc.date        # datetime.date(2020, 7, 24)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import re
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

# --- Local imports ---
from quill.core.exceptions import FrontmatterParseError, NotFoundError
from quill.core.validators import DataValidator
from quill.utils.fs import date_from_filename
from quill.utils.md import parse_frontmatter, split_frontmatter

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT = "post"
EXCERPT_LENGTH = 280

_MARKUP_RE = re.compile(r"!\[[^\]]*\]\([^)]*\)|\]\([^)]*\)|[*_`>#\[\]]")


@dataclass(frozen=True)
class Document:
    """
    A source document: identifier, string metadata, and raw body.

    Attributes:
        identifier: Unique id within the document set (the file stem)
        metadata: Front matter keys mapped to string values
        body: Raw markup after the front matter
        source_path: File the document was read from, if any
    """

    identifier: str
    metadata: Dict[str, str] = field(default_factory=dict)
    body: str = ""
    source_path: Optional[Path] = None

    # ---- Construction Methods ----
    @classmethod
    def from_file(cls, file_path: Path) -> Document:
        """
        Parse a Markdown file with optional YAML front matter.

        Args:
            file_path: Path to the source file

        Returns:
            Parsed Document whose identifier is the file stem

        Raises:
            NotFoundError: If the file does not exist
            FrontmatterParseError: If the file is not UTF-8 or the front
                matter is malformed
        """
        if not file_path.is_file():
            raise NotFoundError(f"Document file not found: {file_path}")

        logger.debug(f"Reading document: {file_path}")
        try:
            content = file_path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise FrontmatterParseError(
                f"Cannot decode {file_path} as UTF-8: {e.reason}"
            ) from e
        return cls.from_markdown_text(content, file_path.stem, file_path)

    @classmethod
    def from_markdown_text(
        cls,
        content: str,
        identifier: str,
        source_path: Optional[Path] = None,
    ) -> Document:
        """
        Parse Markdown text with optional YAML front matter.

        Args:
            content: Full file content
            identifier: Identifier to assign
            source_path: Optional source file path

        Returns:
            Parsed Document

        Raises:
            FrontmatterParseError: If the front matter is malformed
        """
        frontmatter_text, body_lines = split_frontmatter(content)
        raw = parse_frontmatter(frontmatter_text)
        metadata = DataValidator.normalize_metadata(raw)

        body = "\n".join(body_lines)
        if body:
            body += "\n"

        return cls(
            identifier=identifier,
            metadata=metadata,
            body=body,
            source_path=source_path,
        )

    # ---- Derived Values ----
    @property
    def title(self) -> str:
        """Metadata title, falling back to the identifier."""
        return self.metadata.get("title") or self.identifier

    @property
    def date(self) -> Optional[date]:
        """Metadata date, else a ``YYYY-MM-DD`` filename prefix, else None."""
        parsed = DataValidator.normalize_date(self.metadata.get("date"))
        if parsed is not None:
            return parsed
        return date_from_filename(self.source_path or Path(self.identifier))

    @property
    def layout(self) -> str:
        return self.metadata.get("layout") or DEFAULT_LAYOUT

    @property
    def draft(self) -> bool:
        return DataValidator.normalize_bool(self.metadata.get("draft", "false"))

    @property
    def category(self) -> Optional[str]:
        """First category, if any."""
        categories = self.categories
        return categories[0] if categories else None

    @property
    def categories(self) -> List[str]:
        """
        Categories from ``category`` and ``categories``, de-duplicated.

        Returns:
            Category names in front matter order
        """
        names: List[str] = []
        for key in ("category", "categories"):
            for name in self.metadata.get(key, "").split(","):
                name = name.strip()
                if name and name not in names:
                    names.append(name)
        return names

    @property
    def excerpt(self) -> str:
        """
        Short plain-text summary for listings.

        Uses ``excerpt`` or ``description`` metadata when set, otherwise the
        first paragraph of the body that is not a heading.
        """
        for key in ("excerpt", "description"):
            if self.metadata.get(key):
                return self.metadata[key]

        for paragraph in re.split(r"\n\s*\n", self.body):
            text = paragraph.strip()
            if not text or text.startswith(("#", "```", "<", "|")):
                continue
            text = _MARKUP_RE.sub("", " ".join(text.split()))
            if len(text) > EXCERPT_LENGTH:
                text = text[:EXCERPT_LENGTH].rsplit(" ", 1)[0] + "…"
            return text
        return ""

    def sort_key(self) -> tuple:
        """Newest first, undated last, then by identifier."""
        d = self.date
        return (d is None, -(d.toordinal()) if d else 0, self.identifier)

    def __str__(self) -> str:
        return f"Document({self.identifier})"
