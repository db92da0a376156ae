"""
dataclasses package
-------------------
Dataclass definitions for site content and presentation.

- Document: a post or page parsed from Markdown with YAML front matter
- Theme / StyleRule / DisplayMode: the declarative light/dark theme
"""
from quill.dataclasses.document import Document
from quill.dataclasses.theme import DisplayMode, StyleRule, Theme

__all__ = ["Document", "DisplayMode", "StyleRule", "Theme"]
