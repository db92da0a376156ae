#!/usr/bin/env python3
"""
config.py
---------
Site configuration loaded from ``quill.yaml``.

Every key is optional; a content directory without a config file builds
with the defaults below.

    title: Notes on Combine
    description: Reactive programming, one operator at a time
    base_url: https://example.com
    author: J. Doe
    posts_dir: posts
    output_dir: _site
    theme: theme.yaml
    include_drafts: false
    layouts:
      post: {requires: [title, date]}
      page: {requires: [title]}
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

# --- Third party imports ---
import yaml

# --- Local imports ---
from quill.core.exceptions import ConfigError
from quill.core.paths import (
    CONFIG_FILENAME,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_POSTS_DIR,
)
from quill.core.validators import DataValidator


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for one page layout.

    Attributes:
        name: Layout name, as set in a document's ``layout`` field
        template: Template file relative to the templates root
        requires: Metadata fields a document must set to use it
    """

    name: str
    template: str
    requires: Tuple[str, ...] = ()


DEFAULT_LAYOUTS: Dict[str, LayoutConfig] = {
    "post": LayoutConfig("post", "post.jinja2", ("title", "date")),
    "page": LayoutConfig("page", "page.jinja2", ("title",)),
}


@dataclass
class SiteConfig:
    """
    Per-site settings.

    Attributes:
        root: Content directory the config belongs to
        title: Site title shown in the header and listings
        description: Site tagline
        base_url: Absolute URL the site is served from (may be empty)
        author: Default author for posts
        posts_dir: Directory of documents, relative to root
        output_dir: Build output directory, relative to root
        theme: Theme YAML path relative to root, or None for the bundled one
        templates_dir: Template override directory relative to root
        include_drafts: Whether ``draft: true`` documents are built
        layouts: Layout name mapped to its configuration
    """

    root: Path = field(default_factory=Path.cwd)
    title: str = "Quill"
    description: str = ""
    base_url: str = ""
    author: str = ""
    posts_dir: str = DEFAULT_POSTS_DIR
    output_dir: str = DEFAULT_OUTPUT_DIR
    theme: Optional[str] = None
    templates_dir: Optional[str] = None
    include_drafts: bool = False
    layouts: Dict[str, LayoutConfig] = field(
        default_factory=lambda: dict(DEFAULT_LAYOUTS)
    )

    # ---- Construction ----
    @classmethod
    def load(cls, content_dir: Path) -> SiteConfig:
        """
        Load ``quill.yaml`` from a content directory, or use defaults.

        Args:
            content_dir: Site root

        Raises:
            ConfigError: If the file exists but is malformed
        """
        config_path = content_dir / CONFIG_FILENAME
        if not config_path.is_file():
            return cls(root=content_dir)
        return cls.from_file(config_path)

    @classmethod
    def from_file(cls, path: Path) -> SiteConfig:
        """
        Parse a config file.

        Raises:
            ConfigError: If the YAML or a value is malformed
        """
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        return cls.from_dict(data or {}, root=path.parent)

    @classmethod
    def from_dict(cls, data: Any, root: Optional[Path] = None) -> SiteConfig:
        """
        Build a config from a parsed mapping.

        Raises:
            ConfigError: On unknown keys or malformed values
        """
        if not isinstance(data, dict):
            raise ConfigError("Site config must be a mapping")

        known = {
            "title", "description", "base_url", "author", "posts_dir",
            "output_dir", "theme", "templates_dir", "include_drafts", "layouts",
        }
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        kwargs: Dict[str, Any] = {"root": root or Path.cwd()}
        for key in ("title", "description", "base_url", "author",
                    "posts_dir", "output_dir", "theme", "templates_dir"):
            if data.get(key) is not None:
                kwargs[key] = str(data[key])
        if "include_drafts" in data:
            kwargs["include_drafts"] = DataValidator.normalize_bool(data["include_drafts"])
        if "layouts" in data:
            kwargs["layouts"] = _parse_layouts(data["layouts"])

        return cls(**kwargs)

    # ---- Resolved paths ----
    @property
    def posts_path(self) -> Path:
        return self.root / self.posts_dir

    @property
    def output_path(self) -> Path:
        return self.root / self.output_dir

    @property
    def theme_path(self) -> Optional[Path]:
        return self.root / self.theme if self.theme else None

    @property
    def templates_path(self) -> Optional[Path]:
        return self.root / self.templates_dir if self.templates_dir else None

    def context(self) -> Dict[str, str]:
        """Site values exposed to templates as ``site``."""
        return {
            "title": self.title,
            "description": self.description,
            "base_url": self.base_url.rstrip("/"),
            "author": self.author,
        }


def _parse_layouts(data: Any) -> Dict[str, LayoutConfig]:
    """
    Merge configured layouts over the defaults.

    A layout entry may set ``template`` (default ``<name>.jinja2``) and
    ``requires`` (list of metadata fields).
    """
    if not isinstance(data, dict):
        raise ConfigError("'layouts' must be a mapping of layout name to settings")

    layouts = dict(DEFAULT_LAYOUTS)
    for name, settings in data.items():
        settings = settings or {}
        if not isinstance(settings, dict):
            raise ConfigError(f"Layout '{name}' settings must be a mapping")
        requires = settings.get("requires") or []
        if isinstance(requires, str):
            requires = [requires]
        if not isinstance(requires, list):
            raise ConfigError(f"Layout '{name}' requires must be a list")
        layouts[str(name)] = LayoutConfig(
            name=str(name),
            template=str(settings.get("template") or f"{name}.jinja2"),
            requires=tuple(str(f) for f in requires),
        )
    return layouts
