#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and defaults for the Quill project.

Bundled assets (templates, default theme) are resolved relative to the
installed package. Site locations (content, output) are relative to the
content directory a build is pointed at and default to the names below.

    quill/
    ├── core/          # Exceptions, logging, paths, CLI helpers
    ├── site/          # Loader, renderer, emitter, builder
    │   ├── templates/ # Bundled Jinja2 layouts
    │   └── themes/    # Bundled theme definitions
    └── pipeline/      # Click entry point
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_package_root() -> Path:
    """
    Determine the quill package directory.

    Assumes this file is at quill/core/paths.py.

    Returns:
        Path object for the package root

    Raises:
        RuntimeError: If the package layout is not as expected
    """
    current_file = Path(__file__).resolve()
    root = current_file.parent.parent

    if not (root / "site").is_dir():
        raise RuntimeError(
            f"Cannot determine quill package root. "
            f"Expected {root / 'site'} to exist. "
            f"Current file: {current_file}"
        )

    return root


# ----- Package -----
PACKAGE_DIR: Path = _get_package_root()
SITE_PACKAGE_DIR = PACKAGE_DIR / "site"

# --- Bundled assets ---
TEMPLATES_DIR = SITE_PACKAGE_DIR / "templates"
THEMES_DIR = SITE_PACKAGE_DIR / "themes"
DEFAULT_THEME_FILE = THEMES_DIR / "default.yaml"

# ----- Site layout (relative to the content directory) -----
CONFIG_FILENAME = "quill.yaml"
DEFAULT_POSTS_DIR = "posts"
DEFAULT_OUTPUT_DIR = "_site"

# ----- Output layout (relative to the output directory) -----
POSTS_OUTPUT = "posts"
CATEGORIES_OUTPUT = "categories"
STYLESHEET_OUTPUT = Path("assets") / "css" / "style.css"
PAGE_FILENAME = "index.html"

# ----- Logs -----
LOG_DIR = Path.cwd() / "logs"

# ----- Source discovery -----
MARKDOWN_SUFFIXES = (".md", ".markdown")
