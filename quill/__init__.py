"""
Quill
=====

A static blog builder: Markdown posts with YAML front matter plus a
declarative light/dark theme, rendered to HTML pages and one stylesheet.

Main Components:
    - site: Loader, renderer, emitter and build orchestration
    - dataclasses: Document and Theme
    - core: Exceptions, logging, paths, validation, CLI helpers
    - utils: Front matter, filesystem and slug utilities
    - pipeline.cli: The ``quill`` command

Example Usage:
    >>> from pathlib import Path
    >>> from quill.site import SiteBuilder, SiteConfig
    >>> result = SiteBuilder(SiteConfig.load(Path("blog"))).build()
    >>> print(result.stats.summary())
"""

__version__ = "0.3.0"
