"""
site package
------------
Static site generation: Loader → Renderer → Emitter.

Components:
    - ContentLoader: reads Documents from a content directory
    - PageRenderer: Jinja2 + markdown-it-py page rendering
    - SiteEmitter: scoped writes into the output directory
    - SiteBuilder: one-shot build orchestration
    - compile_stylesheet: Theme → CSS
"""
from .loader import ContentLoader
from .renderer import PageRenderer
from .emitter import SiteEmitter
from .builder import SiteBuilder, BuildResult
from .config import SiteConfig
from .stylesheet import compile_stylesheet, load_theme

__all__ = [
    "ContentLoader",
    "PageRenderer",
    "SiteEmitter",
    "SiteBuilder",
    "BuildResult",
    "SiteConfig",
    "compile_stylesheet",
    "load_theme",
]
