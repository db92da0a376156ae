#!/usr/bin/env python3
"""
builder.py
----------
One-shot site build: load every document, render every page, emit.

Rendering happens entirely in memory before the first write, so a
document that fails to render (missing field, unknown layout) aborts
the build with nothing emitted. Errors are logged and re-raised; none
are retried.

Output layout:
    <output>/index.html
    <output>/posts/<identifier>/index.html     one per document
    <output>/categories/<slug>/index.html      one per category
    <output>/assets/css/style.css

Usage:
    from quill.site.builder import SiteBuilder

    builder = SiteBuilder(SiteConfig.load(Path(".")), logger=logger)
    result = builder.build()
    print(result.stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

# --- Local imports ---
from quill.core.cli import BuildStats
from quill.core.exceptions import EmitError
from quill.core.logging_manager import QuillLogger, safe_logger
from quill.core.paths import PAGE_FILENAME, STYLESHEET_OUTPUT
from quill.dataclasses.document import Document
from quill.site.config import SiteConfig
from quill.site.emitter import SiteEmitter
from quill.site.loader import ContentLoader
from quill.site.renderer import PageRenderer, category_slug
from quill.site.stylesheet import compile_stylesheet, load_theme
from quill.utils.fs import is_within


@dataclass(frozen=True)
class EmittedPage:
    """
    One written artifact.

    Attributes:
        identifier: Document identifier, or a site page name ('index')
        path: Output path relative to the output directory
        status: 'created', 'updated', or 'unchanged'
    """

    identifier: str
    path: Path
    status: str


@dataclass
class BuildResult:
    """
    Outcome of a build.

    Attributes:
        documents: One entry per rendered document
        site_pages: Index, category pages and stylesheet
        stats: Build statistics
    """

    documents: List[EmittedPage] = field(default_factory=list)
    site_pages: List[EmittedPage] = field(default_factory=list)
    stats: BuildStats = field(default_factory=BuildStats)


class SiteBuilder:
    """
    Orchestrates Loader → Renderer → Emitter for one build.

    Attributes:
        config: Site configuration
        output_dir: Where artifacts are written
        include_drafts: Whether draft documents are built
        logger: Logger (null logger if none given)
    """

    def __init__(
        self,
        config: SiteConfig,
        output_dir: Optional[Path] = None,
        include_drafts: Optional[bool] = None,
        theme_path: Optional[Path] = None,
        logger: Optional[QuillLogger] = None,
    ) -> None:
        """
        Initialize the builder.

        Args:
            config: Site configuration
            output_dir: Override for config.output_path
            include_drafts: Override for config.include_drafts
            theme_path: Override for config.theme_path
            logger: Optional logger
        """
        self.config = config
        self.output_dir = Path(output_dir) if output_dir else config.output_path
        self.include_drafts = (
            config.include_drafts if include_drafts is None else include_drafts
        )
        self.theme_path = theme_path or config.theme_path
        self.logger = safe_logger(logger)

        self.loader = ContentLoader(config.posts_path, logger=logger)
        self.emitter = SiteEmitter(self.output_dir, logger=logger)

    # ---- Stages ----
    def load(self, stats: Optional[BuildStats] = None) -> List[Document]:
        """
        Load all documents, dropping drafts unless included.

        Args:
            stats: Statistics to update, if any
        """
        documents = self.loader.load_all()
        published = [
            doc for doc in documents if self.include_drafts or not doc.draft
        ]
        if stats is not None:
            stats.documents_loaded = len(documents)
            stats.drafts_skipped = len(documents) - len(published)
        return published

    def make_renderer(self) -> PageRenderer:
        """Renderer configured from the site config and theme."""
        return PageRenderer(
            theme=load_theme(self.theme_path),
            templates_dir=self.config.templates_path,
            layouts=self.config.layouts,
            site=self.config.context(),
        )

    def render(
        self, documents: List[Document], renderer: Optional[PageRenderer] = None
    ) -> Tuple[List[Tuple[str, str]], List[Tuple[str, Path, str]]]:
        """
        Render every page in memory.

        Args:
            documents: Documents to render
            renderer: Renderer to use (built from config if omitted)

        Returns:
            (document pages as (identifier, html),
             site pages as (name, relative path, content))

        Raises:
            MissingFieldError, NotFoundError: From the renderer
        """
        renderer = renderer or self.make_renderer()

        pages = []
        for doc in documents:
            self.logger.log_debug(f"Rendering {doc.identifier}", {"layout": doc.layout})
            pages.append((doc.identifier, renderer.render(doc)))

        site_pages: List[Tuple[str, Path, str]] = [
            ("index", Path(PAGE_FILENAME), renderer.render_index(documents)),
        ]
        for name, members in group_by_category(documents).items():
            site_pages.append((
                f"category:{name}",
                renderer.category_target(name),
                renderer.render_category(name, members),
            ))
        site_pages.append(
            ("stylesheet", STYLESHEET_OUTPUT, compile_stylesheet(renderer.theme))
        )
        return pages, site_pages

    # ---- Build ----
    def build(self, clean: bool = False) -> BuildResult:
        """
        Run a full build.

        Args:
            clean: Remove existing output before writing

        Returns:
            BuildResult with one document entry per rendered document

        Raises:
            QuillError: Any load, render, or emit failure (after logging)
        """
        result = BuildResult()
        stats = result.stats
        self.logger.log_operation(
            "build_start",
            {"content_dir": self.config.posts_path, "output_dir": self.output_dir},
        )

        try:
            self._check_output_dir()
            documents = self.load(stats)
            pages, site_pages = self.render(documents)

            if clean:
                self.emitter.clean()

            for identifier, html in pages:
                status = self.emitter.emit_document(identifier, html)
                stats.record(status)
                result.documents.append(
                    EmittedPage(identifier, self.emitter.document_target(identifier), status)
                )

            for name, target, content in site_pages:
                status = self.emitter.emit(content, target)
                stats.record(status)
                result.site_pages.append(EmittedPage(name, Path(target), status))
        except Exception as e:
            stats.errors += 1
            self.logger.log_error(e, {"operation": "build", "output_dir": self.output_dir})
            raise

        self.logger.log_operation("build_complete", stats.to_dict())
        return result

    def _check_output_dir(self) -> None:
        """
        Refuse an output directory that holds the site sources.

        Raises:
            EmitError: If the content root or posts directory is the
                output directory or lies inside it
        """
        for source in (self.config.root, self.config.posts_path):
            if is_within(source, self.output_dir):
                raise EmitError(
                    f"Output directory {self.output_dir} contains the site "
                    f"sources ({source}); choose a separate output directory"
                )

    def check(self) -> int:
        """
        Load and render everything without writing.

        Returns:
            Number of documents that would be emitted

        Raises:
            QuillError: Any load or render failure
        """
        documents = self.load()
        self.render(documents)
        self.logger.log_operation("check", {"documents": len(documents)})
        return len(documents)


def group_by_category(documents: List[Document]) -> Dict[str, List[Document]]:
    """
    Group documents by category, keeping document order.

    Categories whose names slugify identically share one page, titled
    with the first spelling seen.
    """
    names: Dict[str, str] = {}
    groups: Dict[str, List[Document]] = {}
    for doc in documents:
        for category in doc.categories:
            slug = category_slug(category)
            name = names.setdefault(slug, category)
            members = groups.setdefault(name, [])
            if doc not in members:
                members.append(doc)
    return dict(sorted(groups.items(), key=lambda item: item[0].lower()))
