#!/usr/bin/env python3
"""
renderer.py
-----------
Jinja2 page renderer: merges a Document with a layout and the Theme.

The document body is converted to HTML with markdown-it-py, theme
classes are applied to the rendered elements, and the result is
substituted with the document's metadata into its layout template.

Key Features:
    - Layout selection from the document's ``layout`` field
    - Required-field checks per layout, plus strict undefined handling:
      any metadata the template touches but the document lacks raises
      MissingFieldError
    - Support for DictLoader (tests) and FileSystemLoader (production)
    - Deterministic: the same Document and Theme give identical output

Usage:
    from quill.site.renderer import PageRenderer

    renderer = PageRenderer(theme)
    html = renderer.render(document)

    # Testing: supply templates as dict
    renderer = PageRenderer(theme, templates={"post.jinja2": "{{ meta.title }}"})

Dependencies:
    - jinja2>=3.1.0
    - markdown-it-py>=3.0.0
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from functools import partial
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence
from urllib.parse import quote

# --- Third-party imports ---
from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
)
from jinja2.utils import missing
from markdown_it import MarkdownIt
from markupsafe import Markup

# --- Local imports ---
from quill.core.exceptions import MissingFieldError, NotFoundError
from quill.core.paths import (
    CATEGORIES_OUTPUT,
    PAGE_FILENAME,
    POSTS_OUTPUT,
    STYLESHEET_OUTPUT,
    TEMPLATES_DIR,
)
from quill.core.validators import DataValidator
from quill.dataclasses.document import Document
from quill.dataclasses.theme import Theme
from quill.site import filters as site_filters
from quill.site.config import DEFAULT_LAYOUTS, LayoutConfig, SiteConfig
from quill.site.mdit_classes import classes_plugin
from quill.utils.slugify import slugify

INDEX_TEMPLATE = "index.jinja2"
CATEGORY_TEMPLATE = "category.jinja2"


class MissingFieldUndefined(StrictUndefined):
    """StrictUndefined that fails with MissingFieldError naming the field."""

    __slots__ = ()

    def __init__(
        self,
        hint: Optional[str] = None,
        obj: Any = missing,
        name: Optional[str] = None,
        exc: Any = None,
    ) -> None:
        super().__init__(
            hint=hint, obj=obj, name=name, exc=partial(MissingFieldError, field=name)
        )


class PageRenderer:
    """
    Renders documents and listing pages to HTML.

    Attributes:
        theme: Theme whose classes are applied to rendered markdown
        layouts: Layout name mapped to template and required fields
        site: Site values exposed to templates as ``site``
        env: Configured Jinja2 Environment
        md: Configured MarkdownIt parser
    """

    def __init__(
        self,
        theme: Theme,
        templates_dir: Optional[Path] = None,
        templates: Optional[Dict[str, str]] = None,
        layouts: Optional[Mapping[str, LayoutConfig]] = None,
        site: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize the page renderer.

        A templates_dir overrides bundled templates file by file; missing
        templates fall back to the bundled ones. A templates dict replaces
        the loader entirely.

        Args:
            theme: Theme to apply
            templates_dir: Directory of template overrides
            templates: Dict of template_name → template_string (DictLoader)
            layouts: Layout configuration (defaults to post and page)
            site: Site-wide template values

        Raises:
            ValueError: If both templates_dir and templates are provided
        """
        if templates_dir and templates:
            raise ValueError(
                "Provide either templates_dir or templates, not both"
            )

        loader: BaseLoader
        if templates is not None:
            loader = DictLoader(templates)
        elif templates_dir is not None:
            loader = ChoiceLoader([
                FileSystemLoader(str(templates_dir)),
                FileSystemLoader(str(TEMPLATES_DIR)),
            ])
        else:
            loader = FileSystemLoader(str(TEMPLATES_DIR))

        self.theme = theme
        self.layouts: Dict[str, LayoutConfig] = dict(layouts or DEFAULT_LAYOUTS)
        self.site: Dict[str, str] = dict(site if site is not None else SiteConfig().context())

        self.env = Environment(
            loader=loader,
            autoescape=True,
            undefined=MissingFieldUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        site_filters.register_filters(self.env)

        self.md = (
            MarkdownIt("commonmark")
            .enable(["table", "strikethrough"])
            .use(classes_plugin, classes=theme.classes)
        )

    # ---- Markdown ----
    def render_markdown(self, text: str) -> str:
        """Convert a markdown body to HTML with theme classes applied."""
        return self.md.render(text)

    # ---- Layouts ----
    def layout_for(self, document: Document) -> LayoutConfig:
        """
        Resolve a document's layout configuration.

        Layouts not listed in the configuration use ``<name>.jinja2``
        with no required fields.
        """
        name = document.layout
        return self.layouts.get(name) or LayoutConfig(name, f"{name}.jinja2")

    def _template(self, name: str):
        try:
            return self.env.get_template(name)
        except TemplateNotFound as e:
            raise NotFoundError(f"Template not found: {e.name}") from e

    # ---- Context ----
    @staticmethod
    def document_url(identifier: str) -> str:
        """Relative URL of a document page; the identifier is percent-encoded."""
        return f"{POSTS_OUTPUT}/{quote(identifier, safe='')}/"

    @staticmethod
    def category_url(category: str) -> str:
        return f"{CATEGORIES_OUTPUT}/{category_slug(category)}/"

    def _page_summary(self, document: Document) -> Dict[str, Any]:
        """Listing entry for a document (no rendered body)."""
        d = document.date
        return {
            "identifier": document.identifier,
            "title": document.title,
            "date": d.isoformat() if d else "",
            "url": self.document_url(document.identifier),
            "excerpt": document.excerpt,
            "categories": [
                {"name": name, "url": self.category_url(name)}
                for name in document.categories
            ],
        }

    def _base_context(self, root: str) -> Dict[str, Any]:
        """
        Values every template sees.

        Args:
            root: Relative prefix from the page to the site root
        """
        return {
            "site": self.site,
            "root": root,
            "stylesheet": f"{root}{STYLESHEET_OUTPUT.as_posix()}",
            "theme": {"name": self.theme.name},
        }

    # ---- Rendering ----
    def render(self, document: Document) -> str:
        """
        Render a document to a full HTML page.

        Args:
            document: Document to render

        Returns:
            HTML string

        Raises:
            MissingFieldError: If the layout needs metadata the document lacks
            NotFoundError: If the layout has no template
        """
        layout = self.layout_for(document)
        DataValidator.validate_required_fields(
            document.metadata, layout.requires, identifier=document.identifier
        )
        template = self._template(layout.template)

        context = self._base_context(root="../../")
        page = self._page_summary(document)
        page["content"] = Markup(self.render_markdown(document.body))
        page["reading_time"] = site_filters.reading_time(document.body)
        context.update({"page": page, "meta": dict(document.metadata)})

        try:
            return template.render(**context)
        except MissingFieldError as e:
            raise MissingFieldError(
                f"Layout '{layout.name}' references missing field "
                f"'{e.field}' in '{document.identifier}'",
                field=e.field,
                identifier=document.identifier,
            ) from e

    def render_index(self, documents: Sequence[Document]) -> str:
        """
        Render the home page listing all documents.

        Args:
            documents: Documents in display order
        """
        template = self._template(INDEX_TEMPLATE)
        context = self._base_context(root="")
        context["pages"] = [self._page_summary(doc) for doc in documents]
        context["categories"] = [
            {"name": name, "url": self.category_url(name), "count": count}
            for name, count in _category_counts(documents)
        ]
        return template.render(**context)

    def render_category(self, category: str, documents: Sequence[Document]) -> str:
        """
        Render a listing page for one category.

        Args:
            category: Category name
            documents: Documents in that category, in display order
        """
        template = self._template(CATEGORY_TEMPLATE)
        context = self._base_context(root="../../")
        context["category"] = category
        context["pages"] = [self._page_summary(doc) for doc in documents]
        return template.render(**context)

    @staticmethod
    def category_target(category: str) -> Path:
        """Relative output path for a category page."""
        return Path(CATEGORIES_OUTPUT) / category_slug(category) / PAGE_FILENAME


def _category_counts(documents: Sequence[Document]) -> List[tuple]:
    """(category, document count) pairs sorted by name, merged by slug."""
    names: Dict[str, str] = {}
    counts: Dict[str, int] = {}
    for doc in documents:
        seen = set()
        for category in doc.categories:
            slug = category_slug(category)
            if slug in seen:
                continue
            seen.add(slug)
            name = names.setdefault(slug, category)
            counts[name] = counts.get(name, 0) + 1
    return sorted(counts.items(), key=lambda item: item[0].lower())


def category_slug(category: str) -> str:
    """URL segment for a category; names with no ASCII letters get 'category'."""
    return slugify(category) or "category"
