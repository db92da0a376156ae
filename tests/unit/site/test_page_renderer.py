#!/usr/bin/env python3
"""
test_page_renderer.py
---------------------
Tests for the PageRenderer class.

Covers environment setup, layout selection, required-field checks,
strict undefined handling, and the bundled templates.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Third-party imports ---
import pytest

# --- Local imports ---
from quill.core.exceptions import MissingFieldError, NotFoundError
from quill.dataclasses.document import Document
from quill.dataclasses.theme import Theme
from quill.site.config import LayoutConfig
from quill.site.renderer import PageRenderer, category_slug


# ==================== Initialization ====================

class TestRendererInit:
    """Tests for PageRenderer initialization."""

    def test_both_loaders_raises(self, theme: Theme, tmp_path: Path) -> None:
        """Providing both templates_dir and templates raises ValueError."""
        with pytest.raises(ValueError, match="not both"):
            PageRenderer(theme, templates_dir=tmp_path, templates={"post.jinja2": ""})

    def test_override_dir_falls_back(self, theme: Theme, tmp_path: Path) -> None:
        """Templates missing from the override dir come from the bundled set."""
        (tmp_path / "post.jinja2").write_text("custom {{ meta.title }}")
        renderer = PageRenderer(theme, templates_dir=tmp_path)
        doc = Document("x", {"title": "T", "date": "2020-01-01"})
        assert renderer.render(doc) == "custom T"
        assert "<!DOCTYPE html>" in renderer.render_index([doc])

    def test_default_site_context(self, theme: Theme) -> None:
        renderer = PageRenderer(theme, templates={"t": ""})
        assert renderer.site["title"] == "Quill"


# ==================== Layouts & Required Fields ====================

class TestLayouts:
    """Tests for layout selection and required fields."""

    def setup_method(self) -> None:
        self.templates = {
            "post.jinja2": "{{ meta.title }}|{{ meta.date }}",
            "page.jinja2": "page:{{ meta.title }}",
            "note.jinja2": "note:{{ page.identifier }}",
        }

    def test_default_layout_is_post(self, theme: Theme) -> None:
        renderer = PageRenderer(theme, templates=self.templates)
        doc = Document("x", {"title": "T", "date": "2020-01-01"})
        assert renderer.render(doc) == "T|2020-01-01"

    def test_page_layout(self, theme: Theme) -> None:
        renderer = PageRenderer(theme, templates=self.templates)
        assert renderer.render(Document("about", {"title": "About", "layout": "page"})) == (
            "page:About"
        )

    def test_unlisted_layout_uses_template_name(self, theme: Theme) -> None:
        renderer = PageRenderer(theme, templates=self.templates)
        assert renderer.render(Document("n1", {"layout": "note"})) == "note:n1"

    def test_unknown_template(self, theme: Theme) -> None:
        renderer = PageRenderer(theme, templates=self.templates)
        with pytest.raises(NotFoundError, match="gallery.jinja2"):
            renderer.render(Document("g", {"layout": "gallery"}))

    def test_required_field_missing(self, theme: Theme) -> None:
        renderer = PageRenderer(theme, templates=self.templates)
        with pytest.raises(MissingFieldError) as exc_info:
            renderer.render(Document("x", {"date": "2020-01-01"}))
        assert exc_info.value.field == "title"
        assert exc_info.value.identifier == "x"

    def test_empty_required_field(self, theme: Theme) -> None:
        renderer = PageRenderer(theme, templates=self.templates)
        with pytest.raises(MissingFieldError):
            renderer.render(Document("x", {"title": "", "date": "2020-01-01"}))

    def test_configured_requires(self, theme: Theme) -> None:
        layouts = {"post": LayoutConfig("post", "post.jinja2", ("title", "date", "summary"))}
        renderer = PageRenderer(theme, templates=self.templates, layouts=layouts)
        with pytest.raises(MissingFieldError, match="summary"):
            renderer.render(Document("x", {"title": "T", "date": "2020-01-01"}))


class TestStrictUndefined:
    """Metadata a template touches but a document lacks is an error."""

    def test_template_reference(self, theme: Theme) -> None:
        renderer = PageRenderer(
            theme,
            templates={"post.jinja2": "{{ meta.title }} by {{ meta.author }}"},
        )
        with pytest.raises(MissingFieldError) as exc_info:
            renderer.render(Document("p", {"title": "T", "date": "2020-01-01"}))
        assert exc_info.value.field == "author"
        assert exc_info.value.identifier == "p"

    def test_get_with_default_is_allowed(self, theme: Theme) -> None:
        renderer = PageRenderer(
            theme,
            templates={"post.jinja2": "{{ meta.get('author', 'anon') }}"},
        )
        assert renderer.render(Document("p", {"title": "T", "date": "2020-01-01"})) == "anon"

    def test_if_on_absent_field_raises(self, theme: Theme) -> None:
        """Truth-testing an absent field fails too; only meta.get is optional."""
        renderer = PageRenderer(
            theme,
            templates={"post.jinja2": "{% if meta.subtitle %}{{ meta.subtitle }}{% endif %}"},
        )
        with pytest.raises(MissingFieldError) as exc_info:
            renderer.render(Document("p", {"title": "T", "date": "2020-01-01"}))
        assert exc_info.value.field == "subtitle"


# ==================== Content ====================

class TestContent:
    """Tests for markdown conversion and substitution."""

    def test_body_and_theme_classes(self, theme: Theme, post_content: str) -> None:
        renderer = PageRenderer(theme, templates={"post.jinja2": "{{ page.content }}"})
        html = renderer.render(Document.from_markdown_text(post_content, "p"))
        assert "<strong>publisher</strong>" in html
        assert '<blockquote class="quote">' in html

    def test_metadata_is_escaped(self, theme: Theme) -> None:
        renderer = PageRenderer(theme, templates={"post.jinja2": "{{ meta.title }}"})
        html = renderer.render(Document("p", {"title": "<X & Y>", "date": "2020-01-01"}))
        assert html == "&lt;X &amp; Y&gt;"

    def test_deterministic(self, theme: Theme, post_content: str) -> None:
        doc = Document.from_markdown_text(post_content, "2020-07-24-post")
        assert PageRenderer(theme).render(doc) == PageRenderer(theme).render(doc)


class TestBundledTemplates:
    """Tests against the shipped layouts."""

    def test_post_page(self, theme: Theme, post_content: str) -> None:
        renderer = PageRenderer(theme)
        html = renderer.render(Document.from_markdown_text(post_content, "2020-07-24-post"))
        assert "<title>Publishers and Subscribers · Quill</title>" in html
        assert '<time datetime="2020-07-24">Friday, July 24, 2020</time>' in html
        assert 'href="../../assets/css/style.css"' in html
        assert 'href="../../categories/combine/index.html"' in html
        assert 'class="theme-test"' in html

    def test_index_lists_pages(self, theme: Theme) -> None:
        renderer = PageRenderer(theme)
        docs = [
            Document("2020-08-02-b", {"title": "B", "category": "Swift"}),
            Document("2020-07-24-a", {"title": "A", "category": "swift"}),
        ]
        html = renderer.render_index(docs)
        assert 'href="posts/2020-08-02-b/index.html"' in html
        assert html.index(">B<") < html.index(">A<")
        assert "Swift</a> (2)" in html

    def test_index_links_encode_identifier(self, theme: Theme) -> None:
        """Identifiers with URL-reserved characters stay one path segment."""
        renderer = PageRenderer(theme)
        docs = [
            Document("c#-tips", {"title": "C#"}),
            Document("why?-100%", {"title": "Why"}),
        ]
        html = renderer.render_index(docs)
        assert 'href="posts/c%23-tips/index.html"' in html
        assert 'href="posts/why%3F-100%25/index.html"' in html
        assert 'href="posts/c#-tips/' not in html

    def test_category_links_encode_identifier(self, theme: Theme) -> None:
        html = PageRenderer(theme).render_category("C", [Document("c#-tips", {"title": "T"})])
        assert 'href="../../posts/c%23-tips/index.html"' in html

    def test_index_empty(self, theme: Theme) -> None:
        assert "No posts yet." in PageRenderer(theme).render_index([])

    def test_category_page(self, theme: Theme) -> None:
        renderer = PageRenderer(theme)
        html = renderer.render_category("Combine", [Document("a", {"title": "A"})])
        assert "<h1>Combine</h1>" in html
        assert "1 post<" in html
        assert 'href="../../posts/a/index.html"' in html


class TestCategorySlug:
    """Tests for category_slug / category_target."""

    def test_slug(self) -> None:
        assert category_slug("Swift & Combine") == "swift-and-combine"

    def test_fallback(self) -> None:
        assert category_slug("日本") == "category"

    def test_target(self) -> None:
        assert PageRenderer.category_target("Combine") == Path(
            "categories/combine/index.html"
        )
