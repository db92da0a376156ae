"""
conftest.py
-----------
Shared pytest fixtures for Quill tests.

Provides fixtures for:
- Sample post content
- Throwaway blog trees (content dir with posts/)
- A small theme independent of the bundled one
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from quill.dataclasses.theme import Theme


# ----- Sample Markdown Content Fixtures -----

@pytest.fixture
def post_content() -> str:
    """A typical post with title, date and category."""
    return """---
title: Publishers and Subscribers
date: 2020-07-24
category: Combine
---

A **publisher** emits values over time.

> Subscribers request demand.

```swift
let p = Just(1)
```
"""


@pytest.fixture
def untitled_content() -> str:
    """A post without the title the post layout requires."""
    return """---
date: 2020-08-01
---

No title here.
"""


# ----- Blog Tree Fixtures -----

@pytest.fixture
def blog_dir(tmp_path: Path) -> Path:
    """Empty site root with a posts/ directory."""
    (tmp_path / "blog" / "posts").mkdir(parents=True)
    return tmp_path / "blog"


@pytest.fixture
def write_post(blog_dir: Path) -> Callable[[str, str], Path]:
    """
    Factory writing a post under blog_dir/posts.

    Usage:
        write_post("2020-07-24-post.md", content)
    """

    def _write(name: str, content: str) -> Path:
        path = blog_dir / "posts" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def populated_blog(blog_dir: Path, write_post, post_content: str) -> Path:
    """Blog with three posts across two categories and one draft."""
    write_post("2020-07-24-publishers.md", post_content)
    write_post(
        "2020-08-02-operators.md",
        "---\ntitle: Operators\ndate: 2020-08-02\ncategory: Combine\n---\n\nMap and filter.\n",
    )
    write_post(
        "2020-09-10-schedulers.md",
        "---\ntitle: Schedulers\ndate: 2020-09-10\ncategories: [Concurrency, Combine]\n---\n\nRunLoop.main\n",
    )
    write_post(
        "2020-10-01-unfinished.md",
        "---\ntitle: Unfinished\ndate: 2020-10-01\ndraft: true\n---\n\nTODO\n",
    )
    return blog_dir


# ----- Theme Fixtures -----

@pytest.fixture
def theme_data() -> dict:
    """Theme mapping with light/dark variables and one dark rule."""
    return {
        "name": "test",
        "variables": {
            "light": {"bg": "#fff", "fg": "#000"},
            "dark": {"bg": "#000", "fg": "#fff"},
        },
        "classes": {"blockquote": ["quote"], "table": "data wide"},
        "rules": [
            {"selector": "body", "declarations": {"background": "var(--bg)", "color": "var(--fg)"}},
            {"selector": "img", "mode": "dark", "declarations": {"opacity": 0.9}},
            {"selector": "a", "declarations": {"color": "blue"}},
        ],
    }


@pytest.fixture
def theme(theme_data: dict) -> Theme:
    return Theme.from_dict(theme_data)
