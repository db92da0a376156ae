#!/usr/bin/env python3
"""
mdit_classes.py
---------------
markdown-it-py plugin that applies theme classes to rendered elements.

A theme maps element tags to CSS classes (``blockquote: [post-quote]``).
This core rule runs after inline parsing and adds those classes to every
opening or self-contained token with a matching tag, including inline
children such as links, images and code spans.

Usage:
    from markdown_it import MarkdownIt
    from quill.site.mdit_classes import classes_plugin

    md = MarkdownIt().use(classes_plugin, classes={"table": ("data",)})
    md.render("| a |\\n|---|\\n| 1 |")  # '<table class="data">...'

Dependencies:
    - markdown-it-py >= 3.0.0
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Iterable, Mapping, Sequence

# --- Third-party imports ---
from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token


def classes_plugin(
    md: MarkdownIt, classes: Mapping[str, Sequence[str]] | None = None
) -> None:
    """
    Register the theme-class core rule with a MarkdownIt instance.

    Args:
        md: MarkdownIt instance to extend
        classes: Element tag mapped to class names
    """
    mapping = {tag: tuple(names) for tag, names in (classes or {}).items() if names}
    if not mapping:
        return

    def _rule(state: StateCore) -> None:
        _apply_classes(state.tokens, mapping)

    md.core.ruler.push("theme_classes", _rule)


def _apply_classes(
    tokens: Iterable[Token], mapping: Mapping[str, Sequence[str]]
) -> None:
    """Join mapped classes onto opening and self-contained tokens."""
    for token in tokens:
        if token.nesting >= 0 and token.tag in mapping:
            for name in mapping[token.tag]:
                token.attrJoin("class", name)
        if token.children:
            _apply_classes(token.children, mapping)
