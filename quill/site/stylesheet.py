#!/usr/bin/env python3
"""
stylesheet.py
-------------
Compile a declarative Theme into a single CSS stylesheet.

Output order is fixed so the same theme always yields the same bytes:

    1. ``:root`` custom properties from the light variables
    2. dark variables in ``@media (prefers-color-scheme: dark) { :root }``
    3. unscoped rules in source order
    4. light-scoped rules in one ``prefers-color-scheme: light`` block
    5. dark-scoped rules in one ``prefers-color-scheme: dark`` block

Variables without a mode-specific override fall through to the light
value, so a dark palette only lists what changes.

Usage:
    from quill.site.stylesheet import compile_stylesheet, default_theme

    css = compile_stylesheet(default_theme())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Dict, Iterable, List, Optional

# --- Local imports ---
from quill.core.paths import DEFAULT_THEME_FILE
from quill.dataclasses.theme import DisplayMode, StyleRule, Theme

INDENT = "  "


def load_theme(path: Optional[Path] = None) -> Theme:
    """
    Load a theme file, or the bundled default when path is None.

    Raises:
        NotFoundError: If the file does not exist
        ThemeError: If the theme is malformed
    """
    return Theme.from_file(path if path is not None else DEFAULT_THEME_FILE)


def default_theme() -> Theme:
    """The theme bundled with Quill."""
    return load_theme(None)


def _block(selector: str, declarations: Iterable[tuple], depth: int = 0) -> List[str]:
    pad = INDENT * depth
    lines = [f"{pad}{selector} {{"]
    lines.extend(f"{pad}{INDENT}{prop}: {value};" for prop, value in declarations)
    lines.append(f"{pad}}}")
    return lines


def _variables_block(variables: Dict[str, str], depth: int = 0) -> List[str]:
    return _block(
        ":root",
        ((f"--{name}", value) for name, value in variables.items()),
        depth,
    )


def _rules(rules: Iterable[StyleRule], depth: int = 0) -> List[str]:
    lines: List[str] = []
    for rule in rules:
        if lines:
            lines.append("")
        lines.extend(_block(rule.selector, rule.declarations, depth))
    return lines


def _media(mode: DisplayMode, body: List[str]) -> List[str]:
    return [f"@media {mode.media_query} {{", *body, "}"]


def compile_stylesheet(theme: Theme) -> str:
    """
    Compile a theme to CSS.

    Args:
        theme: Theme to compile

    Returns:
        Stylesheet text ending in a newline
    """
    sections: List[List[str]] = [[f"/* {theme.name} theme, generated by Quill */"]]

    light_vars = theme.variables.get(DisplayMode.LIGHT, {})
    dark_vars = theme.variables.get(DisplayMode.DARK, {})

    if light_vars:
        sections.append(_variables_block(light_vars))
    if dark_vars:
        sections.append(_media(DisplayMode.DARK, _variables_block(dark_vars, depth=1)))

    unscoped = theme.rules_for(None)
    if unscoped:
        sections.append(_rules(unscoped))

    for mode in (DisplayMode.LIGHT, DisplayMode.DARK):
        scoped = theme.rules_for(mode)
        if scoped:
            sections.append(_media(mode, _rules(scoped, depth=1)))

    return "\n\n".join("\n".join(lines) for lines in sections) + "\n"
