#!/usr/bin/env python3
"""
theme.py
--------
Dataclasses for a declarative site theme.

A theme is a set of named style rules, each optionally scoped to a
display mode (light or dark), plus per-mode CSS variables and a map of
element tags to the classes rendered Markdown should carry. Themes are
loaded from YAML:

    name: default
    variables:
      light: {bg: "#ffffff", fg: "#1d1d1f"}
      dark:  {bg: "#1c1c1e", fg: "#f2f2f7"}
    classes:
      blockquote: [post-quote]
    rules:
      - selector: body
        declarations: {background: "var(--bg)", color: "var(--fg)"}
      - selector: img
        mode: dark
        declarations: {opacity: "0.9"}
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

# --- Third party imports ---
import yaml

# --- Local imports ---
from quill.core.exceptions import NotFoundError, ThemeError

THEME_KEYS = {"name", "variables", "classes", "rules"}
RULE_KEYS = {"selector", "declarations", "mode"}


class DisplayMode(str, Enum):
    """Viewer colour-scheme preference a rule can be scoped to."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, value: Any) -> DisplayMode:
        """
        Parse a mode name.

        Raises:
            ThemeError: If value is not a known mode
        """
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ThemeError(
                f"Unknown display mode: {value!r} "
                f"(expected one of: {', '.join(m.value for m in cls)})"
            ) from None

    @property
    def media_query(self) -> str:
        return f"(prefers-color-scheme: {self.value})"


@dataclass(frozen=True)
class StyleRule:
    """
    One selector with its ordered property declarations.

    Attributes:
        selector: CSS selector
        declarations: (property, value) pairs in source order
        mode: Display mode guard, or None to always apply
    """

    selector: str
    declarations: Tuple[Tuple[str, str], ...]
    mode: Optional[DisplayMode] = None

    @classmethod
    def from_dict(cls, data: Any, position: int = 0) -> StyleRule:
        """
        Build a rule from its YAML mapping.

        Args:
            data: Mapping with selector, declarations, optional mode
            position: 1-based index of the rule (for error messages)

        Raises:
            ThemeError: If the rule is malformed
        """
        where = f"Rule {position}"
        if not isinstance(data, dict):
            raise ThemeError(f"{where} must be a mapping")

        unknown = set(data) - RULE_KEYS
        if unknown:
            raise ThemeError(f"{where} has unknown keys: {', '.join(sorted(unknown))}")

        selector = str(data.get("selector") or "").strip()
        if not selector:
            raise ThemeError(f"{where} has an empty selector")

        declarations = data.get("declarations")
        if not isinstance(declarations, dict) or not declarations:
            raise ThemeError(f"{where} ({selector}) has no declarations")

        mode = data.get("mode")
        return cls(
            selector=selector,
            declarations=tuple(
                (str(prop).strip(), _css_value(value))
                for prop, value in declarations.items()
            ),
            mode=DisplayMode.parse(mode) if mode is not None else None,
        )


@dataclass(frozen=True)
class Theme:
    """
    Declarative presentation rules applied uniformly to every page.

    Attributes:
        name: Theme name
        variables: CSS custom properties per display mode
        rules: Style rules in source order
        classes: Element tag mapped to classes for rendered Markdown
    """

    name: str
    variables: Dict[DisplayMode, Dict[str, str]] = field(default_factory=dict)
    rules: Tuple[StyleRule, ...] = ()
    classes: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: Path) -> Theme:
        """
        Load a theme from a YAML file.

        Raises:
            NotFoundError: If the file does not exist
            ThemeError: If the YAML or the theme is malformed
        """
        if not path.is_file():
            raise NotFoundError(f"Theme file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ThemeError(f"Invalid theme YAML in {path}: {e}") from e

        return cls.from_dict(data or {}, default_name=path.stem)

    @classmethod
    def from_dict(cls, data: Any, default_name: str = "theme") -> Theme:
        """
        Build a theme from its parsed YAML mapping.

        Raises:
            ThemeError: If the mapping is malformed
        """
        if not isinstance(data, dict):
            raise ThemeError("Theme must be a mapping")

        unknown = set(data) - THEME_KEYS
        if unknown:
            raise ThemeError(f"Unknown theme keys: {', '.join(sorted(unknown))}")

        raw_rules = data.get("rules") or []
        if not isinstance(raw_rules, list):
            raise ThemeError("Theme 'rules' must be a list")

        return cls(
            name=str(data.get("name") or default_name),
            variables=_parse_variables(data.get("variables") or {}),
            rules=tuple(
                StyleRule.from_dict(rule, position)
                for position, rule in enumerate(raw_rules, 1)
            ),
            classes=_parse_classes(data.get("classes") or {}),
        )

    def rules_for(self, mode: Optional[DisplayMode]) -> Tuple[StyleRule, ...]:
        """Rules scoped to ``mode`` (None selects the unscoped rules)."""
        return tuple(rule for rule in self.rules if rule.mode == mode)

    def classes_for(self, tag: str) -> Tuple[str, ...]:
        return self.classes.get(tag, ())


# ----- Parsing helpers -----

def _css_value(value: Any) -> str:
    """Render a YAML scalar as a CSS value (lists join with spaces)."""
    if value is None:
        raise ThemeError("Empty CSS value")
    if isinstance(value, bool):
        raise ThemeError(f"Boolean is not a CSS value: {value}")
    if isinstance(value, (list, tuple)):
        return " ".join(_css_value(v) for v in value)
    text = str(value).strip()
    if not text:
        raise ThemeError("Empty CSS value")
    return text


def _parse_variables(data: Any) -> Dict[DisplayMode, Dict[str, str]]:
    if not isinstance(data, dict):
        raise ThemeError("Theme 'variables' must be a mapping of mode to names")

    variables: Dict[DisplayMode, Dict[str, str]] = {}
    for mode_name, values in data.items():
        mode = DisplayMode.parse(mode_name)
        if not isinstance(values, dict):
            raise ThemeError(f"Variables for mode '{mode.value}' must be a mapping")
        variables[mode] = {
            str(name).lstrip("-"): _css_value(value) for name, value in values.items()
        }
    return variables


def _parse_classes(data: Mapping[Any, Any]) -> Dict[str, Tuple[str, ...]]:
    if not isinstance(data, dict):
        raise ThemeError("Theme 'classes' must be a mapping of tag to classes")

    classes: Dict[str, Tuple[str, ...]] = {}
    for tag, names in data.items():
        if isinstance(names, str):
            names = names.split()
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ThemeError(f"Classes for '{tag}' must be a string or list of strings")
        classes[str(tag)] = tuple(names)
    return classes
