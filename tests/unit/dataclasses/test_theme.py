#!/usr/bin/env python3
"""
test_theme.py
-------------
Tests for Theme, StyleRule and DisplayMode parsing.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Third-party imports ---
import pytest
import yaml

# --- Local imports ---
from quill.core.exceptions import NotFoundError, ThemeError
from quill.dataclasses.theme import DisplayMode, StyleRule, Theme


class TestDisplayMode:
    """Tests for DisplayMode.parse."""

    def test_parse_case_insensitive(self):
        assert DisplayMode.parse("Dark") is DisplayMode.DARK

    def test_unknown(self):
        with pytest.raises(ThemeError, match="sepia"):
            DisplayMode.parse("sepia")

    def test_media_query(self):
        assert DisplayMode.DARK.media_query == "(prefers-color-scheme: dark)"


class TestStyleRule:
    """Tests for StyleRule.from_dict."""

    def test_declarations_keep_order(self):
        rule = StyleRule.from_dict(
            {"selector": "p", "declarations": {"margin": 0, "color": "red"}}
        )
        assert rule.declarations == (("margin", "0"), ("color", "red"))
        assert rule.mode is None

    def test_list_values_join(self):
        rule = StyleRule.from_dict({"selector": "p", "declarations": {"margin": ["0", "auto"]}})
        assert rule.declarations == (("margin", "0 auto"),)

    @pytest.mark.parametrize(
        "data, match",
        [
            ({"selector": "", "declarations": {"a": "b"}}, "empty selector"),
            ({"selector": "p", "declarations": {}}, "no declarations"),
            ({"selector": "p", "declarations": {"a": "b"}, "media": "x"}, "unknown keys"),
            ({"selector": "p", "declarations": {"a": "b"}, "mode": "sepia"}, "display mode"),
            ({"selector": "p", "declarations": {"color": None}}, "Empty CSS value"),
            ({"selector": "p", "declarations": {"margin": ["0", None]}}, "Empty CSS value"),
            ("p { color: red }", "mapping"),
        ],
    )
    def test_malformed(self, data, match):
        with pytest.raises(ThemeError, match=match):
            StyleRule.from_dict(data, 1)


class TestTheme:
    """Tests for Theme.from_dict / from_file."""

    def test_from_dict(self, theme: Theme):
        assert theme.name == "test"
        assert theme.variables[DisplayMode.DARK] == {"bg": "#000", "fg": "#fff"}
        assert len(theme.rules) == 3
        assert theme.classes_for("table") == ("data", "wide")
        assert theme.classes_for("p") == ()

    def test_rules_for_mode(self, theme: Theme):
        assert [r.selector for r in theme.rules_for(None)] == ["body", "a"]
        assert [r.selector for r in theme.rules_for(DisplayMode.DARK)] == ["img"]
        assert theme.rules_for(DisplayMode.LIGHT) == ()

    def test_unknown_key(self):
        with pytest.raises(ThemeError, match="colors"):
            Theme.from_dict({"colors": {}})

    def test_bad_variables_mode(self):
        with pytest.raises(ThemeError):
            Theme.from_dict({"variables": {"dim": {"bg": "#111"}}})

    def test_from_file(self, tmp_path: Path, theme_data: dict):
        path = tmp_path / "mine.yaml"
        theme_data.pop("name")
        path.write_text(yaml.safe_dump(theme_data), encoding="utf-8")
        loaded = Theme.from_file(path)
        assert loaded.name == "mine"
        assert len(loaded.rules) == 3

    def test_from_missing_file(self, tmp_path: Path):
        with pytest.raises(NotFoundError):
            Theme.from_file(tmp_path / "none.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("rules: [", encoding="utf-8")
        with pytest.raises(ThemeError, match="Invalid theme YAML"):
            Theme.from_file(path)
