#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities for Quill.

Front matter arrives as arbitrary YAML; documents expose it as a flat
mapping of strings. The conversions live here so the loader, the
renderer, and the config layer agree on them.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Iterable, Mapping, Optional

from .exceptions import FrontmatterParseError, MissingFieldError


class DataValidator:
    """Centralized validation and normalization for document metadata."""

    @staticmethod
    def validate_required_fields(
        data: Mapping[str, Any],
        required_fields: Iterable[str],
        identifier: Optional[str] = None,
    ) -> None:
        """
        Validate that required fields are present and non-empty.

        Args:
            data: Metadata mapping to validate
            required_fields: Field names that must be present
            identifier: Document identifier, used in the error message

        Raises:
            MissingFieldError: On the first missing or empty field
        """
        for field in required_fields:
            if field not in data or data[field] in (None, ""):
                where = f" in '{identifier}'" if identifier else ""
                raise MissingFieldError(
                    f"Required field '{field}' missing or empty{where}",
                    field=field,
                    identifier=identifier,
                )

    @staticmethod
    def normalize_date(date_value: Any) -> Optional[date]:
        """
        Normalize various date inputs to a date object.

        Args:
            date_value: ISO date string, date, or datetime

        Returns:
            Normalized date, or None if the value is not a date
        """
        if isinstance(date_value, datetime):
            return date_value.date()
        if isinstance(date_value, date):
            return date_value
        if isinstance(date_value, str):
            text = date_value.strip()
            try:
                return date.fromisoformat(text[:10])
            except ValueError:
                return None
        return None

    @staticmethod
    def normalize_bool(value: Any) -> bool:
        """
        Interpret a metadata value as a boolean flag.

        Args:
            value: Value to interpret

        Returns:
            True for 'true', 'yes', 'on', '1' (any case) or a true bool
        """
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes", "on")
        return bool(value)

    @staticmethod
    def normalize_metadata_value(key: str, value: Any) -> str:
        """
        Convert a YAML front matter value into its string form.

        Dates become ISO strings, booleans lowercase words, lists are
        joined with ", ". Nested mappings are rejected.

        Args:
            key: Metadata key (for error messages)
            value: Parsed YAML value

        Returns:
            String value

        Raises:
            FrontmatterParseError: If value is a mapping
        """
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, datetime):
            return value.isoformat(sep=" ")
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, dict):
            raise FrontmatterParseError(
                f"Metadata field '{key}' must be a scalar or list, not a mapping"
            )
        if isinstance(value, (list, tuple)):
            return ", ".join(
                DataValidator.normalize_metadata_value(key, item) for item in value
            )
        return str(value)

    @classmethod
    def normalize_metadata(cls, metadata: Mapping[Any, Any]) -> Dict[str, str]:
        """
        Normalize a parsed front matter mapping to ``Dict[str, str]``.

        Args:
            metadata: Parsed YAML mapping

        Returns:
            New dict with string keys and string values, in source order
        """
        return {
            str(key): cls.normalize_metadata_value(str(key), value)
            for key, value in metadata.items()
        }
