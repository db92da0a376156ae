"""
Tests for DataValidator metadata normalization and required fields.
"""
from datetime import date, datetime

import pytest

from quill.core.exceptions import FrontmatterParseError, MissingFieldError
from quill.core.validators import DataValidator


class TestValidateRequiredFields:
    """Tests for validate_required_fields."""

    def test_all_present(self):
        DataValidator.validate_required_fields({"title": "X", "date": "2020-07-24"}, ["title", "date"])

    def test_missing_field_named(self):
        """The error carries the field and identifier."""
        with pytest.raises(MissingFieldError) as exc_info:
            DataValidator.validate_required_fields({"date": "2020"}, ["title"], identifier="p")
        assert exc_info.value.field == "title"
        assert exc_info.value.identifier == "p"
        assert "'title'" in str(exc_info.value)

    def test_empty_value_counts_as_missing(self):
        with pytest.raises(MissingFieldError):
            DataValidator.validate_required_fields({"title": ""}, ["title"])


class TestNormalizeDate:
    """Tests for normalize_date."""

    def test_date_passthrough(self):
        assert DataValidator.normalize_date(date(2020, 7, 24)) == date(2020, 7, 24)

    def test_datetime_truncated(self):
        assert DataValidator.normalize_date(datetime(2020, 7, 24, 9, 30)) == date(2020, 7, 24)

    def test_iso_string(self):
        assert DataValidator.normalize_date("2020-07-24") == date(2020, 7, 24)

    def test_iso_datetime_string(self):
        assert DataValidator.normalize_date("2020-07-24 09:30:00") == date(2020, 7, 24)

    def test_invalid_string(self):
        assert DataValidator.normalize_date("last tuesday") is None

    def test_none(self):
        assert DataValidator.normalize_date(None) is None


class TestNormalizeMetadata:
    """Tests for normalize_metadata / normalize_metadata_value."""

    def test_scalars_become_strings(self):
        result = DataValidator.normalize_metadata({
            "title": "X",
            "date": date(2020, 7, 24),
            "order": 3,
            "draft": False,
            "empty": None,
        })
        assert result == {
            "title": "X",
            "date": "2020-07-24",
            "order": "3",
            "draft": "false",
            "empty": "",
        }

    def test_list_joined(self):
        assert DataValidator.normalize_metadata_value("tags", ["a", "b", 1]) == "a, b, 1"

    def test_mapping_rejected(self):
        with pytest.raises(FrontmatterParseError, match="author"):
            DataValidator.normalize_metadata_value("author", {"name": "X"})

    def test_preserves_order(self):
        result = DataValidator.normalize_metadata({"b": 1, "a": 2})
        assert list(result) == ["b", "a"]


class TestNormalizeBool:
    """Tests for normalize_bool."""

    @pytest.mark.parametrize("value", [True, "true", "Yes", "on", "1"])
    def test_truthy(self, value):
        assert DataValidator.normalize_bool(value) is True

    @pytest.mark.parametrize("value", [False, "false", "no", "", "0"])
    def test_falsy(self, value):
        assert DataValidator.normalize_bool(value) is False
