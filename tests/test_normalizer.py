"""
Tests for field normalization.
"""

import pytest

from votermatch.exceptions import FieldAccessError
from votermatch.matching import NormalizedFields, normalize
from votermatch.models import VoterRecord


def test_normalize_trims_and_uppercases():
    assert normalize("  John Smith \t") == "JOHN SMITH"


def test_normalize_keeps_inner_whitespace():
    assert normalize(" 123  Main St ") == "123  MAIN ST"


def test_normalize_empty_string_is_allowed():
    assert normalize("   ") == ""


def test_normalize_missing_value_raises():
    with pytest.raises(FieldAccessError) as exc_info:
        normalize(None, "house_number")
    assert exc_info.value.field_name == "house_number"
    assert exc_info.value.recoverable


def test_normalize_non_string_raises():
    with pytest.raises(FieldAccessError) as exc_info:
        normalize(94601, "zip")
    assert exc_info.value.details["field_type"] == "int"


class TestNormalizedFields:
    """Tests for per-record normalization cache."""

    def test_reads_normalized_values(self):
        voter = VoterRecord(name_first=" jane ", name_last="doe")
        fields = NormalizedFields(voter, ["name_first", "name_last"])
        assert fields.get("name_first") == "JANE"
        assert fields.get("name_last") == "DOE"

    def test_failed_field_raises_on_every_read(self):
        voter = VoterRecord(name_first="JANE")
        fields = NormalizedFields(voter, ["name_first", "house_number"])

        for _ in range(2):
            with pytest.raises(FieldAccessError):
                fields.get("house_number")
        assert fields.get("name_first") == "JANE"
