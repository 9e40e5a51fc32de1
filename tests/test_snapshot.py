"""Tests for StatusSnapshot parsing"""
import json

import pytest

from dev_statusline.exceptions import SnapshotError
from dev_statusline.models.snapshot import StatusSnapshot


class TestSnapshotFromDict:
    """Test field extraction and defaults."""

    def test_full_payload(self, snapshot_data):
        """Test that every field is read from a complete payload."""
        snapshot = StatusSnapshot.from_dict(snapshot_data)
        assert snapshot.model_name == "Opus"
        assert snapshot.current_dir == "/work/app"
        assert snapshot.project_dir == "/work/app"
        assert snapshot.used_percentage == 48
        assert snapshot.total_cost_usd == 1.5
        assert snapshot.total_duration_ms == 125000
        assert snapshot.lines_added == 120
        assert snapshot.lines_removed == 14
        assert snapshot.version == "1.0.3"

    def test_empty_payload_uses_defaults(self):
        """Test that a payload with no fields yields every default."""
        snapshot = StatusSnapshot.from_dict({})
        assert snapshot == StatusSnapshot()
        assert snapshot.model_name == "?"
        assert snapshot.current_dir == ""
        assert snapshot.used_percentage == 0
        assert snapshot.total_cost_usd == 0.0
        assert snapshot.version == ""

    def test_null_values_use_defaults(self):
        """Test that explicit nulls are treated as missing."""
        snapshot = StatusSnapshot.from_dict({
            "model": {"display_name": None},
            "context_window": {"used_percentage": None},
            "cost": None,
            "version": None,
        })
        assert snapshot == StatusSnapshot()

    @pytest.mark.parametrize("value,expected", [
        (0, 0),
        (45.9, 45),
        (89.99, 89),
        ("42.7", 42),
        (100, 100),
    ])
    def test_percentage_is_truncated(self, value, expected):
        """Test that the context percentage drops its fraction."""
        snapshot = StatusSnapshot.from_dict({"context_window": {"used_percentage": value}})
        assert snapshot.used_percentage == expected

    @pytest.mark.parametrize("value", ["lots", [], {}, True, float("nan")])
    def test_invalid_numbers_use_defaults(self, value):
        """Test that values of the wrong shape fall back to zero."""
        snapshot = StatusSnapshot.from_dict({
            "context_window": {"used_percentage": value},
            "cost": {"total_cost_usd": value, "total_lines_added": value},
        })
        assert snapshot.used_percentage == 0
        assert snapshot.total_cost_usd == 0.0
        assert snapshot.lines_added == 0

    def test_line_breaks_are_folded(self):
        """Test that text fields never span more than one line."""
        snapshot = StatusSnapshot.from_dict({
            "model": {"display_name": "Opus\nX"},
            "version": "1\r\n2",
        })
        assert snapshot.model_name == "Opus X"
        assert snapshot.version == "1 2"

    def test_non_mapping_parents_use_defaults(self):
        """Test that a scalar where an object is expected is ignored."""
        snapshot = StatusSnapshot.from_dict({"model": "Opus", "workspace": ["/tmp"]})
        assert snapshot.model_name == "?"
        assert snapshot.current_dir == ""

    def test_numeric_strings_are_kept_as_text(self):
        """Test that a numeric version is rendered as text."""
        snapshot = StatusSnapshot.from_dict({"version": 2})
        assert snapshot.version == "2"


class TestSnapshotFromJson:
    """Test decoding the raw payload."""

    def test_valid_json(self, snapshot_data):
        """Test decoding a JSON document."""
        snapshot = StatusSnapshot.from_json(json.dumps(snapshot_data))
        assert snapshot.model_name == "Opus"

    @pytest.mark.parametrize("payload", ["", "   \n", "{not json", "[1, 2]", '"text"', "null"])
    def test_undecodable_input_raises(self, payload):
        """Test that non-object input is reported as a SnapshotError."""
        with pytest.raises(SnapshotError):
            StatusSnapshot.from_json(payload)
