"""Tests for output formatters."""

import json

import pytest

from gitdiffparse import __version__
from gitdiffparse.diff.types import DiffRecord, ParsedDiff
from gitdiffparse.output import get_formatter
from gitdiffparse.output.json import JSONFormatter
from gitdiffparse.output.text import TextFormatter


@pytest.fixture
def sample_diff() -> ParsedDiff:
    """Create a sample parsed diff for testing."""
    return ParsedDiff(
        records=(
            DiffRecord.from_hashes(
                "src/new.py",
                "src/new.py",
                "0" * 40,
                "a" * 40,
                mode_after="100644",
                is_new=True,
                patch_body="@@ -0,0 +1 @@\n+print('hi')",
            ),
            DiffRecord(
                path_before="src/old.py",
                path_after="src/renamed.py",
                is_renamed=True,
                similarity_index=5,
            ),
            DiffRecord(
                path_before="run.sh",
                path_after="run.sh",
                mode_before="100644",
                mode_after="100755",
            ),
        )
    )


class TestGetFormatter:
    """Tests for the formatter registry."""

    def test_known_formatters(self):
        """Test lookup by name."""
        assert isinstance(get_formatter("text"), TextFormatter)
        assert isinstance(get_formatter("json"), JSONFormatter)

    def test_unknown_formatter(self):
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("sarif")


class TestTextFormatter:
    """Tests for TextFormatter."""

    def test_name(self):
        assert TextFormatter().name == "text"

    def test_empty(self):
        """Test output with no records."""
        output = TextFormatter().format(ParsedDiff(records=()), "-")
        assert "Target: -" in output
        assert "No changes." in output

    def test_status_lines(self, sample_diff):
        """Test one status line per record."""
        output = TextFormatter().format(sample_diff, "changes.patch")
        lines = output.splitlines()
        assert lines[0] == "Target: changes.patch"
        assert "3 changed file(s)" in lines
        assert "A    src/new.py (100644)" in lines
        assert "R005 src/old.py -> src/renamed.py" in lines
        assert "M    run.sh (100644 -> 100755)" in lines

    def test_patch_excluded_by_default(self, sample_diff):
        """Test bodies are omitted unless requested."""
        output = TextFormatter().format(sample_diff, "-")
        assert "+print('hi')" not in output

    def test_patch_included(self, sample_diff):
        """Test bodies are indented under their record."""
        output = TextFormatter().format(sample_diff, "-", include_patch=True)
        assert "    @@ -0,0 +1 @@" in output.splitlines()
        assert "    +print('hi')" in output.splitlines()


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_name(self):
        assert JSONFormatter().name == "json"

    def test_structure(self, sample_diff):
        """Test top-level JSON structure."""
        data = json.loads(JSONFormatter().format(sample_diff, "changes.patch"))
        assert data["version"] == __version__
        assert data["target"] == "changes.patch"
        assert data["summary"]["total"] == 3
        assert data["summary"]["by_change_type"] == {
            "added": 1,
            "renamed": 1,
            "mode_changed": 1,
        }
        assert len(data["records"]) == 3

    def test_record_fields(self, sample_diff):
        """Test records carry blob ids rather than handles."""
        data = json.loads(JSONFormatter().format(sample_diff, "-"))
        added = data["records"][0]
        assert added["blob_before"] is None
        assert added["blob_after"] == "a" * 40
        assert added["is_new"] is True
        assert added["change_type"] == "added"
        assert "patch_body" not in added

    def test_patch_included(self, sample_diff):
        """Test patch bodies appear when requested."""
        data = json.loads(JSONFormatter().format(sample_diff, "-", include_patch=True))
        assert data["records"][0]["patch_body"] == "@@ -0,0 +1 @@\n+print('hi')"
        assert data["records"][1]["patch_body"] is None
