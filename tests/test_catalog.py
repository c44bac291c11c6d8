"""Tests for catalog building, header parsing and asset kinds."""

import tempfile
from pathlib import Path, PurePosixPath

import pytest

from asset_sync.catalog import build_catalog, validate_path_safety
from asset_sync.core.header import parse_header, read_header_field
from asset_sync.kinds import AGENTS, WORKFLOWS
from asset_sync.kinds.workflows import extract_triggers


class TestParseHeader:
    """Test header block parsing."""

    def test_reads_fields_between_delimiters(self) -> None:
        """Test that key/value pairs inside the block are collected."""
        header = parse_header(["---", "name: demo", "model:  opus ", "---", "name: body"])

        assert header.fields == {"name": "demo", "model": "opus"}
        assert header.start == 1
        assert header.end == 4
        assert header.is_closed

    def test_first_value_wins(self) -> None:
        """Test that a repeated key keeps its first value."""
        header = parse_header(["---", "name: one", "name: two", "---"])
        assert header.get("name") == "one"

    def test_unclosed_block_still_yields_fields(self) -> None:
        """Test that a missing closing delimiter does not hide fields."""
        header = parse_header(["---", "name: demo", "body text"])

        assert header.get("name") == "demo"
        assert header.end is None
        assert not header.is_closed

    def test_blank_value_counts_as_missing(self) -> None:
        """Test that 'name:' with no value is treated as absent."""
        assert parse_header(["---", "name:", "---"]).get("name") is None

    def test_no_delimiters(self) -> None:
        """Test that a document without a block has no fields."""
        assert read_header_field("description: outside\n", "description") is None


class TestValidatePathSafety:
    """Test path traversal prevention."""

    def test_allows_paths_within_base(self) -> None:
        """Test that paths within base directory are allowed."""
        with tempfile.TemporaryDirectory() as tmpdir:
            base = Path(tmpdir)
            # Should not raise
            validate_path_safety(base / "subdir" / "file.md", base)

    def test_rejects_path_traversal(self) -> None:
        """Test that path traversal attempts are rejected."""
        with tempfile.TemporaryDirectory() as tmpdir:
            base = Path(tmpdir)
            dangerous_path = base / ".." / ".." / "etc" / "passwd"

            with pytest.raises(ValueError, match="escapes base directory"):
                validate_path_safety(dangerous_path, base)


class TestBuildCatalog:
    """Test catalog numbering and summaries."""

    def test_agents_numbered_by_sorted_path(self, checkout: Path) -> None:
        """Test that indices follow the sorted relative path."""
        entries = build_catalog(checkout / "agents", AGENTS)

        assert [entry.index for entry in entries] == [1, 2, 3]
        assert [str(entry.relative_path) for entry in entries] == [
            "backend-architect.md",
            "code-reviewer.md",
            "engineering/test-writer.md",
        ]

    def test_recatalog_is_stable(self, checkout: Path) -> None:
        """Test that re-cataloging an unchanged directory gives identical entries."""
        first = build_catalog(checkout / "agents", AGENTS)
        second = build_catalog(checkout / "agents", AGENTS)

        assert first == second

    def test_agent_display_name_and_summary(self, checkout: Path) -> None:
        """Test that namespaced agents keep their folder in the display name."""
        entry = build_catalog(checkout / "agents", AGENTS)[2]

        assert entry.display_name == "engineering/test-writer"
        assert entry.summary == "Writes focused unit tests for new code"
        assert entry.destination_name == "test-writer.md"

    def test_missing_header_uses_fallback(self, tmp_path: Path) -> None:
        """Test that documents without a header get the placeholder summary."""
        (tmp_path / "plain.md").write_text("description: not in a header\n# Plain\n")

        entries = build_catalog(tmp_path, AGENTS)

        assert entries[0].summary == "No description available"

    def test_hidden_files_skipped(self, tmp_path: Path) -> None:
        """Test that dotfiles are not cataloged."""
        (tmp_path / ".draft.md").write_text("---\n---\n")
        (tmp_path / "real.md").write_text("---\n---\n")

        entries = build_catalog(tmp_path, AGENTS)

        assert [entry.display_name for entry in entries] == ["real"]

    def test_escaping_symlink_skipped_with_warning(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a file outside the source is skipped, not fatal."""
        outside = tmp_path / "outside.md"
        outside.write_text("---\ndescription: secret\n---\n")
        source = tmp_path / "agents"
        source.mkdir()
        (source / "a.md").write_text("---\n---\n")
        (source / "link.md").symlink_to(outside)
        (source / "z.md").write_text("---\n---\n")

        entries = build_catalog(source, AGENTS)

        assert [entry.display_name for entry in entries] == ["a", "z"]
        assert [entry.index for entry in entries] == [1, 2]
        assert "Warning: Skipping link.md" in capsys.readouterr().err

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Test that an empty source yields an empty catalog."""
        assert build_catalog(tmp_path, AGENTS) == []


class TestWorkflowKind:
    """Test workflow discovery and summaries."""

    def test_flat_yaml_discovery(self, checkout: Path) -> None:
        """Test that .yml and .yaml files are both cataloged, sorted."""
        workflows = checkout / "git-workflows"
        (workflows / "nested").mkdir()
        (workflows / "nested" / "skip.yml").write_text("name: Nested\n")

        entries = build_catalog(workflows, WORKFLOWS)

        assert [entry.display_name for entry in entries] == ["ci.yml", "release.yaml"]

    def test_summary_includes_triggers(self, checkout: Path) -> None:
        """Test that the name and triggers make up the summary."""
        entries = build_catalog(checkout / "git-workflows", WORKFLOWS)

        assert entries[0].summary == "CI (triggers: push, pull_request)"
        assert entries[1].summary == "GitHub Workflow"

    def test_trigger_window_is_limited(self) -> None:
        """Test that only the lines just after 'on:' are searched."""
        lines = ["on:", "  push:", "", "", "", "", "  schedule:"]
        assert extract_triggers(lines) == ["push"]

    def test_at_most_three_triggers(self) -> None:
        """Test that the trigger list is capped."""
        lines = ["on:", "  push:", "  pull_request:", "  schedule:", "  workflow_dispatch:"]
        assert extract_triggers(lines) == ["push", "pull_request", "schedule"]

    def test_secret_names_sorted_and_distinct(self) -> None:
        """Test that referenced secrets are collected once, in order."""
        text = "token: ${{ secrets.NPM_TOKEN }}\nkey: ${{ secrets.AWS_KEY }}\nagain: ${{ secrets.NPM_TOKEN }}\n"

        assert WORKFLOWS.post_sync_notes(text) == ["AWS_KEY", "NPM_TOKEN"]
        assert WORKFLOWS.post_sync_notes("token: ${{ github.token }}\n") == []
        assert AGENTS.post_sync_notes(text) == []

    def test_display_name_keeps_extension(self) -> None:
        """Test that workflow names are shown as file names."""
        assert WORKFLOWS.display_name(PurePosixPath("ci.yml")) == "ci.yml"
