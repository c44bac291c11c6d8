"""Tests for the validation engine."""

from pathlib import Path

import pytest

from conftest import agent_text

from asset_sync.core.validator import field_error, load_schema, required_fields
from asset_sync.validation import (
    RULES,
    AssetDocument,
    RuleOutcome,
    ValidationRule,
    ValidationSummary,
    summarize,
    validate_directory,
    validate_document,
)

MALFORMED = "---\ndescription: short\nmodel: gpt-4\ncolor: magenta\n# Title\nbody\n"


def check(content: str | bytes, name: str = "agent.md"):
    raw = content.encode("utf-8") if isinstance(content, str) else content
    return validate_document(AssetDocument.from_bytes(Path(name), raw))


def statuses(report, rule: str) -> list[str]:
    return [outcome.status for outcome in report.for_rule(rule)]


class TestSchema:
    """Test the header schema helpers."""

    def test_required_fields(self) -> None:
        """Test that the schema requires the four header fields."""
        assert required_fields() == ["name", "description", "model", "color"]

    def test_field_error_reports_keyword(self) -> None:
        """Test that schema errors name the failed keyword."""
        assert field_error("name", "backend-architect") is None
        assert field_error("name", "Backend_Architect").validator == "pattern"
        assert field_error("description", "too short").validator == "minLength"
        assert field_error("model", "gpt-4").validator == "enum"

    def test_unknown_field_has_no_error(self) -> None:
        """Test that fields outside the schema are not checked."""
        assert "tools" not in load_schema()["properties"]
        assert field_error("tools", "anything") is None


class TestRules:
    """Test individual rule outcomes."""

    def test_well_formed_agent_passes_everything(self) -> None:
        """Test that a complete document produces only passes."""
        report = check(agent_text())

        assert report.count("fail") == 0
        assert report.count("warn") == 0
        assert report.count("pass") == 14

    def test_rules_run_in_order(self) -> None:
        """Test that outcomes follow the rule order."""
        report = check(agent_text())

        seen = list(dict.fromkeys(outcome.rule for outcome in report.outcomes))
        assert seen == [rule.name for rule in RULES]

    def test_empty_file_stops_after_first_rule(self) -> None:
        """Test that an empty file only reports the emptiness failure."""
        report = check(b"")

        assert [(o.rule, o.status) for o in report.outcomes] == [("non-empty", "fail")]

    def test_empty_file_uses_given_rules(self) -> None:
        """Test that an empty file is checked by the first rule passed in."""
        strict = ValidationRule("size", "fail", lambda doc: [RuleOutcome("size", "fail", "No bytes")])
        other = ValidationRule("other", "warn", lambda doc: [RuleOutcome("other", "warn", "Unused")])

        report = validate_document(AssetDocument.from_bytes(Path("agent.md"), b""), (strict, other))

        assert [(o.rule, o.message) for o in report.outcomes] == [("size", "No bytes")]

    def test_missing_header_start(self) -> None:
        """Test that a document not starting with the delimiter fails."""
        report = check("# Title\n" + agent_text())

        assert statuses(report, "header-start") == ["fail"]

    def test_missing_name_fails_once(self) -> None:
        """Test that a missing name yields exactly one failure."""
        report = check(agent_text(name=None))

        assert statuses(report, "name") == ["fail"]
        assert report.count("fail") == 1

    def test_name_not_kebab_case_warns(self) -> None:
        """Test that a badly formatted name is a warning."""
        report = check(agent_text(name="Backend_Architect"))

        assert statuses(report, "name") == ["pass", "warn"]

    @pytest.mark.parametrize(
        "description, expected",
        [
            ("x" * 19, "too short"),
            ("x" * 201, "too long"),
        ],
    )
    def test_description_length_band(self, description: str, expected: str) -> None:
        """Test that descriptions outside 20..200 chars warn."""
        report = check(agent_text(description=description))

        outcomes = report.for_rule("description")
        assert [o.status for o in outcomes] == ["pass", "warn"]
        assert expected in outcomes[1].message

    def test_description_length_echoed(self) -> None:
        """Test that an acceptable length is reported in the message."""
        report = check(agent_text(description="x" * 200))

        assert report.for_rule("description")[1].message.endswith("200 chars")

    def test_invalid_model_fails(self) -> None:
        """Test that a model outside the allow-list is a failure."""
        report = check(agent_text(model="gpt-4"))

        outcome = report.for_rule("model")[0]
        assert outcome.status == "fail"
        assert "inherit, sonnet, opus, haiku" in outcome.message

    def test_uncommon_color_warns(self) -> None:
        """Test that an unusual color is only advisory."""
        report = check(agent_text(color="magenta"))

        assert statuses(report, "color") == ["warn"]

    def test_missing_color_fails(self) -> None:
        """Test that the color field is still required."""
        assert statuses(check(agent_text(color=None)), "color") == ["fail"]

    def test_short_content_warns(self) -> None:
        """Test that a thin body is a warning and no body is a failure."""
        assert statuses(check(agent_text(body_lines=3)), "content") == ["warn"]
        assert statuses(check("---\nname: a\n---\n\n\n"), "content") == ["fail"]

    def test_missing_heading_warns(self) -> None:
        """Test that a body without an H1 heading is a warning."""
        text = agent_text().replace("# Agent", "## Agent")

        assert statuses(check(text), "heading") == ["warn"]

    def test_crlf_fails(self) -> None:
        """Test that Windows line endings are rejected."""
        report = check(agent_text().replace("\n", "\r\n"))

        assert statuses(report, "line-endings") == ["fail"]
        # The header is still read despite the carriage returns
        assert statuses(report, "name") == ["pass", "pass"]

    def test_non_utf8_warns(self) -> None:
        """Test that undecodable bytes are an encoding warning."""
        raw = agent_text().encode("utf-8") + b"Caf\xe9\n"

        assert statuses(check(raw), "encoding") == ["warn"]

    def test_long_lines_reported_once_with_count(self) -> None:
        """Test that long lines produce a single warning naming the count."""
        text = agent_text() + "y" * 501 + "\n" + "z" * 600 + "\n" + "w" * 500 + "\n"

        outcomes = check(text).for_rule("line-length")
        assert [o.status for o in outcomes] == ["warn"]
        assert "Found 2 line(s)" in outcomes[0].message

    def test_malformed_asset_is_deterministic(self) -> None:
        """Test that the same malformed document always scores the same."""
        triples = set()
        for _ in range(3):
            summary = summarize([check(MALFORMED)])
            triples.add((summary.passed, summary.failed, summary.warnings))

        assert triples == {(7, 3, 3)}


class TestValidationSummary:
    """Test aggregation."""

    def test_add_is_pure(self) -> None:
        """Test that adding a report returns a new summary."""
        empty = ValidationSummary()
        summary = empty.add(check(agent_text()))

        assert empty == ValidationSummary()
        assert summary.passed == 14

    def test_warnings_do_not_fail(self) -> None:
        """Test that only failures affect the overall status and the total."""
        assert ValidationSummary(passed=1, warnings=5).ok
        assert not ValidationSummary(passed=10, failed=1).ok
        assert ValidationSummary(passed=2, failed=1, warnings=3).total == 3


class TestValidateDirectory:
    """Test directory scans."""

    def test_missing_directory_fails(self, tmp_path: Path) -> None:
        """Test that a missing directory is a single failure."""
        reports = validate_directory(tmp_path / "agents")

        assert len(reports) == 1
        assert summarize(reports) == ValidationSummary(failed=1)

    def test_directory_without_agents_fails(self, tmp_path: Path) -> None:
        """Test that a directory with no documents fails."""
        (tmp_path / "notes.txt").write_text("hello")

        summary = summarize(validate_directory(tmp_path))

        assert summary == ValidationSummary(passed=1, failed=1)

    def test_scan_is_not_recursive(self, checkout: Path) -> None:
        """Test that only top-level documents are checked."""
        reports = validate_directory(checkout / "agents")

        assert [report.path.name for report in reports[1:]] == [
            "backend-architect.md",
            "code-reviewer.md",
        ]

    def test_missing_name_makes_run_fail(self, tmp_path: Path) -> None:
        """Test that one missing name fails the whole run."""
        (tmp_path / "good.md").write_text(agent_text())
        (tmp_path / "nameless.md").write_text(agent_text(name=None))

        reports = validate_directory(tmp_path)
        summary = summarize(reports)

        nameless = reports[2]
        assert nameless.path.name == "nameless.md"
        assert statuses(nameless, "name") == ["fail"]
        assert summary.failed == 1
        assert summary.passed == 2 + 14 + 12
        assert not summary.ok
