"""Shared fixtures for asset document tests."""

from pathlib import Path

import pytest

REPO_URL = "https://github.com/example/claude-agents.git"


def agent_text(
    name: str | None = "backend-architect",
    description: str | None = "Designs scalable backend services and APIs for teams",
    model: str | None = "sonnet",
    color: str | None = "blue",
    body_lines: int = 11,
) -> str:
    """Build an agent document; pass None to leave a field out."""
    header = ["---"]
    for key, value in (
        ("name", name),
        ("description", description),
        ("model", model),
        ("color", color),
    ):
        if value is not None:
            header.append(f"{key}: {value}")
    header.append("---")

    body = ["", "# Agent", ""]
    body.extend(f"Instruction line {i}." for i in range(1, body_lines + 1))

    return "\n".join(header + body) + "\n"


@pytest.fixture
def checkout(tmp_path: Path) -> Path:
    """A repository checkout holding three agents and two workflows."""
    root = tmp_path / "claude-agents"

    agents = root / "agents"
    (agents / "engineering").mkdir(parents=True)
    (agents / "code-reviewer.md").write_text(
        agent_text(name="code-reviewer", description="Reviews pull requests for style and bugs")
    )
    (agents / "backend-architect.md").write_text(agent_text())
    (agents / "engineering" / "test-writer.md").write_text(
        agent_text(name="test-writer", description="Writes focused unit tests for new code")
    )

    workflows = root / "git-workflows"
    workflows.mkdir()
    (workflows / "ci.yml").write_text(
        'name: "CI"\non:\n  push:\n    branches: [main]\n  pull_request:\njobs: {}\n'
    )
    (workflows / "release.yaml").write_text("on:\n  workflow_dispatch:\njobs: {}\n")

    return root
