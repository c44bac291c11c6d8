"""CI pipeline templates (GitHub Actions workflows).

Workflows are YAML files kept flat in a single folder. They have no
delimited header; the summary comes from the top-level ``name:`` key and
the first few triggers listed under ``on:``.
"""

import re
from pathlib import Path, PurePosixPath

from .base import AssetKind

# Triggers worth showing in the catalog
KNOWN_TRIGGERS = ("push", "pull_request", "schedule", "workflow_dispatch")

# How many lines after "on:" are searched for triggers
TRIGGER_WINDOW = 5

MAX_TRIGGERS = 3

NAME_PATTERN = re.compile(r"^name:\s*(.*)$")
TRIGGER_PATTERN = re.compile(r"^\s+(%s)\b" % "|".join(KNOWN_TRIGGERS))

# Repository secrets referenced as ${{ secrets.NAME }}
SECRET_PATTERN = re.compile(r"secrets\.([A-Z_]+)")


def extract_triggers(lines: list[str]) -> list[str]:
    """Return up to three known triggers listed right after ``on:``."""
    for number, line in enumerate(lines):
        if line.startswith("on:"):
            window = lines[number + 1:number + 1 + TRIGGER_WINDOW]
            found = [m.group(1) for m in map(TRIGGER_PATTERN.match, window) if m]
            return found[:MAX_TRIGGERS]
    return []


class WorkflowKind(AssetKind):
    """Flat YAML discovery with name/trigger summaries."""

    name = "workflows"
    label = "Workflows"
    source_subdir = "git-workflows"
    destination = PurePosixPath(".github/workflows")
    cache_prefix = "claude-workflows"
    env_var = "WORKFLOWS_REPO"
    fallback_summary = "GitHub Workflow"

    def discover(self, root: Path) -> list[Path]:
        candidates = [*root.glob("*.yml"), *root.glob("*.yaml")]
        return [
            path
            for path in candidates
            if path.is_file() and not self.is_hidden(path)
        ]

    def summarize(self, text: str) -> str | None:
        lines = text.splitlines()

        title = None
        for line in lines:
            match = NAME_PATTERN.match(line)
            if match:
                title = match.group(1).replace('"', "").strip()
                break

        if not title:
            return None

        triggers = extract_triggers(lines)
        if triggers:
            return f"{title} (triggers: {', '.join(triggers)})"
        return title

    def post_sync_notes(self, text: str) -> list[str]:
        return sorted(set(SECRET_PATTERN.findall(text)))
