"""Agent prompt documents.

Agents are markdown files with a ``---`` header block. They may be grouped
in namespace subfolders (``engineering/backend-architect.md``) which are
flattened away when copied.
"""

from pathlib import Path, PurePosixPath

from ..core.header import read_header_field
from .base import AssetKind


class AgentKind(AssetKind):
    """Recursive markdown discovery with header-based summaries."""

    name = "agents"
    label = "Agents"
    source_subdir = "agents"
    destination = PurePosixPath(".claude/agents")
    cache_prefix = "claude-agents"
    env_var = "AGENTS_REPO"
    fallback_summary = "No description available"

    def discover(self, root: Path) -> list[Path]:
        return [
            path
            for path in root.rglob("*.md")
            if path.is_file() and not self.is_hidden(path)
        ]

    def summarize(self, text: str) -> str | None:
        return read_header_field(text, "description")

    def display_name(self, relative_path: PurePosixPath) -> str:
        """Strip the extension, keeping the namespace folder.

        Example:
            "engineering/backend-architect.md" -> "engineering/backend-architect"
        """
        return str(relative_path.with_suffix(""))
