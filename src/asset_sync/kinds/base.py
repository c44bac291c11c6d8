"""Base class for asset kinds.

An asset kind bundles the policy for one class of distributable files:
where they live in the source repository, how they are discovered, how
they are summarized for display, and where they are copied to.
"""

from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath


class AssetKind(ABC):
    """Abstract base class for asset kinds.

    Attributes:
        name: Short identifier, e.g. 'agents'
        label: Human-readable plural used in messages
        source_subdir: Folder holding the assets inside the source checkout
        destination: Default destination, relative to the consumer project
        cache_prefix: Prefix for the remote cache directory name
        env_var: Environment variable overriding the source URL
        fallback_summary: Summary shown when none can be extracted
    """

    name: str
    label: str
    source_subdir: str
    destination: PurePosixPath
    cache_prefix: str
    env_var: str
    fallback_summary: str

    @abstractmethod
    def discover(self, root: Path) -> list[Path]:
        """Find candidate asset files under a source directory.

        Args:
            root: Resolved source directory

        Returns:
            Absolute file paths, in any order (the catalog sorts them)
        """
        pass

    @abstractmethod
    def summarize(self, text: str) -> str | None:
        """Extract a short summary from a document's text.

        Args:
            text: Full document text

        Returns:
            Summary string, or None to use the fallback
        """
        pass

    def post_sync_notes(self, text: str) -> list[str]:
        """Names the user must set up after installing a document.

        Args:
            text: Text of an installed document

        Returns:
            Sorted, distinct names (empty for kinds with no follow-up)
        """
        return []

    def display_name(self, relative_path: PurePosixPath) -> str:
        """Presentation name for an asset path."""
        return str(relative_path)

    @staticmethod
    def is_hidden(path: Path) -> bool:
        return path.name.startswith(".")
