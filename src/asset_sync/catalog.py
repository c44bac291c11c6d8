"""Asset discovery and catalog numbering.

This module turns a resolved source directory into an ordered, numbered
list of assets. Numbering follows the sorted relative path of each file,
so the same directory always yields the same indices.
"""

import sys
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from .kinds.base import AssetKind

# Maximum length for summary strings shown in the listing
MAX_SUMMARY_LENGTH = 2048


@dataclass(frozen=True)
class AssetEntry:
    """One numbered asset in a catalog snapshot.

    Indices are only meaningful for the catalog they came from.
    """

    index: int  # 1-based position in sorted discovery order
    relative_path: PurePosixPath  # Path under the source root
    display_name: str  # Presentation form of the path
    summary: str  # Header-derived summary or the kind's fallback

    @property
    def destination_name(self) -> str:
        """File name used at the copy destination (namespace dropped)."""
        return self.relative_path.name


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Validate that a path stays within the base directory.

    This prevents symlinks in a source checkout from pulling in files
    from elsewhere on disk.

    Args:
        path: Path to validate
        base_dir: Base directory that path must be within

    Raises:
        ValueError: If path escapes the base directory
    """
    resolved_path = path.resolve()
    resolved_base = base_dir.resolve()

    if not resolved_path.is_relative_to(resolved_base):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


def build_catalog(root: Path, kind: AssetKind) -> list[AssetEntry]:
    """Enumerate the assets of one kind under a source directory.

    Args:
        root: Resolved source directory
        kind: Asset kind deciding discovery and summaries

    Returns:
        Entries numbered 1..N in order of relative path. Files that cannot
        be read are skipped with a warning on stderr.
    """
    candidates = sorted(
        (PurePosixPath(path.relative_to(root).as_posix()) for path in kind.discover(root)),
        key=str,
    )

    entries: list[AssetEntry] = []
    for relative_path in candidates:
        file_path = root.joinpath(*relative_path.parts)

        try:
            validate_path_safety(file_path, root)
            text = file_path.read_text(encoding="utf-8", errors="replace")
        except (OSError, ValueError) as e:
            # Log error to stderr but continue processing
            print(f"Warning: Skipping {relative_path}: {e}", file=sys.stderr)
            continue

        summary = kind.summarize(text) or kind.fallback_summary

        entries.append(
            AssetEntry(
                index=len(entries) + 1,
                relative_path=relative_path,
                display_name=kind.display_name(relative_path),
                summary=summary[:MAX_SUMMARY_LENGTH],
            )
        )

    return entries
