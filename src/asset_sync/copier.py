"""Copying selected assets into a consumer project.

Assets are copied into a single flat folder: only the file's base name is
kept, so ``engineering/backend-architect.md`` lands as
``backend-architect.md``. When two selected assets share a base name the
later one in selection order wins.
"""

import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .catalog import AssetEntry
from .core.types import CopyStatus


@dataclass(frozen=True)
class CopyResult:
    """Outcome of copying one catalog entry."""

    entry: AssetEntry
    status: CopyStatus
    target: Path
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "copied"


@dataclass
class SyncSummary:
    """Totals for one copy batch."""

    destination: Path
    results: list[CopyResult] = field(default_factory=list)

    @property
    def copied_count(self) -> int:
        return sum(1 for result in self.results if result.ok)

    @property
    def failed_count(self) -> int:
        return sum(1 for result in self.results if not result.ok)


def copy_entry(source_dir: Path, entry: AssetEntry, destination: Path) -> CopyResult:
    """Copy a single entry, recording rather than raising failures."""
    source_file = source_dir.joinpath(*entry.relative_path.parts)
    target = destination / entry.destination_name

    if not source_file.is_file():
        return CopyResult(entry, "not_found", target, f"Source file not found: {source_file}")

    try:
        shutil.copyfile(source_file, target)
    except OSError as e:
        return CopyResult(entry, "io_error", target, str(e))

    return CopyResult(entry, "copied", target)


def copy_assets(
    source_dir: Path,
    entries: Iterable[AssetEntry],
    destination: Path,
) -> SyncSummary:
    """Copy selected entries into a flat destination folder.

    The destination is created if needed. Each entry is copied
    independently, so one failure does not stop the batch.

    Args:
        source_dir: Resolved source directory the catalog was built from
        entries: Selected catalog entries, in selection order
        destination: Target folder

    Returns:
        SyncSummary with one result per entry

    Raises:
        OSError: If the destination folder itself cannot be created
    """
    destination.mkdir(parents=True, exist_ok=True)

    summary = SyncSummary(destination=destination)
    for entry in entries:
        summary.results.append(copy_entry(source_dir, entry, destination))

    return summary
