"""Sync pipeline for copying assets into a project.

This module ties the stages together: resolve the source, catalog its
assets, resolve a selection against the catalog, and copy the selection.
Each stage runs to completion before the next one starts.
"""

from pathlib import Path

from .catalog import AssetEntry, build_catalog
from .config import SyncConfig
from .copier import SyncSummary, copy_assets
from .errors import EmptyCatalogError
from .kinds.base import AssetKind
from .platforms.git.transport import Transport
from .selection import select_entries
from .sources.base import Source
from .sources.resolver import resolve_source


class SyncPipeline:
    """Main interface for syncing one asset kind.

    The pipeline is source-agnostic: it works with any Source
    implementation.

    Example:
        >>> # Via configuration (recommended)
        >>> config = SyncConfig.from_environment(AGENTS)
        >>> pipeline = SyncPipeline.from_config(config)
        >>> catalog = pipeline.catalog()
        >>> summary = pipeline.sync(pipeline.select("1-3"), config.destination)
        >>>
        >>> # Direct instantiation (advanced)
        >>> pipeline = SyncPipeline(LocalSource(Path('/work/claude-agents')), AGENTS)
    """

    def __init__(self, source: Source, kind: AssetKind):
        """Initialize the pipeline.

        Args:
            source: Source instance to read assets from
            kind: Asset kind deciding discovery and summaries
        """
        self.source = source
        self.kind = kind
        self._asset_dir: Path | None = None
        self._catalog: list[AssetEntry] | None = None

    @classmethod
    def from_config(cls, config: SyncConfig, transport: Transport | None = None) -> "SyncPipeline":
        """Create a pipeline whose source is chosen from the configuration."""
        return cls(resolve_source(config, transport), config.kind)

    def resolve(self) -> Path:
        """Materialize the source and return its asset folder.

        Raises:
            ResolutionError: If the source cannot be materialized
        """
        if self._asset_dir is None:
            self._asset_dir = self.source.resolve(self.kind.source_subdir)
        return self._asset_dir

    def catalog(self) -> list[AssetEntry]:
        """Catalog the assets in the resolved source.

        Raises:
            ResolutionError: If the source cannot be materialized
            EmptyCatalogError: If no assets are found
        """
        if self._catalog is None:
            asset_dir = self.resolve()
            entries = build_catalog(asset_dir, self.kind)
            if not entries:
                raise EmptyCatalogError(
                    f"No {self.kind.label.lower()} found in {asset_dir}"
                )
            self._catalog = entries
        return self._catalog

    def select(self, raw: str) -> list[AssetEntry]:
        """Resolve a selection string against the catalog.

        Raises:
            SelectionEmptyError: If nothing valid was selected
        """
        return select_entries(self.catalog(), raw)

    def sync(self, entries: list[AssetEntry], destination: Path) -> SyncSummary:
        """Copy entries into the destination folder."""
        return copy_assets(self.resolve(), entries, destination)
