"""Asset Sync.

This package distributes reusable text assets (agent prompt documents and
CI workflow templates) from a canonical repository into consumer projects,
and validates agent documents against a structural schema.
"""

# Core library interface
from .catalog import AssetEntry, build_catalog
from .config import SyncConfig
from .copier import CopyResult, SyncSummary, copy_assets
from .errors import AssetSyncError, EmptyCatalogError, ResolutionError, SelectionEmptyError
from .kinds import AGENTS, WORKFLOWS, AssetKind
from .pipeline import SyncPipeline
from .registry import SourceRegistry
from .selection import parse_selection, select_entries
from .sources.base import LocalLocation, RemoteLocation, Source

# Validation
from .validation import ValidationReport, ValidationSummary, summarize, validate_directory

__version__ = "0.1.0"

# Auto-discover and register all platforms
SourceRegistry.discover_platforms()

__all__ = [
    # Primary library interface
    "SyncPipeline",
    "SyncConfig",
    "SourceRegistry",
    "Source",
    "LocalLocation",
    "RemoteLocation",
    "AssetKind",
    "AGENTS",
    "WORKFLOWS",
    # Stages
    "AssetEntry",
    "build_catalog",
    "parse_selection",
    "select_entries",
    "CopyResult",
    "SyncSummary",
    "copy_assets",
    # Validation
    "ValidationReport",
    "ValidationSummary",
    "summarize",
    "validate_directory",
    # Errors
    "AssetSyncError",
    "ResolutionError",
    "EmptyCatalogError",
    "SelectionEmptyError",
]
