"""Exceptions raised by the sync pipeline.

Per-item copy failures and validation rule failures are not exceptions;
they are recorded in CopyResult and RuleOutcome values instead.
"""


class AssetSyncError(Exception):
    """Base class for fatal sync errors."""


class ResolutionError(AssetSyncError):
    """The asset source could not be materialized on disk (clone/pull failure, missing folder)."""


class EmptyCatalogError(AssetSyncError):
    """The resolved source contains no assets of the requested kind."""


class SelectionEmptyError(AssetSyncError):
    """The user's selection resolved to no catalog entries."""
