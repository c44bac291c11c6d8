"""Base abstractions for asset sources.

This module defines the interface that all sources implement so the sync
pipeline can work with a local checkout or a cached remote repository
without knowing which one it has.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from ..errors import ResolutionError


@dataclass(frozen=True)
class LocalLocation:
    """Assets read straight from a directory on disk."""

    path: Path


@dataclass(frozen=True)
class RemoteLocation:
    """Assets read from a cached clone of a remote repository.

    Attributes:
        url: Repository URL as given by the user
        cache_key: First 8 hex characters of the URL's MD5 digest
        checkout: Cache directory holding the clone
    """

    url: str
    cache_key: str
    checkout: Path


SourceLocation = LocalLocation | RemoteLocation


class Source(ABC):
    """Abstract base class for all asset sources.

    Implementations know how to make a repository checkout available on
    disk; resolve() then locates the asset folder inside it.
    """

    @property
    @abstractmethod
    def location(self) -> SourceLocation:
        """Where this source reads its assets from."""
        pass

    @abstractmethod
    def materialize(self) -> Path:
        """Ensure the checkout exists on disk.

        Returns:
            Root directory of the checkout

        Raises:
            ResolutionError: If the checkout cannot be made available
        """
        pass

    def resolve(self, subdir: str) -> Path:
        """Materialize the source and return its asset folder.

        Args:
            subdir: Folder inside the checkout holding the assets

        Returns:
            Path of the asset folder

        Raises:
            ResolutionError: If materializing fails or the folder is missing
        """
        asset_dir = self.materialize() / subdir
        if not asset_dir.is_dir():
            raise ResolutionError(f"Asset directory not found: {asset_dir}")
        return asset_dir
