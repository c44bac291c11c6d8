"""Local checkout source adapter.

This module provides a Source implementation that reads assets from a
directory already present on disk, with no network access.
"""

from pathlib import Path

from ...errors import ResolutionError
from ...sources.base import LocalLocation, Source


class LocalSource(Source):
    """Source adapter for a local directory.

    Example:
        >>> source = LocalSource(Path('/work/claude-agents'))
        >>> agents_dir = source.resolve('agents')
    """

    def __init__(self, path: Path):
        self.path = path.resolve()

    @property
    def location(self) -> LocalLocation:
        return LocalLocation(self.path)

    def materialize(self) -> Path:
        if not self.path.is_dir():
            raise ResolutionError(f"Path is not a directory: {self.path}")
        return self.path
