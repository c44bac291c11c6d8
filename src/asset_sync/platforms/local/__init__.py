"""Read assets from a checkout already on disk."""

from pathlib import Path

from ...registry import SourceRegistry
from .source import LocalSource


def _local_source(path: Path, **kwargs) -> LocalSource:
    return LocalSource(path)


SourceRegistry.register_factory("local", _local_source)

__all__ = ["LocalSource"]
