"""Source adapters for the sync pipeline.

This package contains base classes for sources and the logic choosing
between them. Concrete implementations live in the platforms/ directory.
"""

from .base import LocalLocation, RemoteLocation, Source, SourceLocation

__all__ = ["LocalLocation", "RemoteLocation", "Source", "SourceLocation"]
