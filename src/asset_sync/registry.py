"""Named source factories.

Platforms under ``asset_sync/platforms`` register a factory here when they
are imported. The resolver asks for sources by name ('local' or 'git') so
it never imports a concrete platform class itself.
"""

import importlib
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .kinds.base import AssetKind
    from .pipeline import SyncPipeline
    from .sources.base import Source

SourceFactory = Callable[..., "Source"]


class SourceRegistry:
    """Class-level map from source name to factory."""

    _factories: dict[str, SourceFactory] = {}

    @classmethod
    def register_factory(cls, name: str, factory: SourceFactory) -> None:
        """Register (or replace) the factory for a source name.

        Example:
            >>> SourceRegistry.register_factory('local', lambda path: LocalSource(path))
        """
        cls._factories[name] = factory

    @classmethod
    def create_source(cls, source_name: str, **kwargs) -> "Source":
        """Build a source by name, passing kwargs to its factory.

        Raises:
            ValueError: If no factory is registered under source_name
        """
        factory = cls._factories.get(source_name)
        if factory is None:
            known = ", ".join(sorted(cls._factories)) or "none"
            raise ValueError(f"Unknown source: '{source_name}'. Available sources: {known}")
        return factory(**kwargs)

    @classmethod
    def create_pipeline(cls, source_name: str, kind: "AssetKind", **kwargs) -> "SyncPipeline":
        """Build a sync pipeline for one asset kind over a named source.

        Example:
            >>> pipeline = SourceRegistry.create_pipeline(
            ...     'local', AGENTS, path=Path('/work/claude-agents')
            ... )
            >>> pipeline.catalog()
        """
        # pipeline imports the resolver, which imports this module
        from .pipeline import SyncPipeline

        return SyncPipeline(cls.create_source(source_name, **kwargs), kind)

    @classmethod
    def list_sources(cls) -> list[str]:
        return sorted(cls._factories)

    @classmethod
    def discover_platforms(cls) -> None:
        """Import every platform package so it can register its factory.

        A platform that fails to import is a packaging bug, so the
        ImportError is left to propagate.
        """
        platforms_dir = Path(__file__).parent / "platforms"

        for entry in sorted(platforms_dir.iterdir()):
            if entry.is_dir() and (entry / "__init__.py").exists():
                importlib.import_module(f".platforms.{entry.name}", package=__package__)
