"""Read assets from a remote repository cloned into a per-URL cache.

Usage:
    >>> from asset_sync import SourceRegistry
    >>> source = SourceRegistry.create_source(
    ...     'git',
    ...     url='https://github.com/owner/agents.git',
    ...     cache_root=Path('/tmp'),
    ...     cache_prefix='claude-agents',
    ... )
    >>> source.resolve('agents')
"""

from pathlib import Path

from ...registry import SourceRegistry
from .source import GitSource, cache_key, validate_url
from .transport import GitTransport, Transport


def _git_source(
    url: str,
    cache_root: Path,
    cache_prefix: str,
    transport: Transport | None = None,
    **kwargs,
) -> GitSource:
    return GitSource(url, cache_root=cache_root, cache_prefix=cache_prefix, transport=transport)


SourceRegistry.register_factory("git", _git_source)

__all__ = ["GitSource", "GitTransport", "Transport", "cache_key", "validate_url"]
