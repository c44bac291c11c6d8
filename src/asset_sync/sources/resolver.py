"""Choosing between a local checkout and a remote repository.

When the tool runs inside a clone of the requested repository, assets are
read from that clone directly. Otherwise the repository is fetched into
the cache through the git source.
"""

from ..config import SyncConfig
from ..platforms.git import GitTransport, Transport
from ..registry import SourceRegistry
from .base import Source


def normalize_remote(url: str) -> str:
    """Normalize a remote URL for comparison.

    Example:
        >>> normalize_remote("https://github.com/owner/repo.git/")
        'https://github.com/owner/repo'
    """
    url = url.strip().rstrip("/")
    return url[: -len(".git")] if url.endswith(".git") else url


def local_checkout_matches(config: SyncConfig, transport: Transport) -> bool:
    """Check whether the local checkout can serve the requested repository.

    Args:
        config: Run configuration
        transport: Transport used to read the checkout's origin URL

    Returns:
        True if the checkout holds the kind's asset folder, is a git work
        tree, and its origin is the requested URL
    """
    checkout = config.local_checkout
    if not (checkout / config.kind.source_subdir).is_dir():
        return False
    if not (checkout / ".git" / "config").is_file():
        return False

    current_remote = transport.remote_url(checkout)
    if not current_remote:
        return False
    return normalize_remote(current_remote) == normalize_remote(config.repo_url)


def resolve_source(config: SyncConfig, transport: Transport | None = None) -> Source:
    """Pick the source for a sync run.

    Args:
        config: Run configuration
        transport: Git transport override (defaults to GitTransport)

    Returns:
        A local source when the fast path applies, else a git source
    """
    transport = transport or GitTransport()

    if local_checkout_matches(config, transport):
        return SourceRegistry.create_source("local", path=config.local_checkout)

    return SourceRegistry.create_source(
        "git",
        url=config.repo_url,
        cache_root=config.cache_root,
        cache_prefix=config.kind.cache_prefix,
        transport=transport,
    )

