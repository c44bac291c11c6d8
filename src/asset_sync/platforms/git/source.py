"""Remote git repository source adapter.

This module provides a Source implementation that clones a repository
into a cache directory and updates it on later runs. The cache directory
name is derived from an MD5 digest of the URL, so each distinct URL gets
its own clone and repeated runs reuse it.
"""

import hashlib
import subprocess
import sys
from pathlib import Path
from urllib.parse import urlparse

from ...errors import ResolutionError
from ...sources.base import RemoteLocation, Source
from .transport import GitTransport, Transport

# Number of hex digits of the URL digest used in the cache directory name
CACHE_KEY_LENGTH = 8

ALLOWED_SCHEMES = ("http", "https", "ssh", "git", "file", "")


def validate_url(url: str) -> None:
    """Validate a repository URL's scheme.

    Allows http(s), ssh, git and file URLs, plus scheme-less forms such as
    ``git@github.com:owner/repo.git`` and local paths.

    Args:
        url: URL to validate

    Raises:
        ValueError: If the URL is empty or uses another scheme
    """
    if not url:
        raise ValueError("Repository URL is empty")

    # scp-style "user@host:path" has no scheme: '@' is not a scheme character
    parsed = urlparse(url)

    if parsed.scheme not in ALLOWED_SCHEMES:
        raise ValueError(
            f"Invalid URL scheme: {parsed.scheme}. "
            f"Allowed schemes: {', '.join(s for s in ALLOWED_SCHEMES if s)}."
        )


def cache_key(url: str) -> str:
    """Deterministic cache key for a repository URL.

    Example:
        >>> len(cache_key("https://github.com/owner/repo.git"))
        8
    """
    return hashlib.md5(url.encode("utf-8")).hexdigest()[:CACHE_KEY_LENGTH]


class GitSource(Source):
    """Source adapter for a remote repository cached on local disk.

    Example:
        >>> source = GitSource(
        ...     "https://github.com/owner/agents.git",
        ...     cache_root=Path("/tmp"),
        ...     cache_prefix="claude-agents",
        ... )
        >>> source.location.checkout
        PosixPath('/tmp/claude-agents-sync-...')
    """

    def __init__(
        self,
        url: str,
        cache_root: Path,
        cache_prefix: str,
        transport: Transport | None = None,
    ):
        """Initialize the git source.

        Args:
            url: Repository URL
            cache_root: Directory under which clones are cached
            cache_prefix: Prefix for the cache directory name
            transport: Object performing clone/pull (defaults to GitTransport)

        Raises:
            ResolutionError: If the URL has a disallowed scheme
        """
        try:
            validate_url(url)
        except ValueError as e:
            raise ResolutionError(str(e)) from e

        self.url = url
        self.transport = transport or GitTransport()
        key = cache_key(url)
        self._location = RemoteLocation(
            url=url,
            cache_key=key,
            checkout=cache_root / f"{cache_prefix}-sync-{key}",
        )

    @property
    def location(self) -> RemoteLocation:
        return self._location

    def materialize(self) -> Path:
        """Clone the repository, or pull if a cached clone exists.

        A failed pull is an error: a stale cache is never used silently.
        """
        checkout = self._location.checkout
        print(f"Fetching assets from remote repository: {self.url}", file=sys.stderr)

        if checkout.exists():
            try:
                self.transport.pull(checkout)
            except (subprocess.CalledProcessError, OSError) as e:
                raise ResolutionError(
                    f"Failed to update cached repository {checkout}: {_describe(e)}"
                ) from e
            print("Repository updated", file=sys.stderr)
        else:
            try:
                self.transport.clone(self.url, checkout)
            except (subprocess.CalledProcessError, OSError) as e:
                raise ResolutionError(
                    f"Failed to clone repository {self.url}: {_describe(e)}"
                ) from e
            print("Repository cloned", file=sys.stderr)

        return checkout


def _describe(error: Exception) -> str:
    """Short description of a transport failure, preferring git's stderr."""
    if isinstance(error, subprocess.CalledProcessError):
        stderr = (error.stderr or "").strip()
        return stderr or f"git exited with status {error.returncode}"
    return str(error)
