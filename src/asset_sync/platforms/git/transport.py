"""Thin wrapper around the ``git`` executable.

Only the three operations the sync pipeline needs are exposed. Any object
with the same methods can stand in for GitTransport (tests pass a Mock).
"""

import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Operations the git source relies on."""

    def clone(self, url: str, target: Path) -> None: ...

    def pull(self, checkout: Path) -> None: ...

    def remote_url(self, checkout: Path) -> str | None: ...


class GitTransport:
    """Runs git commands in a subprocess.

    clone() and pull() raise subprocess.CalledProcessError on a non-zero
    exit, and FileNotFoundError if git is not installed.
    """

    def __init__(self, executable: str = "git"):
        self.executable = executable

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            [self.executable, *args],
            capture_output=True,
            text=True,
            check=True,
        )

    def clone(self, url: str, target: Path) -> None:
        self._run("clone", "-q", url, str(target))

    def pull(self, checkout: Path) -> None:
        self._run("-C", str(checkout), "pull", "-q")

    def remote_url(self, checkout: Path) -> str | None:
        """Return ``remote.origin.url`` of a checkout, or None if unset."""
        try:
            result = self._run("-C", str(checkout), "config", "--get", "remote.origin.url")
        except (subprocess.CalledProcessError, FileNotFoundError):
            return None
        return result.stdout.strip() or None
