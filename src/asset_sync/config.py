"""Runtime configuration for a sync run.

A SyncConfig is built once at startup and passed down to the resolver
and the pipeline. The source URL is chosen with this precedence:

1. The command-line argument
2. The kind's environment variable (AGENTS_REPO / WORKFLOWS_REPO)
3. DEFAULT_REPO_URL
"""

import os
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .kinds.base import AssetKind

DEFAULT_REPO_URL = "https://github.com/juanpaconpa/claude-agents.git"

# Overrides the directory under which remote clones are cached
CACHE_DIR_ENV_VAR = "ASSET_SYNC_CACHE_DIR"


@dataclass(frozen=True)
class SyncConfig:
    """Settings for syncing one asset kind.

    Attributes:
        kind: Asset kind being synced
        repo_url: Source repository URL after precedence resolution
        local_checkout: Directory checked for a usable local checkout
        destination: Folder the assets are copied into
        cache_root: Directory holding cached remote clones
    """

    kind: AssetKind
    repo_url: str
    local_checkout: Path
    destination: Path
    cache_root: Path

    @property
    def uses_default_repo(self) -> bool:
        return self.repo_url == DEFAULT_REPO_URL

    @classmethod
    def from_environment(
        cls,
        kind: AssetKind,
        cli_url: str | None = None,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
        destination: Path | None = None,
    ) -> "SyncConfig":
        """Build the configuration from CLI input and the environment.

        Args:
            kind: Asset kind being synced
            cli_url: Repository URL given on the command line, if any
            environ: Environment mapping (defaults to os.environ)
            cwd: Consumer project directory (defaults to the current directory)
            destination: Explicit destination folder, if any

        Returns:
            Frozen SyncConfig
        """
        environ = os.environ if environ is None else environ
        cwd = cwd or Path.cwd()

        repo_url = cli_url or environ.get(kind.env_var) or DEFAULT_REPO_URL
        cache_root = environ.get(CACHE_DIR_ENV_VAR) or tempfile.gettempdir()

        return cls(
            kind=kind,
            repo_url=repo_url,
            local_checkout=cwd,
            destination=destination or cwd.joinpath(*kind.destination.parts),
            cache_root=Path(cache_root),
        )
