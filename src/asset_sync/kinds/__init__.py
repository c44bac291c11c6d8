"""Asset kinds handled by the sync pipeline.

Each kind describes how one class of assets is discovered, summarized
and where it is copied to.
"""

from .agents import AgentKind
from .base import AssetKind
from .workflows import WorkflowKind

AGENTS = AgentKind()
WORKFLOWS = WorkflowKind()

__all__ = ["AGENTS", "WORKFLOWS", "AgentKind", "AssetKind", "WorkflowKind"]
