"""
Replay system for branch-aware state reconstruction.

Must be 100% deterministic: same branch path -> same state.
"""

from .runner import DEFAULT_TOOL_NAME, ReconstructResult, ReplayResult, reconstruct, replay

__all__ = [
    "DEFAULT_TOOL_NAME",
    "ReconstructResult",
    "ReplayResult",
    "reconstruct",
    "replay",
]
