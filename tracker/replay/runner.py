"""
Replay runner: reconstruct todo state from a session branch.

Two equivalent strategies:
- reconstruct(): keep the snapshot of the last tracker record on the path
- replay(): re-apply every recorded request through the reducer

The snapshot strategy is what the tracker uses; replay exists to check it.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.actions import ActionRequest
from ..core.reducer import Reducer
from ..core.state import TodoState
from ..log.record import ActionRecord

DEFAULT_TOOL_NAME = "todo"


@dataclass(frozen=True)
class ReconstructResult:
    """
    Result of reconstruction.

    Fields:
        state: State as of the branch tip
        scanned: Number of records on the path
        matched: Number of tracker records seen
        source_id: Entry id of the record the state was taken from (None = default state)
    """
    state: TodoState
    scanned: int
    matched: int
    source_id: Optional[str] = None


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of full replay.

    Fields:
        state: Final state after applying requests
        applied: Number of requests applied
    """
    state: TodoState
    applied: int


def reconstruct(path: Iterable[ActionRecord], tool_name: str = DEFAULT_TOOL_NAME) -> ReconstructResult:
    """
    Recover state from the last tracker snapshot on a branch path.

    A path with no tracker record yields the default empty state.

    Args:
        path: Records from the session root to the active tip, root first
        tool_name: Tool identity of this tracker

    Returns:
        ReconstructResult with the retained state
    """
    st = TodoState.initial()
    scanned = 0
    matched = 0
    source_id = None

    for record in path:
        scanned += 1
        if not record.is_tool_result(tool_name):
            continue
        snapshot = record.snapshot()
        if snapshot is None:
            continue
        matched += 1
        st = snapshot
        source_id = record.id

    return ReconstructResult(state=st, scanned=scanned, matched=matched, source_id=source_id)


def replay(
    path: Iterable[ActionRecord],
    reducer: Reducer,
    tool_name: str = DEFAULT_TOOL_NAME,
) -> ReplayResult:
    """
    Rebuild state by re-applying every recorded request from the default state.

    Same path always produces same state.
    """
    st = TodoState.initial()
    count = 0

    for record in path:
        if not record.is_tool_result(tool_name) or not record.request:
            continue
        st = reducer.apply(st, ActionRequest.from_dict(record.request)).state
        count += 1

    return ReplayResult(state=st, applied=count)
