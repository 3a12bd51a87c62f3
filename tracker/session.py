"""
TodoTracker: the owned state for one branch attachment.

The tracker keeps the current TodoState in memory, applies actions through
the reducer, and rebuilds the state from the session log only when the
active branch changes under it.
"""

from typing import Any, Dict, Iterable, Optional, Tuple, Union

from .core.actions import ActionRequest, ActionResult, STATUS_ACTIONS
from .core.handlers import build_reducer
from .core.reducer import Reducer
from .core.state import TodoState
from .log.record import ActionRecord, TOOL_RESULT
from .log.store import SessionLog
from .logging_config import get_logger
from .replay.runner import DEFAULT_TOOL_NAME, ReconstructResult, reconstruct

SESSION_START = "session_start"
SESSION_SWITCH = "session_switch"
SESSION_FORK = "session_fork"
SESSION_TREE = "session_tree"

# Branch-pointer changes that invalidate the in-memory state
TRIGGERS = (SESSION_START, SESSION_SWITCH, SESSION_FORK, SESSION_TREE)


class TodoTracker:
    """
    Reducer/reconstructor pair bound to one tracked list.

    Usage:
        tracker = TodoTracker()
        tracker.on_event("session_start", log.get_branch())
        result, record = tracker.record(log, {"action": "add", "text": "x"})
    """

    def __init__(self, tool_name: str = DEFAULT_TOOL_NAME, reducer: Optional[Reducer] = None) -> None:
        self.tool_name = tool_name
        self.reducer = reducer or build_reducer()
        self._state = TodoState.initial()
        self._logger = get_logger(__name__, trace_id=tool_name)

    @property
    def state(self) -> TodoState:
        return self._state

    def on_event(self, trigger: str, path: Iterable[ActionRecord]) -> ReconstructResult:
        """
        Handle a branch-change event by rebuilding state from the new path.

        Raises:
            ValueError: If trigger is not one of TRIGGERS
        """
        if trigger not in TRIGGERS:
            raise ValueError(f"Not a branch-change trigger: {trigger}")
        return self.reconstruct(path, trigger)

    def reconstruct(self, path: Iterable[ActionRecord], trigger: str = "manual") -> ReconstructResult:
        result = reconstruct(path, self.tool_name)
        self._state = result.state
        self._logger.info(
            "State reconstructed",
            extra={
                "trigger": trigger,
                "scanned": result.scanned,
                "matched": result.matched,
                "source_id": result.source_id,
            },
        )
        return result

    def attach(self, log: SessionLog) -> ReconstructResult:
        """Attach to a session log, rebuilding state from its active branch."""
        return self.on_event(SESSION_START, log.get_branch())

    def execute(self, request: Union[ActionRequest, Dict[str, Any]]) -> ActionResult:
        """
        Apply one action to the in-memory state.

        Failed actions leave the state untouched.
        """
        if not isinstance(request, ActionRequest):
            request = ActionRequest.from_dict(request)

        prev = self._state
        result = self.reducer.apply(prev, request)
        if not result.ok:
            self._logger.info(
                "Action rejected",
                extra={"action": result.action, "error": result.error, "error_kind": result.error_kind},
            )
            return result

        self._state = result.state
        self._log_reason_overwrite(prev, request)
        self._logger.debug(
            "Action applied",
            extra={"action": result.action, "items": len(result.state.items), "next_id": result.state.next_id},
        )
        return result

    def record(
        self, log: SessionLog, request: Union[ActionRequest, Dict[str, Any]]
    ) -> Tuple[ActionResult, ActionRecord]:
        """Execute an action and append its outcome to the session log."""
        if not isinstance(request, ActionRequest):
            request = ActionRequest.from_dict(request)
        result = self.execute(request)
        entry = log.append(
            role=TOOL_RESULT,
            tool_name=self.tool_name,
            request=request.to_dict(),
            details=result.details(),
        )
        return result, entry

    def _log_reason_overwrite(self, prev: TodoState, request: ActionRequest) -> None:
        # A transition replaces the reason wholesale; make dropped reasons visible
        if request.action not in STATUS_ACTIONS:
            return
        before = prev.find(request.id)
        after = self._state.find(request.id)
        if before is None or after is None or not before.reason:
            return
        if before.reason != after.reason:
            self._logger.debug(
                "reason_overwritten",
                extra={
                    "item_id": before.id,
                    "old_reason": before.reason,
                    "new_reason": after.reason,
                    "old_status": before.status,
                    "new_status": after.status,
                },
            )
