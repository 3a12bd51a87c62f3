"""
Reducer: Pure state transition functions.

The reducer is the heart of the tracker. It must be:
- Pure (no side effects, no I/O)
- Deterministic (same input -> same output)
- Total (domain errors become error results, never exceptions)
"""

from typing import Callable, Dict, Tuple

from .actions import ActionRequest, ActionResult, UNKNOWN_ACTION
from .errors import TrackerError
from .state import TodoState

# Handler signature: (current_state, request) -> (new_state, response_text)
Handler = Callable[[TodoState, ActionRequest], Tuple[TodoState, str]]


class Reducer:
    """
    Registry of action handlers for state transitions.

    Usage:
        reducer = Reducer()
        reducer.register("add", handle_add)
        result = reducer.apply(state, ActionRequest(action="add", text="x"))
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, Handler] = {}

    def register(self, action: str, handler: Handler) -> None:
        """
        Register action handler.

        Args:
            action: Action kind
            handler: Pure function (state, request) -> (new_state, text);
                raises TrackerError subclasses for invalid requests
        """
        self._handlers[action] = handler

    def handles(self, action: str) -> bool:
        return action in self._handlers

    def apply(self, state: TodoState, request: ActionRequest) -> ActionResult:
        """
        Apply request to state using the registered handler.

        Args:
            state: Current state
            request: Action to apply

        Returns:
            ActionResult with the new state, or with the unchanged state and
            an error code when the handler rejected the request
        """
        handler = self._handlers.get(request.action)
        if handler is None:
            return ActionResult(
                action=UNKNOWN_ACTION,
                text=f"Unknown action: {request.action}",
                state=state,
                error=f"unknown action: {request.action}",
                error_kind="ValidationError",
            )

        try:
            new_state, text = handler(state, request)
        except TrackerError as e:
            return ActionResult(
                action=request.action,
                text=e.message,
                state=state,
                error=e.code,
                error_kind=type(e).__name__,
            )
        return ActionResult(action=request.action, text=text, state=new_state)
