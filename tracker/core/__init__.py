"""
Core todo state machine primitives.

This module provides the foundational abstractions for the tracker:
- TodoState / TodoItem: Immutable list state
- ActionRequest / ActionResult: Boundary contract
- Reducer: Pure state transitions (handlers registered per action)
- Summary: Derived summary line
- Canonical: Deterministic serialization for snapshot comparison
"""

from .state import TodoItem, TodoState, STATUSES
from .actions import ActionRequest, ActionResult, BatchEntry, ACTIONS, STATUS_ACTIONS
from .reducer import Reducer
from .handlers import build_reducer, register_handlers
from .summary import summary_text, list_text, format_item_plain, SUMMARY_ORDER, STATUS_ICONS
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str, canonical_state_bytes
from .ids import stable_id, entry_id
from .errors import TrackerError, ValidationError, NotFoundError, SessionLogError

__all__ = [
    "TodoItem",
    "TodoState",
    "STATUSES",
    "ActionRequest",
    "ActionResult",
    "BatchEntry",
    "ACTIONS",
    "STATUS_ACTIONS",
    "Reducer",
    "build_reducer",
    "register_handlers",
    "summary_text",
    "list_text",
    "format_item_plain",
    "SUMMARY_ORDER",
    "STATUS_ICONS",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "canonical_state_bytes",
    "stable_id",
    "entry_id",
    "TrackerError",
    "ValidationError",
    "NotFoundError",
    "SessionLogError",
]
