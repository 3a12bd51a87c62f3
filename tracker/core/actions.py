"""
Action request and response models.

ActionRequest is the boundary contract callers send to the reducer;
ActionResult carries the response line plus the post-action snapshot.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from .state import TodoState, IN_PROGRESS, DONE, SKIPPED, BLOCKED, PENDING

ACTIONS = (
    "create",
    "add",
    "batch",
    "start",
    "done",
    "skip",
    "block",
    "reset",
    "list",
    "summary",
    "clear",
)

# Status-changing actions and the status they set
STATUS_ACTIONS = {
    "start": IN_PROGRESS,
    "done": DONE,
    "skip": SKIPPED,
    "block": BLOCKED,
    "reset": PENDING,
}

UNKNOWN_ACTION = "unknown"


def _coerce_id(value: Any) -> Any:
    # JSON numbers may arrive as floats; keep anything else for the handler to reject
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True)
class BatchEntry:
    text: str
    group: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"text": self.text}
        if self.group is not None:
            data["group"] = self.group
        return data


def _batch_entry(value: Any) -> BatchEntry:
    # Non-mapping entries carry no text and are rejected by the batch handler
    if not isinstance(value, Mapping):
        return BatchEntry(text="")
    return BatchEntry(text=value.get("text") or "", group=value.get("group"))


@dataclass(frozen=True)
class ActionRequest:
    """
    Immutable action request.

    Fields:
        action: One of ACTIONS (anything else is reported as an error result)
        name: List name (create)
        text: Item text (add)
        items: Batch entries (batch)
        id: Item id (start/done/skip/block/reset)
        reason: Reason (skip/block, accepted on every status action)
        group: Group name (add)
    """
    action: str
    name: Optional[str] = None
    text: Optional[str] = None
    items: Optional[Tuple[BatchEntry, ...]] = None
    id: Optional[int] = None
    reason: Optional[str] = None
    group: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"action": self.action}
        for key in ("name", "text", "id", "reason", "group"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.items is not None:
            data["items"] = [entry.to_dict() for entry in self.items]
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ActionRequest":
        data = data or {}
        items = data.get("items")
        entries = None
        if isinstance(items, (list, tuple)):
            entries = tuple(_batch_entry(e) for e in items)
        elif items is not None:
            # Not an array: reported by the batch handler as missing items
            entries = ()
        return ActionRequest(
            action=str(data.get("action", "")),
            name=data.get("name"),
            text=data.get("text"),
            items=entries,
            id=_coerce_id(data.get("id")),
            reason=data.get("reason"),
            group=data.get("group"),
        )


@dataclass(frozen=True)
class ActionResult:
    """
    Result of applying one action.

    Fields:
        action: Action kind as recorded ("unknown" for unrecognized kinds)
        text: Human-readable response line
        state: State after the action (the unchanged prior state on error)
        error: Error code, set exactly when the action failed
        error_kind: Exception class name of the failure (ValidationError, ...)
    """
    action: str
    text: str
    state: TodoState = field(default_factory=TodoState.initial)
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.error

    def details(self) -> Dict[str, Any]:
        """Machine-readable snapshot: {action, items, nextId, listName, error?}."""
        data: Dict[str, Any] = {"action": self.action}
        data.update(self.state.to_dict())
        if self.error:
            data["error"] = self.error
        return data
