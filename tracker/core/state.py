"""
State model for the todo tracker.

TodoState is the whole tracked list. It is immutable: handlers return new
instances instead of mutating the current one.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

PENDING = "pending"
IN_PROGRESS = "in_progress"
DONE = "done"
SKIPPED = "skipped"
BLOCKED = "blocked"

STATUSES = (PENDING, IN_PROGRESS, DONE, SKIPPED, BLOCKED)


@dataclass(frozen=True)
class TodoItem:
    """
    One task.

    Fields:
        id: Positive integer, never reused within a list's lifetime
        text: Non-empty description, immutable after creation
        status: One of STATUSES
        reason: Free text for skipped/blocked, overwritten on every transition
        group: Optional display group, set once at creation
    """
    id: int
    text: str
    status: str = PENDING
    reason: Optional[str] = None
    group: Optional[str] = None

    def with_status(self, status: str, reason: Optional[str] = None) -> "TodoItem":
        """Return a copy with the new status; reason is replaced, never merged."""
        return replace(self, status=status, reason=reason or None)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "text": self.text, "status": self.status}
        if self.reason is not None:
            data["reason"] = self.reason
        if self.group is not None:
            data["group"] = self.group
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "TodoItem":
        return TodoItem(
            id=int(data["id"]),
            text=data["text"],
            status=data.get("status", PENDING),
            reason=data.get("reason") or None,
            group=data.get("group") or None,
        )


@dataclass(frozen=True)
class TodoState:
    """
    Immutable todo list.

    Fields:
        items: Items in insertion order (the only order)
        next_id: Next id to assign, greater than every id ever assigned
        list_name: Optional list label, survives clear
    """
    items: Tuple[TodoItem, ...] = field(default_factory=tuple)
    next_id: int = 1
    list_name: Optional[str] = None

    @staticmethod
    def initial() -> "TodoState":
        return TodoState()

    def find(self, item_id: int) -> Optional[TodoItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def with_item(self, item: TodoItem) -> "TodoState":
        """
        Create new state with an existing item replaced (matched by id).

        Since TodoState is immutable, this returns a new TodoState instance.
        """
        items = tuple(item if cur.id == item.id else cur for cur in self.items)
        return replace(self, items=items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "nextId": self.next_id,
            "listName": self.list_name,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "TodoState":
        data = data or {}
        return TodoState(
            items=tuple(TodoItem.from_dict(d) for d in data.get("items", [])),
            next_id=int(data.get("nextId", 1)),
            list_name=data.get("listName"),
        )
