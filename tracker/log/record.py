"""
ActionRecord: one entry of the branchable session log.

Records are self-describing: a tool result carries the post-action snapshot
in `details`, so the latest one on a branch is enough to recover state.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..core.state import TodoState

MESSAGE = "message"
TOOL_RESULT = "toolResult"
USER = "user"
ASSISTANT = "assistant"


@dataclass(frozen=True)
class ActionRecord:
    """
    Immutable session log entry.

    Fields:
        id: Entry id (unique within the log)
        parent_id: Parent entry id (None for a root entry)
        seq: Append order within the whole log (not the branch)
        type: Entry type ("message" for everything the tracker cares about)
        role: Message role ("toolResult", "user", ...)
        tool_name: Tool identity for tool results
        request: Action request as sent (used for full replay)
        details: ActionResult details (post-action snapshot)
    """
    id: str
    parent_id: Optional[str]
    seq: int
    type: str = MESSAGE
    role: str = TOOL_RESULT
    tool_name: Optional[str] = None
    request: Dict[str, Any] = field(default_factory=dict)
    details: Optional[Dict[str, Any]] = None

    def is_tool_result(self, tool_name: str) -> bool:
        return self.type == MESSAGE and self.role == TOOL_RESULT and self.tool_name == tool_name

    def snapshot(self) -> Optional[TodoState]:
        """State carried by this record, or None when it carries no details."""
        if not self.details:
            return None
        return TodoState.from_dict(self.details)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "parent_id": self.parent_id,
            "seq": self.seq,
            "type": self.type,
            "role": self.role,
            "tool_name": self.tool_name,
            "request": self.request,
            "details": self.details,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ActionRecord":
        return ActionRecord(
            id=data["id"],
            parent_id=data.get("parent_id"),
            seq=int(data.get("seq", 0)),
            type=data.get("type", MESSAGE),
            role=data.get("role", TOOL_RESULT),
            tool_name=data.get("tool_name"),
            request=dict(data.get("request") or {}),
            details=data.get("details"),
        )
