"""
SessionLog abstract interface.

A session log is an append-only tree of ActionRecords with a movable leaf
pointer. The active branch is the path from the root to the leaf.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..core.errors import SessionLogError
from ..core.ids import entry_id
from .record import ActionRecord, MESSAGE, TOOL_RESULT

ROOT = "root"


class SessionLog(ABC):
    """
    Abstract session log.

    All implementations must guarantee:
    - Append-only (no updates, no deletes)
    - Stable entry ids
    - append() adds a child of the current leaf and moves the leaf to it
    """

    @abstractmethod
    def entries(self) -> List[ActionRecord]:
        """All records in append order."""
        ...

    @abstractmethod
    def get_leaf(self) -> Optional[str]:
        """Current leaf entry id (None before the first append)."""
        ...

    @abstractmethod
    def _write(self, record: ActionRecord) -> None:
        ...

    @abstractmethod
    def _set_leaf(self, leaf_id: Optional[str]) -> None:
        ...

    def append(
        self,
        role: str = TOOL_RESULT,
        tool_name: Optional[str] = None,
        request: Optional[Dict[str, Any]] = None,
        details: Optional[Dict[str, Any]] = None,
        type: str = MESSAGE,
    ) -> ActionRecord:
        """
        Append a record under the current leaf.

        Returns:
            The stored ActionRecord (id and seq assigned)
        """
        parent_id = self.get_leaf()
        seq = len(self.entries())
        record = ActionRecord(
            id=entry_id(parent_id or ROOT, seq),
            parent_id=parent_id,
            seq=seq,
            type=type,
            role=role,
            tool_name=tool_name,
            request=dict(request or {}),
            details=details,
        )
        self._write(record)
        self._set_leaf(record.id)
        return record

    def get_entry(self, entry_id: str) -> ActionRecord:
        for record in self.entries():
            if record.id == entry_id:
                return record
        raise SessionLogError(f"Unknown entry: {entry_id}")

    def get_branch(self, leaf_id: Optional[str] = None) -> List[ActionRecord]:
        """
        Path from the root to leaf_id (default: current leaf), root first.
        """
        by_id = {r.id: r for r in self.entries()}
        cur = leaf_id if leaf_id is not None else self.get_leaf()
        if cur is not None and cur not in by_id:
            raise SessionLogError(f"Unknown entry: {cur}")

        path: List[ActionRecord] = []
        while cur is not None:
            record = by_id.get(cur)
            if record is None:
                raise SessionLogError(f"Broken parent link: {cur}")
            path.append(record)
            cur = record.parent_id
        path.reverse()
        return path

    def switch(self, entry_id: str) -> ActionRecord:
        """Move the leaf to an existing entry."""
        record = self.get_entry(entry_id)
        self._set_leaf(record.id)
        return record

    def fork(self, entry_id: str) -> Optional[str]:
        """
        Start a new branch just before entry_id.

        The leaf moves to the entry's parent, so the next append becomes a
        sibling of entry_id. Returns the new leaf id.
        """
        record = self.get_entry(entry_id)
        self._set_leaf(record.parent_id)
        return record.parent_id

    def children(self, entry_id: Optional[str]) -> List[ActionRecord]:
        """Direct children of entry_id (None = root entries), in append order."""
        return [r for r in self.entries() if r.parent_id == entry_id]

    def tree(self) -> Dict[Optional[str], List[ActionRecord]]:
        """Parent id -> children, for rendering the whole history."""
        out: Dict[Optional[str], List[ActionRecord]] = {}
        for record in self.entries():
            out.setdefault(record.parent_id, []).append(record)
        return out
