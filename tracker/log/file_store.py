"""
File-based session log using append-only JSONL format.

Each line is one ActionRecord. The leaf pointer lives next to the log in
`<path>.head.json`, so moving between branches never rewrites the log.
"""

import json
import os
from typing import List, Optional

from ..core.canonical import canonical_json_str
from ..core.errors import SessionLogError
from .record import ActionRecord
from .store import SessionLog


class FileSessionLog(SessionLog):
    """
    File-based append-only session log.

    Storage format: JSONL (newline-delimited JSON)
    Each line: {"id": "...", "parent_id": "...", "seq": N, ...}

    Guarantees:
    - Append-only (no mutations)
    - Fsync after each append (durability)
    - An append whose leaf update was lost is picked up on the next read
    """

    def __init__(self, path: str) -> None:
        """
        Initialize file session log.

        Args:
            path: Path to JSONL file
        """
        self.path = path
        self.head_path = f"{self.path}.head.json"

        # Ensure directory exists
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

        # Create empty file if not exists
        if not os.path.exists(path):
            with open(path, "wb") as f:
                f.write(b"")

    def entries(self) -> List[ActionRecord]:
        records = []
        with open(self.path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    records.append(ActionRecord.from_dict(json.loads(line)))
                except (ValueError, KeyError, TypeError) as e:
                    raise SessionLogError(f"{self.path}:{lineno}: malformed record: {e}") from e
        return records

    def get_leaf(self) -> Optional[str]:
        records = self.entries()
        if not os.path.exists(self.head_path):
            # No pointer yet: the last appended record is the leaf
            return records[-1].id if records else None
        try:
            with open(self.head_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise SessionLogError(f"{self.head_path}: unreadable head pointer: {e}") from e

        leaf_id = data.get("leaf_id")
        # Records appended after the pointer was written extend the leaf when they
        # chain from it (the append landed but its pointer update did not)
        for record in records[data.get("seq", len(records)):]:
            if record.parent_id != leaf_id:
                break
            leaf_id = record.id
        return leaf_id

    def _write(self, record: ActionRecord) -> None:
        line = canonical_json_str(record.to_dict()) + "\n"
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line)
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            raise SessionLogError(f"append failed: {e}") from e

    def _set_leaf(self, leaf_id: Optional[str]) -> None:
        # seq: number of records the pointer has seen
        head = {"leaf_id": leaf_id, "seq": len(self.entries())}
        tmp_path = f"{self.head_path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(canonical_json_str(head))
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.head_path)
        except OSError as e:
            raise SessionLogError(f"leaf update failed: {e}") from e
