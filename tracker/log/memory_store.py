"""
In-memory session log, for tests and embedding.
"""

from typing import List, Optional

from .record import ActionRecord
from .store import SessionLog


class MemorySessionLog(SessionLog):
    def __init__(self) -> None:
        self._records: List[ActionRecord] = []
        self._leaf: Optional[str] = None

    def entries(self) -> List[ActionRecord]:
        return list(self._records)

    def get_leaf(self) -> Optional[str]:
        return self._leaf

    def _write(self, record: ActionRecord) -> None:
        self._records.append(record)

    def _set_leaf(self, leaf_id: Optional[str]) -> None:
        self._leaf = leaf_id
