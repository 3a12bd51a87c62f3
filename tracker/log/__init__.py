"""
Session log storage.

This module provides:
- ActionRecord: One logged (request, outcome) entry
- SessionLog: Abstract branchable append-only log interface
- MemorySessionLog: In-memory implementation
- FileSessionLog: File-based append-only storage (JSONL)
"""

from .record import ActionRecord, MESSAGE, TOOL_RESULT, USER, ASSISTANT
from .store import SessionLog
from .memory_store import MemorySessionLog
from .file_store import FileSessionLog

__all__ = [
    "ActionRecord",
    "MESSAGE",
    "TOOL_RESULT",
    "USER",
    "ASSISTANT",
    "SessionLog",
    "MemorySessionLog",
    "FileSessionLog",
]
