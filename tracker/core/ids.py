"""
Stable identifier generation for session log entries.
"""

import hashlib

ENTRY_ID_LENGTH = 12


def stable_id(*parts: str) -> str:
    """
    Generate stable ID derived from inputs (no randomness).

    Example:
        stable_id("root", "0") -> "9f1c..."
    """
    raw = "|".join(parts).encode("utf-8")
    return hashlib.sha256(raw).hexdigest()


def entry_id(parent_id: str, seq: int) -> str:
    """Short entry id for the seq-th record appended under parent_id."""
    return stable_id(parent_id, str(seq))[:ENTRY_ID_LENGTH]
