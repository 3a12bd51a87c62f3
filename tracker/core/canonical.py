"""
Canonical serialization for log lines and snapshot comparison.

Reconstructed and replayed states are compared through canonical_state_bytes:
two TodoStates are the same snapshot exactly when these bytes are equal.
"""

import json
from typing import Any

from .state import TodoState


def canonicalize(obj: Any) -> Any:
    """
    Normalize nested dicts/lists: keys sorted, tuples as lists.
    """
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Compact, key-sorted UTF-8 JSON (non-ASCII text such as status icons kept as is).
    """
    s = json.dumps(canonicalize(obj), sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    """Same as canonical_json_bytes, decoded (one session log line)."""
    return canonical_json_bytes(obj).decode("utf-8")


def canonical_state_bytes(state: TodoState) -> bytes:
    """
    Snapshot identity of a TodoState: items, nextId and listName.

    Example:
        canonical_state_bytes(TodoState()) -> b'{"items":[],"listName":null,"nextId":1}'
    """
    return canonical_json_bytes(state.to_dict())
