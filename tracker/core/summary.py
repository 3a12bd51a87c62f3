"""
Derived summary line and plain-text item formatting.

The summary line format is the one presentation contract the core owns:
statuses always appear in SUMMARY_ORDER, zero counts omitted.
"""

from typing import Dict, Iterable, List, Sequence

from .state import TodoItem, TodoState, STATUSES, DONE, IN_PROGRESS, PENDING, BLOCKED, SKIPPED

SUMMARY_ORDER = (DONE, IN_PROGRESS, PENDING, BLOCKED, SKIPPED)

STATUS_LABELS = {
    DONE: "done",
    IN_PROGRESS: "in progress",
    PENDING: "pending",
    BLOCKED: "blocked",
    SKIPPED: "skipped",
}

STATUS_ICONS = {
    PENDING: "○",
    IN_PROGRESS: "◉",
    DONE: "✓",
    SKIPPED: "⊘",
    BLOCKED: "✗",
}


def status_counts(items: Iterable[TodoItem]) -> Dict[str, int]:
    counts = {status: 0 for status in STATUSES}
    for item in items:
        counts[item.status] = counts.get(item.status, 0) + 1
    return counts


def summary_text(items: Sequence[TodoItem]) -> str:
    """
    Render "<total> items: <n> done, <n> in progress, ..." for the given items.

    Example:
        summary_text([TodoItem(1, "a", "done")]) -> "1 items: 1 done"
    """
    counts = status_counts(items)
    parts = [f"{counts[s]} {STATUS_LABELS[s]}" for s in SUMMARY_ORDER if counts[s]]
    return f"{len(items)} items: {', '.join(parts)}"


def format_item_plain(item: TodoItem) -> str:
    extra = f" ({item.reason})" if item.reason else ""
    return f"{STATUS_ICONS[item.status]} #{item.id}: {item.text}{extra}"


def list_text(state: TodoState) -> str:
    """Full plain-text listing: optional name header, one line per item, summary."""
    if not state.items:
        return "No items"
    lines: List[str] = []
    if state.list_name:
        lines.append(state.list_name)
    lines.extend(format_item_plain(item) for item in state.items)
    return "\n".join(lines) + "\n\n" + summary_text(state.items)
