"""
Reducer handlers for the todo list.

All handlers are pure and deterministic. Invalid requests raise
ValidationError / NotFoundError; the reducer turns them into error results.
"""

from dataclasses import replace
from typing import Any, Optional, Tuple

from .actions import ActionRequest, STATUS_ACTIONS
from .errors import NotFoundError, ValidationError
from .reducer import Reducer
from .state import TodoItem, TodoState
from .summary import list_text, summary_text


def register_handlers(reducer: Reducer) -> None:
    reducer.register("create", on_create)
    reducer.register("add", on_add)
    reducer.register("batch", on_batch)
    for action in STATUS_ACTIONS:
        reducer.register(action, on_status_change)
    reducer.register("list", on_list)
    reducer.register("summary", on_summary)
    reducer.register("clear", on_clear)


def build_reducer() -> Reducer:
    """Reducer with every todo action registered."""
    reducer = Reducer()
    register_handlers(reducer)
    return reducer


def _optional_str(value: Any, field: str, action: str) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value or None
    raise ValidationError(
        f"Error: {field} must be a string for {action}", f"{field} must be a string"
    )


def on_create(state: TodoState, req: ActionRequest) -> Tuple[TodoState, str]:
    name = _optional_str(req.name, "name", req.action)
    text = f"Created todo list: {name}" if name else "Created todo list"
    return TodoState(items=(), next_id=1, list_name=name), text


def on_add(state: TodoState, req: ActionRequest) -> Tuple[TodoState, str]:
    if not isinstance(req.text, str) or not req.text:
        raise ValidationError("Error: text required for add", "text required")
    group = _optional_str(req.group, "group", req.action)

    item = TodoItem(id=state.next_id, text=req.text, group=group)
    next_state = replace(state, items=state.items + (item,), next_id=state.next_id + 1)
    return next_state, f"Added #{item.id}: {item.text}"


def on_batch(state: TodoState, req: ActionRequest) -> Tuple[TodoState, str]:
    if not req.items:
        raise ValidationError("Error: items array required for batch", "items required")
    # Checked up front: a batch is applied entirely or not at all
    for pos, entry in enumerate(req.items):
        if not isinstance(entry.text, str) or not entry.text:
            raise ValidationError(
                f"Error: text required for batch item {pos + 1}", "text required"
            )
        _optional_str(entry.group, "group", req.action)

    added = tuple(
        TodoItem(id=state.next_id + offset, text=entry.text, group=entry.group or None)
        for offset, entry in enumerate(req.items)
    )
    next_state = replace(
        state, items=state.items + added, next_id=state.next_id + len(added)
    )
    lines = "\n".join(f"  #{item.id}: {item.text}" for item in added)
    return next_state, f"Added {len(added)} items:\n{lines}"


def on_status_change(state: TodoState, req: ActionRequest) -> Tuple[TodoState, str]:
    if req.id is None:
        raise ValidationError(f"Error: id required for {req.action}", "id required")
    if isinstance(req.id, bool) or not isinstance(req.id, int):
        raise ValidationError(
            f"Error: id must be an integer for {req.action}", "id must be an integer"
        )

    item = state.find(req.id)
    if item is None:
        raise NotFoundError(f"Item #{req.id} not found", f"#{req.id} not found")

    # reason is overwritten on every transition, including done/start/reset
    reason = _optional_str(req.reason, "reason", req.action)
    updated = item.with_status(STATUS_ACTIONS[req.action], reason)
    extra = f" ({updated.reason})" if updated.reason else ""
    return state.with_item(updated), f"#{updated.id} → {updated.status}{extra}"


def on_list(state: TodoState, req: ActionRequest) -> Tuple[TodoState, str]:
    return state, list_text(state)


def on_summary(state: TodoState, req: ActionRequest) -> Tuple[TodoState, str]:
    return state, summary_text(state.items)


def on_clear(state: TodoState, req: ActionRequest) -> Tuple[TodoState, str]:
    count = len(state.items)
    return replace(state, items=()), f"Cleared {count} items"
