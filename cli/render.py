"""
Rich rendering for todo lists and session trees.
"""

from typing import Dict, List, Optional

from rich.console import Group
from rich.rule import Rule
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from tracker.core.state import TodoItem, TodoState, DONE, SKIPPED
from tracker.core.summary import STATUS_ICONS, summary_text
from tracker.log.record import ActionRecord, TOOL_RESULT

STATUS_STYLES = {
    "pending": "dim",
    "in_progress": "yellow",
    "done": "green",
    "skipped": "magenta",
    "blocked": "red",
}


def item_text(item: TodoItem) -> Text:
    text = Text()
    text.append(STATUS_ICONS[item.status], style=STATUS_STYLES[item.status])
    text.append(" ")
    text.append(f"#{item.id}", style="cyan")
    text.append(" ")
    text.append(item.text, style="dim" if item.status in (DONE, SKIPPED) else "")
    if item.reason:
        text.append(f" ({item.reason})", style="dim")
    return text


def group_items(items) -> Dict[str, List[TodoItem]]:
    """Items bucketed by group, groups in first-appearance order ("" = ungrouped)."""
    groups: Dict[str, List[TodoItem]] = {}
    for item in items:
        groups.setdefault(item.group or "", []).append(item)
    return groups


def render_list(state: TodoState) -> Group:
    parts = [Rule(Text(f" {state.list_name or 'Todos'} ", style="cyan"), align="left")]
    if not state.items:
        parts.append(Text("  No items yet.", style="dim"))
        return Group(*parts)

    parts.append(Text(f"  {summary_text(state.items)}", style="bright_black"))
    parts.append(Text(""))
    for group, items in group_items(state.items).items():
        if group:
            parts.append(Text(f"  {group}", style="bold cyan"))
        for item in items:
            parts.append(Text("  ").append_text(item_text(item)))
        if group:
            parts.append(Text(""))
    return Group(*parts)


def record_label(record: ActionRecord, leaf_id: Optional[str], on_branch: bool) -> Text:
    label = Text()
    label.append(record.id, style="bold yellow" if record.id == leaf_id else "yellow")
    label.append(f" {record.role}", style="green")
    if record.role == TOOL_RESULT and record.tool_name:
        label.append(f" {record.tool_name}", style="cyan")
        action = (record.details or {}).get("action") or record.request.get("action")
        if action:
            label.append(f" {action}")
        error = (record.details or {}).get("error")
        if error:
            label.append(f" ({error})", style="red")
    elif record.request.get("text"):
        label.append(f" {record.request['text']}", style="dim")
    if record.id == leaf_id:
        label.append("  ← leaf", style="bold")
    elif not on_branch:
        label.stylize("dim")
    return label


def render_tree(children: Dict[Optional[str], List[ActionRecord]], branch_ids, leaf_id: Optional[str]) -> Tree:
    root = Tree(Text("session", style="bold"))
    stack = [(root, r) for r in reversed(children.get(None, []))]
    # Iterative walk; branches can be deep
    while stack:
        parent_node, record = stack.pop()
        node = parent_node.add(record_label(record, leaf_id, record.id in branch_ids))
        for child in reversed(children.get(record.id, [])):
            stack.append((node, child))
    return root


def render_branch(path: List[ActionRecord]) -> Table:
    table = Table(title="Active Branch")
    table.add_column("Seq", style="cyan", justify="right")
    table.add_column("Entry", style="yellow")
    table.add_column("Role", style="green")
    table.add_column("Action")
    table.add_column("Result", style="dim")

    for record in path:
        details = record.details or {}
        action = details.get("action") or record.request.get("action") or ""
        result = details.get("error") or ""
        if record.role == TOOL_RESULT and not result and details:
            result = f"{len(details.get('items', []))} items"
        table.add_row(str(record.seq), record.id, record.role, action, result)
    return table
