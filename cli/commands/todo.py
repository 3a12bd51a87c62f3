"""
Todo commands: run an action, show the grouped list
"""

import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.text import Text

from cli.context import open_session
from cli.render import render_list
from tracker.core.actions import ActionRequest, BatchEntry
from tracker.core.errors import SessionLogError
from tracker.prompt import CONFIRM, ask

console = Console()
err_console = Console(stderr=True)

SESSION_OPTION = typer.Option(None, "--session", "-s", help="Path to session log (JSONL)")


def parse_item(value: str) -> BatchEntry:
    """Parse a --item value: "text" or "text::group"."""
    text, _, group = value.partition("::")
    return BatchEntry(text=text.strip(), group=group.strip() or None)


def todo_command(
    action: str = typer.Argument(..., help="create, add, batch, start, done, skip, block, reset, list, summary, clear"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="List name (create)"),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Item text (add)"),
    group: Optional[str] = typer.Option(None, "--group", "-g", help="Group name (add)"),
    item_id: Optional[int] = typer.Option(None, "--id", "-i", help="Item id (start/done/skip/block/reset)"),
    reason: Optional[str] = typer.Option(None, "--reason", "-r", help="Reason (skip/block)"),
    items: Optional[List[str]] = typer.Option(None, "--item", help='Batch item, "text" or "text::group" (repeatable)'),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask before clearing"),
    json_output: bool = typer.Option(False, "--json", help="Output details as JSON"),
    session: Optional[str] = SESSION_OPTION,
):
    """
    Run one todo action and record its outcome in the session log.

    Examples:
        todotrack todo create --name Auth
        todotrack todo add --text "write login test" --group "Task 1"
        todotrack todo batch --item "a::Phase 1" --item b
        todotrack todo skip --id 2 --reason "flaky env"
        todotrack todo list --json
    """
    try:
        _, log, tracker = open_session(session)
    except SessionLogError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if action == "clear" and not yes and tracker.state.items:
        answer = ask(f"Clear {len(tracker.state.items)} items?", CONFIRM, console=err_console)
        if answer.cancelled or answer.answer != "yes":
            err_console.print(f"[yellow]Not cleared:[/yellow] {answer.text}")
            raise typer.Exit(1)

    request = ActionRequest(
        action=action,
        name=name,
        text=text,
        group=group,
        id=item_id,
        reason=reason,
        items=tuple(parse_item(v) for v in items) if items else None,
    )
    try:
        result, _ = tracker.record(log, request)
    except SessionLogError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if json_output:
        print(json.dumps(result.details(), indent=2, ensure_ascii=False))
    else:
        console.print(Text(result.text, style="red" if result.error else ""))

    raise typer.Exit(0 if result.ok else 1)


def todos_command(session: Optional[str] = SESSION_OPTION):
    """Show the current todo list, grouped."""
    try:
        _, _, tracker = open_session(session)
    except SessionLogError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    console.print(render_list(tracker.state))
