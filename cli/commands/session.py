"""
Session commands: tree, branch, switch, fork, note
"""

import json
from typing import Optional

import typer
from rich.console import Console

from cli.context import open_session
from cli.render import render_branch, render_tree
from tracker.core.errors import SessionLogError
from tracker.core.summary import summary_text
from tracker.log.record import USER
from tracker.session import SESSION_FORK, SESSION_SWITCH, SESSION_TREE

app = typer.Typer()
console = Console()
err_console = Console(stderr=True)

SESSION_OPTION = typer.Option(None, "--session", "-s", help="Path to session log (JSONL)")


def _print_state(tracker, json_output: bool, leaf_id: Optional[str]) -> None:
    if json_output:
        out = {"leaf_id": leaf_id}
        out.update(tracker.state.to_dict())
        print(json.dumps(out, indent=2, ensure_ascii=False))
        return
    console.print(f"Leaf: [yellow]{leaf_id or '(root)'}[/yellow]")
    console.print(summary_text(tracker.state.items), markup=False)


@app.command()
def tree(session: Optional[str] = SESSION_OPTION):
    """
    Show the whole session history as a tree.

    Examples:
        todotrack session tree
    """
    try:
        _, log, tracker = open_session(session)
        leaf_id = log.get_leaf()
        branch = log.get_branch()
        tracker.on_event(SESSION_TREE, branch)
        console.print(render_tree(log.tree(), {r.id for r in branch}, leaf_id))
        console.print(summary_text(tracker.state.items), markup=False)
    except SessionLogError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)


@app.command()
def branch(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    session: Optional[str] = SESSION_OPTION,
):
    """Show the entries on the active branch, root first."""
    try:
        _, log, _ = open_session(session)
        path = log.get_branch()
    except SessionLogError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if json_output:
        print(json.dumps({"entries": [r.to_dict() for r in path], "count": len(path)}, indent=2, ensure_ascii=False))
        return
    if not path:
        console.print("[yellow]Session log is empty[/yellow]")
        return
    console.print(render_branch(path))


@app.command()
def switch(
    entry_id: str = typer.Argument(..., help="Entry id to make the leaf"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    session: Optional[str] = SESSION_OPTION,
):
    """
    Move the active leaf to an existing entry and rebuild state.

    Examples:
        todotrack session switch 3fa2c81d09be
    """
    try:
        _, log, tracker = open_session(session)
        log.switch(entry_id)
        tracker.on_event(SESSION_SWITCH, log.get_branch())
    except SessionLogError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
    _print_state(tracker, json_output, log.get_leaf())


@app.command()
def fork(
    entry_id: str = typer.Argument(..., help="Entry to branch off before"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    session: Optional[str] = SESSION_OPTION,
):
    """
    Start a new branch just before an entry and rebuild state.

    The next action is recorded as a sibling of the given entry.
    """
    try:
        _, log, tracker = open_session(session)
        log.fork(entry_id)
        tracker.on_event(SESSION_FORK, log.get_branch())
    except SessionLogError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
    _print_state(tracker, json_output, log.get_leaf())


@app.command()
def note(
    text: str = typer.Argument(..., help="Message text"),
    session: Optional[str] = SESSION_OPTION,
):
    """Append a user message to the active branch."""
    try:
        _, log, _ = open_session(session)
        record = log.append(role=USER, request={"text": text})
    except SessionLogError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
    console.print(f"Recorded [yellow]{record.id}[/yellow]")
