#!/usr/bin/env python3
"""
todotrack CLI - branch-aware todo tracking

Main entrypoint for the todotrack command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import session, todo

# Initialize Typer app
app = typer.Typer(
    name="todotrack",
    help="Branch-aware todo tracking over a session log",
    add_completion=False,
)

# Console for rich output
console = Console()

# Add command groups
app.add_typer(session.app, name="session", help="Session history operations")

# Add standalone commands
app.command(name="todo")(todo.todo_command)
app.command(name="todos")(todo.todos_command)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from tracker import __version__ as engine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]todotrack CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", f"v{engine_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
