"""
Tests for the interactive prompt collaborator.
"""

import io

from rich.console import Console

from tracker.prompt import CONFIRM, INPUT, SELECT, ask


def quiet_console():
    return Console(file=io.StringIO(), force_terminal=False)


def test_non_interactive_is_cancelled():
    result = ask("Delete?", CONFIRM, console=quiet_console(), interactive=False)

    assert result.cancelled
    assert result.answer is None
    assert result.text == "Error: no UI available (non-interactive mode)"


def test_select_requires_options():
    result = ask("Which?", SELECT, options=[], console=quiet_console(), interactive=True)

    assert result.cancelled
    assert result.error == "'select' type requires options array"


def test_unknown_type():
    result = ask("Which?", "slider", console=quiet_console(), interactive=True)

    assert result.cancelled
    assert result.error.startswith("unknown prompt type")


def test_select_picks_option():
    result = ask(
        "Which database?",
        SELECT,
        options=["PostgreSQL", "SQLite"],
        console=quiet_console(),
        interactive=True,
        stream=io.StringIO("2\n"),
    )

    assert result.answer == "SQLite"
    assert not result.cancelled
    assert result.text == "User responded: SQLite"
    assert result.to_dict()["options"] == ["PostgreSQL", "SQLite"]


def test_confirm_yes_and_no():
    yes = ask("Proceed?", CONFIRM, console=quiet_console(), interactive=True, stream=io.StringIO("y\n"))
    no = ask("Proceed?", CONFIRM, console=quiet_console(), interactive=True, stream=io.StringIO("n\n"))

    assert yes.answer == "yes"
    assert no.answer == "no"


def test_input_uses_placeholder_default():
    result = ask(
        "Title?", INPUT, placeholder="My Project", console=quiet_console(), interactive=True,
        stream=io.StringIO(""),
    )

    assert result.answer == "My Project"
