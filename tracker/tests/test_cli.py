"""
Tests for the todotrack CLI against a file-backed session log.
"""

import json
import os
import tempfile

import pytest
from typer.testing import CliRunner

from cli.main import app
from cli.commands.todo import parse_item
from tracker.log import FileSessionLog

runner = CliRunner()


@pytest.fixture
def session_path():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield os.path.join(tmpdir, "session.jsonl")


def run(session_path, *args):
    return runner.invoke(app, [*args, "--session", session_path])


def test_todo_flow(session_path):
    assert run(session_path, "todo", "create", "--name", "Auth").exit_code == 0
    added = run(session_path, "todo", "add", "--text", "write login test")
    assert added.exit_code == 0
    assert "Added #1: write login test" in added.stdout
    run(session_path, "todo", "start", "--id", "1")
    run(session_path, "todo", "done", "--id", "1")

    result = run(session_path, "todo", "summary", "--json")

    assert result.exit_code == 0
    details = json.loads(result.stdout)
    assert details["action"] == "summary"
    assert details["listName"] == "Auth"
    assert details["items"] == [{"id": 1, "text": "write login test", "status": "done"}]
    assert details["nextId"] == 2


def test_batch_items_with_groups(session_path):
    result = run(session_path, "todo", "batch", "--item", "a::Phase 1", "--item", "b", "--json")

    details = json.loads(result.stdout)
    assert [(i["id"], i.get("group")) for i in details["items"]] == [(1, "Phase 1"), (2, None)]
    assert details["nextId"] == 3


def test_error_exit_code_and_unchanged_state(session_path):
    run(session_path, "todo", "add", "--text", "a")

    result = run(session_path, "todo", "done", "--id", "99", "--json")

    assert result.exit_code == 1
    details = json.loads(result.stdout)
    assert details["error"] == "#99 not found"
    assert details["nextId"] == 2
    assert details["items"][0]["status"] == "pending"


def test_clear_requires_confirmation_when_not_interactive(session_path):
    run(session_path, "todo", "add", "--text", "a")

    refused = run(session_path, "todo", "clear")
    assert refused.exit_code == 1

    cleared = run(session_path, "todo", "clear", "--yes", "--json")
    assert cleared.exit_code == 0
    details = json.loads(cleared.stdout)
    assert details["items"] == []
    assert details["nextId"] == 2


def test_fork_and_switch_rebuild_state(session_path):
    run(session_path, "todo", "add", "--text", "a")
    run(session_path, "todo", "add", "--text", "b")
    log = FileSessionLog(session_path)
    first, second = log.get_branch()

    forked = run(session_path, "session", "fork", second.id, "--json")
    assert forked.exit_code == 0
    state = json.loads(forked.stdout)
    assert state["leaf_id"] == first.id
    assert [i["text"] for i in state["items"]] == ["a"]

    run(session_path, "todo", "add", "--text", "c")
    listed = json.loads(run(session_path, "todo", "list", "--json").stdout)
    assert [(i["id"], i["text"]) for i in listed["items"]] == [(1, "a"), (2, "c")]

    switched = json.loads(run(session_path, "session", "switch", second.id, "--json").stdout)
    assert [i["text"] for i in switched["items"]] == ["a", "b"]


def test_switch_unknown_entry(session_path):
    run(session_path, "todo", "add", "--text", "a")

    result = run(session_path, "session", "switch", "deadbeef")

    assert result.exit_code == 2


def test_note_only_session_has_empty_state(session_path):
    run(session_path, "session", "note", "hello")

    result = json.loads(run(session_path, "todo", "list", "--json").stdout)

    assert result["items"] == []
    assert result["nextId"] == 1


def test_tree_and_todos_render(session_path):
    run(session_path, "todo", "create", "--name", "Release")
    run(session_path, "todo", "add", "--text", "tag", "--group", "Ship")

    tree = run(session_path, "session", "tree")
    todos = run(session_path, "todos")

    assert tree.exit_code == 0
    assert "1 items: 1 pending" in tree.stdout
    assert todos.exit_code == 0
    assert "Release" in todos.stdout
    assert "Ship" in todos.stdout


def test_parse_item():
    assert parse_item("write docs :: Phase 2").group == "Phase 2"
    assert parse_item("write docs").group is None
