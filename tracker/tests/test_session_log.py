"""
Tests for the branchable session log.
"""

import json
import os
import tempfile

import pytest

from tracker.core.errors import SessionLogError
from tracker.log import FileSessionLog, MemorySessionLog, USER


@pytest.fixture(params=["memory", "file"])
def log(request):
    if request.param == "memory":
        yield MemorySessionLog()
        return
    with tempfile.TemporaryDirectory() as tmpdir:
        yield FileSessionLog(os.path.join(tmpdir, "nested", "session.jsonl"))


def test_append_links_to_leaf(log):
    a = log.append(role=USER, request={"text": "a"})
    b = log.append(role=USER, request={"text": "b"})

    assert a.parent_id is None
    assert b.parent_id == a.id
    assert log.get_leaf() == b.id
    assert [r.id for r in log.get_branch()] == [a.id, b.id]
    assert [r.seq for r in log.entries()] == [0, 1]


def test_fork_starts_sibling_branch(log):
    a = log.append(role=USER)
    b = log.append(role=USER)
    c = log.append(role=USER)

    assert log.fork(c.id) == b.id
    d = log.append(role=USER)

    assert d.parent_id == b.id
    assert [r.id for r in log.get_branch()] == [a.id, b.id, d.id]
    assert [r.id for r in log.children(b.id)] == [c.id, d.id]
    # Old branch is still there
    assert [r.id for r in log.get_branch(c.id)] == [a.id, b.id, c.id]


def test_fork_first_entry_moves_to_root(log):
    a = log.append(role=USER)

    assert log.fork(a.id) is None
    b = log.append(role=USER)

    assert b.parent_id is None
    assert [r.id for r in log.children(None)] == [a.id, b.id]
    assert log.get_branch() == [b]


def test_switch_moves_leaf(log):
    a = log.append(role=USER)
    b = log.append(role=USER)

    log.switch(a.id)

    assert log.get_leaf() == a.id
    assert log.get_branch() == [a]
    log.switch(b.id)
    assert log.get_branch() == [a, b]


def test_unknown_entry_raises(log):
    log.append(role=USER)

    with pytest.raises(SessionLogError):
        log.switch("nope")
    with pytest.raises(SessionLogError):
        log.fork("nope")
    with pytest.raises(SessionLogError):
        log.get_branch("nope")


def test_entry_ids_unique(log):
    first = log.append(role=USER)
    log.fork(first.id)
    second = log.append(role=USER)

    assert first.id != second.id
    assert len({r.id for r in log.entries()}) == 2


def test_tree_groups_children(log):
    a = log.append(role=USER)
    b = log.append(role=USER)
    log.fork(b.id)
    c = log.append(role=USER)

    tree = log.tree()

    assert [r.id for r in tree[None]] == [a.id]
    assert [r.id for r in tree[a.id]] == [b.id, c.id]


def test_file_log_persists_leaf():
    """Leaf pointer and records survive reopening the file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "session.jsonl")
        log = FileSessionLog(path)
        a = log.append(role=USER)
        log.append(role=USER)
        log.switch(a.id)

        reopened = FileSessionLog(path)

        assert reopened.get_leaf() == a.id
        assert len(reopened.entries()) == 2


def test_file_log_is_append_only_jsonl():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "session.jsonl")
        log = FileSessionLog(path)
        a = log.append(role=USER)
        log.fork(a.id)
        log.append(role="toolResult", tool_name="todo", details={"items": [], "nextId": 1})

        with open(path) as f:
            lines = [json.loads(line) for line in f if line.strip()]

        assert [line["seq"] for line in lines] == [0, 1]
        assert lines[1]["parent_id"] is None


def test_file_log_malformed_line():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "session.jsonl")
        with open(path, "w") as f:
            f.write("{not json\n")

        with pytest.raises(SessionLogError):
            FileSessionLog(path).entries()


def test_file_log_without_head_uses_last_record():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "session.jsonl")
        log = FileSessionLog(path)
        log.append(role=USER)
        b = log.append(role=USER)
        os.remove(log.head_path)

        assert FileSessionLog(path).get_leaf() == b.id


def test_file_log_recovers_append_with_lost_leaf_update():
    """A record written before its leaf update was lost still becomes the leaf."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "session.jsonl")
        log = FileSessionLog(path)
        a = log.append(role=USER)
        b = log.append(role=USER)
        # Head as it was before b's pointer update
        with open(log.head_path, "w") as f:
            json.dump({"leaf_id": a.id, "seq": 1}, f)

        reopened = FileSessionLog(path)
        c = reopened.append(role=USER)

        assert c.parent_id == b.id
        assert [r.id for r in reopened.get_branch()] == [a.id, b.id, c.id]


def test_file_log_recovers_append_after_fork_to_root():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "session.jsonl")
        log = FileSessionLog(path)
        a = log.append(role=USER)
        log.fork(a.id)
        b = log.append(role=USER)
        with open(log.head_path, "w") as f:
            json.dump({"leaf_id": None, "seq": 1}, f)

        assert FileSessionLog(path).get_leaf() == b.id


def test_file_log_switch_is_not_undone_by_recovery():
    """An explicit switch to an older entry is kept as the leaf."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "session.jsonl")
        log = FileSessionLog(path)
        a = log.append(role=USER)
        log.append(role=USER)
        log.switch(a.id)

        with open(log.head_path) as f:
            assert json.load(f) == {"leaf_id": a.id, "seq": 2}
        assert FileSessionLog(path).get_leaf() == a.id
