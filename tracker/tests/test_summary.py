"""
Tests for the derived summary line.

The status order is a presentation contract: done, in progress, pending,
blocked, skipped, with zero counts omitted.
"""

import itertools

from tracker.core.state import TodoItem
from tracker.core.summary import format_item_plain, summary_text


def test_summary_fixed_order_regardless_of_insertion():
    """Every permutation of the same items gives the same line."""
    items = [
        TodoItem(1, "a", "skipped"),
        TodoItem(2, "b", "blocked"),
        TodoItem(3, "c", "pending"),
        TodoItem(4, "d", "in_progress"),
        TodoItem(5, "e", "done"),
    ]

    lines = {summary_text(list(p)) for p in itertools.permutations(items)}

    assert lines == {"5 items: 1 done, 1 in progress, 1 pending, 1 blocked, 1 skipped"}


def test_summary_omits_zero_counts():
    items = [TodoItem(1, "a", "skipped"), TodoItem(2, "b", "done"), TodoItem(3, "c", "done")]

    assert summary_text(items) == "3 items: 2 done, 1 skipped"


def test_summary_empty_list():
    assert summary_text([]) == "0 items: "


def test_format_item_plain():
    assert format_item_plain(TodoItem(3, "deploy", "blocked", reason="no creds")) == "✗ #3: deploy (no creds)"
    assert format_item_plain(TodoItem(4, "docs", "in_progress")) == "◉ #4: docs"
