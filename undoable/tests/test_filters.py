"""
Tests for filter helpers.
"""

import pytest

from undoable import Event, undoable
from undoable.filters import (
    combine_filters,
    distinct_state,
    exclude_action,
    if_action,
    include_action,
    parse_actions,
)


def set_reducer(state=None, event=None):
    if isinstance(event, dict) and "value" in event:
        return event["value"]
    return state


def test_parse_actions():
    assert parse_actions("A") == ("A",)
    assert parse_actions(["A", "B"]) == ("A", "B")
    assert parse_actions(("A",)) == ("A",)
    assert parse_actions(None) == ()
    assert parse_actions(None, ["X"]) == ("X",)
    assert parse_actions(42, ("X", "Y")) == ("X", "Y")
    assert sorted(parse_actions({"A", "B"})) == ["A", "B"]


def test_include_action():
    f = include_action(["SET", "ADD"])
    assert f({"type": "SET"}, 1, 0)
    assert f(Event(type="ADD"), 1, 0)
    assert not f({"type": "OTHER"}, 1, 0)


def test_include_action_single_string():
    f = include_action("SET")
    assert f({"type": "SET"})
    assert not f({"type": "SETTER"})


def test_exclude_action():
    f = exclude_action("SELECT")
    assert not f({"type": "SELECT"}, 1, 0)
    assert f({"type": "SET"}, 1, 0)
    assert exclude_action()({"type": "ANYTHING"})


def test_if_action_is_deprecated():
    with pytest.warns(DeprecationWarning):
        f = if_action("SET")
    assert f({"type": "SET"})


def test_distinct_state():
    f = distinct_state()
    assert f({"type": "SET"}, 2, 1)
    assert not f({"type": "SET"}, 1, 1)


def test_distinct_state_skips_unchanged_presents():
    """Events that leave present equal are not recorded."""
    r = undoable(set_reducer, filter=distinct_state())
    state = r(None, {"type": "SET", "value": 1})
    state = r(state, {"type": "SET", "value": 2})
    state = r(state, {"type": "SET", "value": 2})
    state = r(state, {"type": "SET", "value": 3})

    assert state["past"] == [1, 2]
    assert state["present"] == 3


def test_combine_filters():
    f = combine_filters(exclude_action("SELECT"), distinct_state())
    assert f({"type": "SET"}, 2, 1)
    assert not f({"type": "SET"}, 1, 1)
    assert not f({"type": "SELECT"}, 2, 1)
    assert combine_filters()({"type": "SET"}, 1, 1)
