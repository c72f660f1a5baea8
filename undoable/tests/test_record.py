"""
Tests for the history record model.
"""

import pytest

from undoable.core.record import HistoryRecord, UNINITIALIZED, create_history, length
from undoable.wrapper import wrap_state


def test_create_history():
    r = create_history(5)
    assert r == HistoryRecord(past=(), present=5, future=(), suspend_depth=0)
    assert length(r) == 1


def test_length_counts_all_snapshots():
    r = HistoryRecord(past=(0, 1), present=2, future=(3, 4, 5))
    assert length(r) == 6


def test_uninitialized_sentinel():
    assert create_history().present is UNINITIALIZED
    assert repr(UNINITIALIZED) == "UNINITIALIZED"
    assert not UNINITIALIZED


def test_record_is_immutable():
    r = create_history(1)
    with pytest.raises(AttributeError):
        r.present = 2


def test_flags():
    r = HistoryRecord(past=(0,), present=1, future=(), suspend_depth=1)
    assert r.can_undo
    assert not r.can_redo
    assert r.is_suspended


def test_from_state_and_to_dict():
    state = {"past": [0, 1], "present": 2, "future": [3], "suspend_depth": 1, "other": "x"}
    r = HistoryRecord.from_state(state)

    assert r == HistoryRecord(past=(0, 1), present=2, future=(3,), suspend_depth=1)
    assert r.to_dict() == {"past": [0, 1], "present": 2, "future": [3], "suspend_depth": 1}


def test_from_state_missing_fields():
    assert HistoryRecord.from_state(None) == HistoryRecord()
    assert HistoryRecord.from_state({}).present is UNINITIALIZED


def test_wrap_state_keeps_host_fields():
    r = HistoryRecord(past=(0,), present=1)
    state = wrap_state({"user": "ada", "present": 99, "history": {"stale": True}}, r)

    assert state["user"] == "ada"
    assert state["present"] == 1
    assert state["past"] == [0]
    assert state["history"] == {"past": [0], "present": 1, "future": [], "suspend_depth": 0}


def test_wrap_state_returns_new_dict():
    host = {"user": "ada"}
    state = wrap_state(host, create_history(0))
    assert state is not host
    assert host == {"user": "ada"}
