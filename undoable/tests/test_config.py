"""
Tests for undoable configuration.
"""

import operator

import pytest

from undoable import ActionTypes, ConfigError, HistoryRecord, UNINITIALIZED, UndoConfig, undoable
from undoable.core.events import DEFAULT_INIT_TYPES


def identity(state=None, event=None):
    return state


def test_defaults():
    config = UndoConfig.build()

    assert config.limit is None
    assert config.init_types == DEFAULT_INIT_TYPES
    assert config.undo_type == ActionTypes.UNDO
    assert config.resume_type == ActionTypes.RESUME
    assert config.equals is operator.eq
    assert config.debug is False
    assert config.history == HistoryRecord()
    assert config.initial_state is UNINITIALIZED
    assert config.filter({"type": "X"}, 1, 0)


def test_zero_limit_is_unbounded():
    assert UndoConfig.build(limit=0).limit is None
    assert UndoConfig.build(limit=3).limit == 3


@pytest.mark.parametrize("limit", [-1, "3", 2.5, True])
def test_invalid_limit(limit):
    with pytest.raises(ConfigError):
        UndoConfig.build(limit=limit)


def test_non_callable_filter():
    with pytest.raises(ConfigError):
        UndoConfig.build(filter="DECREMENT")


def test_non_callable_equals():
    with pytest.raises(ConfigError):
        UndoConfig.build(equals=1)


def test_colliding_control_types():
    with pytest.raises(ConfigError):
        UndoConfig.build(undo_type=ActionTypes.REDO)


def test_empty_control_type_falls_back_to_default():
    assert UndoConfig.build(undo_type="").undo_type == ActionTypes.UNDO


def test_initial_history_overrides_initial_state():
    history = HistoryRecord(past=(1,), present=2)
    config = UndoConfig.build(initial_state=99, initial_history=history)

    assert config.history is history
    assert config.initial_state == 2


def test_init_types_string():
    assert UndoConfig.build(init_types="RESET").init_types == ("RESET",)
    assert UndoConfig.build(init_types=[]).init_types == ()


def test_config_is_immutable():
    config = UndoConfig.build()
    with pytest.raises(AttributeError):
        config.limit = 5


def test_undoable_with_prebuilt_config():
    config = UndoConfig.build(limit=2)
    r = undoable(identity, config)
    assert r.config is config


def test_undoable_rejects_config_and_options():
    with pytest.raises(ConfigError):
        undoable(identity, UndoConfig.build(), limit=2)


def test_undoable_rejects_non_callable_reducer():
    with pytest.raises(ConfigError):
        undoable("not a reducer")


def test_debug_flag_is_per_reducer():
    traced = undoable(identity, debug=True)
    quiet = undoable(identity)

    assert traced.config.debug is True
    assert quiet.config.debug is False
