"""
Dispatch wrapper: turns a plain reducer into an undoable one.

Each event is classified by type. Control events run the matching history
operation; every other event goes through the wrapped reducer and the result
is folded into history according to the init, filter and suspend policies.

Usage:
    counter = undoable(count_reducer, limit=100)
    state = counter(None, {"type": "INCREMENT"})
    state = counter(state, Event.undo())
    state["present"]
"""

from collections.abc import Hashable
from dataclasses import replace
from typing import Any, Callable, Dict, Mapping, Optional

from .config import UndoConfig
from .core.errors import ConfigError
from .core.events import event_field
from .core.operations import insert, jump_to_future, jump_to_past, redo, resume, suspend, undo
from .core.record import HistoryRecord, UNINITIALIZED, create_history
from .logging_config import get_logger

# Wrapped reducer signature: (present, event) -> new_present
Reducer = Callable[[Any, Any], Any]

logger = get_logger(__name__)


def wrap_state(state: Optional[Mapping[str, Any]], record: HistoryRecord) -> Dict[str, Any]:
    """
    Fold a record back into the host state.

    Host keys are kept; past/present/future/suspend_depth come from the record.
    `history` holds the same four fields for consumers expecting a nested record.
    Before the first data event `present` may be the UNINITIALIZED sentinel.
    """
    view = record.to_dict()
    wrapped = dict(state or {})
    wrapped.update(view)
    wrapped["history"] = dict(view)
    return wrapped


def _present_or_none(record: HistoryRecord) -> Any:
    return None if record.present is UNINITIALIZED else record.present


class UndoableReducer:
    """
    Reducer with undo history.

    Call it like the wrapped reducer: undoable_reducer(state, event) -> state.
    The returned state is always a new dict, except when a control event
    leaves history unchanged, in which case the input state is returned.
    """

    def __init__(self, reducer: Reducer, config: UndoConfig) -> None:
        if not callable(reducer):
            raise ConfigError("reducer must be callable")
        self.reducer = reducer
        self.config = config
        self._control = {
            config.undo_type: self._on_undo,
            config.redo_type: self._on_redo,
            config.jump_to_past_type: self._on_jump_to_past,
            config.jump_to_future_type: self._on_jump_to_future,
            config.suspend_type: self._on_suspend,
            config.resume_type: self._on_resume,
        }

        if not config.init_types:
            logger.warning("supply at least one event type in init_types to ensure initial state")

    def initial_state(self) -> Dict[str, Any]:
        """Host state for the configured initial history."""
        return wrap_state(None, self.config.history)

    def __call__(self, state: Optional[Mapping[str, Any]], event: Any) -> Any:
        event_type = event_field(event, "type")
        self._trace(event_type, "received event %r with state %r", event_type, state)

        handler = self._control.get(event_type) if isinstance(event_type, Hashable) else None
        if handler is not None:
            return handler(state, event, event_type)
        return self._on_data(state, event, event_type)

    def _record(self, state: Optional[Mapping[str, Any]]) -> HistoryRecord:
        if state is None:
            return self.config.history
        return HistoryRecord.from_state(state)

    def _trace(self, event_type: Any, msg: str, *args: Any) -> None:
        if self.config.debug:
            get_logger(__name__, trace_id=str(event_type)).debug(msg, *args)

    def _fold(self, state, record: HistoryRecord, result: HistoryRecord, event_type: Any, name: str):
        self._trace(event_type, "after %s: %r", name, result)
        if result is record:
            return state if state is not None else wrap_state(None, record)
        return wrap_state(state, result)

    def _on_undo(self, state, event, event_type):
        record = self._record(state)
        return self._fold(state, record, undo(record), event_type, "undo")

    def _on_redo(self, state, event, event_type):
        record = self._record(state)
        return self._fold(state, record, redo(record), event_type, "redo")

    def _on_jump_to_past(self, state, event, event_type):
        record = self._record(state)
        index = event_field(event, "index")
        result = jump_to_past(record, index)
        if result is record:
            logger.warning("ignoring jump to past: index %r outside past of length %d", index, len(record.past))
        return self._fold(state, record, result, event_type, "jump_to_past")

    def _on_jump_to_future(self, state, event, event_type):
        record = self._record(state)
        index = event_field(event, "index")
        result = jump_to_future(record, index)
        if result is record:
            logger.warning(
                "ignoring jump to future: index %r outside future of length %d", index, len(record.future)
            )
        return self._fold(state, record, result, event_type, "jump_to_future")

    def _on_suspend(self, state, event, event_type):
        record = self._record(state)
        result = suspend(record)
        if record.suspend_depth == 0:
            # Snapshot the present so resume(revert=True) can roll back to it
            result = insert(result, result.present, self.config.limit)
        return self._fold(state, record, result, event_type, "suspend")

    def _on_resume(self, state, event, event_type):
        record = self._record(state)
        revert = bool(event_field(event, "revert", False))
        result = resume(record, revert, self.config.equals)
        return self._fold(state, record, result, event_type, "resume")

    def _on_data(self, state, event, event_type):
        record = self._record(state)
        # Without host state the reducer picks its own default
        old_present = None if state is None else _present_or_none(record)
        new_present = self.reducer(old_present, event)

        if event_type in self.config.init_types:
            self._trace(event_type, "reset history due to init event")
            return wrap_state(state, create_history(new_present))

        if not self.config.filter(event, new_present, old_present):
            self._trace(event_type, "filter rejected event, not storing it")
            return wrap_state(state, replace(record, present=new_present))

        if record.suspend_depth > 0:
            self._trace(event_type, "tracking is suspended, not storing it")
            return wrap_state(state, replace(record, present=new_present))

        history = record if record.present is not UNINITIALIZED else self.config.history
        updated = insert(history, new_present, self.config.limit)
        self._trace(event_type, "after insert: %r", updated)
        return wrap_state(state, updated)


def undoable(reducer: Reducer, config: Optional[UndoConfig] = None, **options: Any) -> UndoableReducer:
    """
    Wrap reducer with undo history.

    Args:
        reducer: Pure function (present, event) -> new_present
        config: Prebuilt UndoConfig
        **options: Keyword options for UndoConfig.build (when no config given)

    Returns:
        UndoableReducer

    Raises:
        ConfigError: If options are invalid or both config and options are given
    """
    if config is not None and options:
        raise ConfigError("pass either config or keyword options, not both")
    return UndoableReducer(reducer, config if config is not None else UndoConfig.build(**options))
