"""
Configuration for undoable reducers.

Options are supplied once when a reducer is wrapped. UndoConfig.build()
normalises and validates them; the resulting config is immutable.
"""

import operator
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from .core.errors import ConfigError
from .core.events import ActionTypes, DEFAULT_INIT_TYPES
from .core.record import HistoryRecord, UNINITIALIZED, create_history
from .filters import Filter, always, parse_actions


@dataclass(frozen=True)
class UndoConfig:
    """
    Resolved undoable reducer configuration.

    Fields:
        history: Record used when the host state carries none yet
        limit: Maximum history length (None = unbounded)
        filter: (event, new_present, old_present) -> bool
        init_types: Event types that reset history
        equals: Snapshot equality used by resume
        debug: Emit DEBUG tracing per event
        undo_type ... resume_type: Control event identifiers
    """
    history: HistoryRecord
    limit: Optional[int] = None
    filter: Filter = always
    init_types: Tuple[str, ...] = DEFAULT_INIT_TYPES
    equals: Callable[[Any, Any], bool] = operator.eq
    debug: bool = False
    undo_type: str = ActionTypes.UNDO
    redo_type: str = ActionTypes.REDO
    jump_to_past_type: str = ActionTypes.JUMP_TO_PAST
    jump_to_future_type: str = ActionTypes.JUMP_TO_FUTURE
    suspend_type: str = ActionTypes.SUSPEND
    resume_type: str = ActionTypes.RESUME

    @property
    def initial_state(self) -> Any:
        return self.history.present

    @staticmethod
    def build(
        initial_state: Any = UNINITIALIZED,
        initial_history: Optional[HistoryRecord] = None,
        limit: Optional[int] = None,
        filter: Optional[Filter] = None,
        init_types: Any = None,
        equals: Optional[Callable[[Any, Any], bool]] = None,
        debug: bool = False,
        undo_type: Optional[str] = None,
        redo_type: Optional[str] = None,
        jump_to_past_type: Optional[str] = None,
        jump_to_future_type: Optional[str] = None,
        suspend_type: Optional[str] = None,
        resume_type: Optional[str] = None,
    ) -> "UndoConfig":
        """
        Build a config from keyword options.

        Raises:
            ConfigError: If an option has an invalid value
        """
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
            raise ConfigError(f"limit must be an int or None, got {limit!r}")
        if limit is not None and limit < 0:
            raise ConfigError(f"limit must not be negative, got {limit}")
        if filter is not None and not callable(filter):
            raise ConfigError("filter must be callable")
        if equals is not None and not callable(equals):
            raise ConfigError("equals must be callable")
        if initial_history is not None and not isinstance(initial_history, HistoryRecord):
            initial_history = HistoryRecord.from_state(initial_history)

        control = {
            "undo_type": undo_type or ActionTypes.UNDO,
            "redo_type": redo_type or ActionTypes.REDO,
            "jump_to_past_type": jump_to_past_type or ActionTypes.JUMP_TO_PAST,
            "jump_to_future_type": jump_to_future_type or ActionTypes.JUMP_TO_FUTURE,
            "suspend_type": suspend_type or ActionTypes.SUSPEND,
            "resume_type": resume_type or ActionTypes.RESUME,
        }
        if len(set(control.values())) != len(control):
            raise ConfigError(f"control event types must be distinct: {control}")

        return UndoConfig(
            history=initial_history if initial_history is not None else create_history(initial_state),
            limit=limit or None,
            filter=filter or always,
            init_types=parse_actions(init_types, DEFAULT_INIT_TYPES),
            equals=equals or operator.eq,
            debug=bool(debug),
            **control,
        )
