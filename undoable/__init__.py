"""
Undoable

History-tracking decorator for pure reducers: undo, redo, jumps and
suspended recording without touching the wrapped reducer.
"""

from .core import (
    ActionTypes,
    ConfigError,
    Event,
    HistoryRecord,
    UNINITIALIZED,
    UndoableError,
    create_history,
    length,
)
from .config import UndoConfig
from .filters import (
    combine_filters,
    distinct_state,
    exclude_action,
    if_action,
    include_action,
    parse_actions,
)
from .replay import ReplayResult, replay
from .wrapper import UndoableReducer, undoable, wrap_state

__version__ = "0.1.0"

__all__ = [
    "ActionTypes",
    "ConfigError",
    "Event",
    "HistoryRecord",
    "UNINITIALIZED",
    "UndoableError",
    "create_history",
    "length",
    "UndoConfig",
    "combine_filters",
    "distinct_state",
    "exclude_action",
    "if_action",
    "include_action",
    "parse_actions",
    "ReplayResult",
    "replay",
    "UndoableReducer",
    "undoable",
    "wrap_state",
]
