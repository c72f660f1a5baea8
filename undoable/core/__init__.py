"""
Core history primitives.

This module provides the pure building blocks of undo history:
- HistoryRecord: Immutable past/present/future/suspend_depth tuple
- Operations: Pure transitions over a record
- Event: Control event records and their identifiers
"""

from .record import HistoryRecord, UNINITIALIZED, create_history, length
from .operations import insert, undo, redo, jump_to_past, jump_to_future, suspend, resume
from .events import ActionTypes, Event
from .errors import UndoableError, ConfigError

__all__ = [
    "HistoryRecord",
    "UNINITIALIZED",
    "create_history",
    "length",
    "insert",
    "undo",
    "redo",
    "jump_to_past",
    "jump_to_future",
    "suspend",
    "resume",
    "ActionTypes",
    "Event",
    "UndoableError",
    "ConfigError",
]
