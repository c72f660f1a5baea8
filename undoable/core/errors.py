"""
Exception types for undo history.

Dispatch never raises; these only surface while building a configuration.
"""


class UndoableError(Exception):
    """Base class for undo history errors."""
    pass


class ConfigError(UndoableError):
    """Raised when an undoable reducer is built with invalid options."""
    pass
