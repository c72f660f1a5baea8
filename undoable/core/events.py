"""
Control events for undo history.

Hosts may dispatch these records or plain mappings with the same keys.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


class ActionTypes:
    """Default identifiers of the six control events."""
    UNDO = "@@undoable/UNDO"
    REDO = "@@undoable/REDO"
    JUMP_TO_PAST = "@@undoable/JUMP_TO_PAST"
    JUMP_TO_FUTURE = "@@undoable/JUMP_TO_FUTURE"
    SUSPEND = "@@undoable/SUSPEND"
    RESUME = "@@undoable/RESUME"


DEFAULT_INIT_TYPES = ("@@redux/INIT", "@@INIT")


@dataclass(frozen=True)
class Event:
    """
    Immutable event record.

    Fields:
        type: Event type (control identifier or host event type)
        index: Target index for jump events
        revert: Discard suspended changes on resume
        payload: Host-specific data
    """
    type: Optional[str]
    index: Optional[int] = None
    revert: bool = False
    payload: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def undo(cls) -> "Event":
        return cls(type=ActionTypes.UNDO)

    @classmethod
    def redo(cls) -> "Event":
        return cls(type=ActionTypes.REDO)

    @classmethod
    def jump_to_past(cls, index: int) -> "Event":
        return cls(type=ActionTypes.JUMP_TO_PAST, index=index)

    @classmethod
    def jump_to_future(cls, index: int) -> "Event":
        return cls(type=ActionTypes.JUMP_TO_FUTURE, index=index)

    @classmethod
    def suspend(cls) -> "Event":
        return cls(type=ActionTypes.SUSPEND)

    @classmethod
    def resume(cls, revert: bool = False) -> "Event":
        return cls(type=ActionTypes.RESUME, revert=revert)


def event_field(event: Any, name: str, default: Any = None) -> Any:
    """Read a field from a mapping-shaped or attribute-shaped event."""
    if event is None:
        return default
    if isinstance(event, Mapping):
        return event.get(name, default)
    return getattr(event, name, default)
