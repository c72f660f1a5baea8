"""
Filter helpers deciding which data events are recorded in history.

A filter has the signature (event, new_present, old_present) -> bool.
Rejected events still update the present; they only skip history.
"""

import warnings
from typing import Any, Callable, Iterable, Tuple

from .core.events import event_field

Filter = Callable[[Any, Any, Any], bool]


def parse_actions(raw: Any, default: Iterable[str] = ()) -> Tuple[str, ...]:
    """
    Normalise an event-type option to a tuple.

    A single string becomes a one-element tuple; lists, tuples, sets and
    frozensets are converted; anything else yields default.
    """
    if isinstance(raw, str):
        return (raw,)
    if isinstance(raw, (list, tuple, set, frozenset)):
        return tuple(raw)
    return tuple(default)


def always(event: Any, new_present: Any, old_present: Any) -> bool:
    return True


def distinct_state() -> Filter:
    """Record an event only when it changed the present."""
    def _filter(event: Any, new_present: Any, old_present: Any) -> bool:
        return new_present != old_present
    return _filter


def include_action(raw: Any) -> Filter:
    """Record only the listed event types."""
    actions = frozenset(parse_actions(raw))

    def _filter(event: Any, new_present: Any = None, old_present: Any = None) -> bool:
        return event_field(event, "type") in actions
    return _filter


def exclude_action(raw: Any = ()) -> Filter:
    """Record every event type except the listed ones."""
    actions = frozenset(parse_actions(raw))

    def _filter(event: Any, new_present: Any = None, old_present: Any = None) -> bool:
        return event_field(event, "type") not in actions
    return _filter


def if_action(raw: Any) -> Filter:
    """Deprecated name of include_action."""
    warnings.warn(
        "if_action is deprecated, use include_action",
        DeprecationWarning,
        stacklevel=2,
    )
    return include_action(raw)


def combine_filters(*filters: Filter) -> Filter:
    """Record an event only when every filter accepts it."""
    def _filter(event: Any, new_present: Any, old_present: Any) -> bool:
        return all(f(event, new_present, old_present) for f in filters)
    return _filter
