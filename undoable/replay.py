"""
Replay: fold an event sequence through a reducer.

Replay is pure: the state produced by event N is the only input to event N+1.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final host state after applying events
        applied: Number of events applied
    """
    state: Any
    applied: int


def replay(
    reducer: Callable[[Any, Any], Any],
    events: Iterable[Any],
    state: Any = None,
    to_index: Optional[int] = None,
) -> ReplayResult:
    """
    Apply events in order to reconstruct state.

    Args:
        reducer: Any (state, event) -> state function, usually an UndoableReducer
        events: Events in dispatch order
        state: Starting state (None = reducer's own initial state)
        to_index: Stop after this event index (inclusive, None = all)

    Returns:
        ReplayResult with final state and count
    """
    count = 0

    for i, ev in enumerate(events):
        if to_index is not None and i > to_index:
            break
        state = reducer(state, ev)
        count += 1

    return ReplayResult(state=state, applied=count)
