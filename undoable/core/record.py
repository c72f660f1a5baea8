"""
History record model.

A record holds every snapshot the host can navigate to:
- past: previously visited snapshots, oldest first
- present: the current snapshot
- future: undone snapshots, most recently undone first
- suspend_depth: unmatched suspend calls
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple


class _Uninitialized:
    """Marker for a record that has not received its first present yet."""

    _instance: Optional["_Uninitialized"] = None

    def __new__(cls) -> "_Uninitialized":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNINITIALIZED"

    def __bool__(self) -> bool:
        return False


UNINITIALIZED = _Uninitialized()

HISTORY_FIELDS = ("past", "present", "future", "suspend_depth")


@dataclass(frozen=True)
class HistoryRecord:
    """
    Immutable history record.

    Fields:
        past: Snapshots before present (oldest first)
        present: Current snapshot, or UNINITIALIZED before the first insert
        future: Undone snapshots (next redo first)
        suspend_depth: Count of suspend calls not yet resumed

    Operations never mutate a record; they return a new one, or the same
    instance when nothing changes.
    """
    past: Tuple[Any, ...] = ()
    present: Any = UNINITIALIZED
    future: Tuple[Any, ...] = ()
    suspend_depth: int = 0

    @property
    def can_undo(self) -> bool:
        return len(self.past) > 0

    @property
    def can_redo(self) -> bool:
        return len(self.future) > 0

    @property
    def is_suspended(self) -> bool:
        return self.suspend_depth > 0

    def to_dict(self) -> Dict[str, Any]:
        """Host-facing view of the record (lists instead of tuples)."""
        return {
            "past": list(self.past),
            "present": self.present,
            "future": list(self.future),
            "suspend_depth": self.suspend_depth,
        }

    @staticmethod
    def from_state(data: Optional[Mapping[str, Any]]) -> "HistoryRecord":
        """
        Read the record embedded in a host state mapping.

        Missing fields fall back to an empty, uninitialized record.
        """
        data = data or {}
        return HistoryRecord(
            past=tuple(data.get("past") or ()),
            present=data.get("present", UNINITIALIZED),
            future=tuple(data.get("future") or ()),
            suspend_depth=int(data.get("suspend_depth") or 0),
        )


def create_history(present: Any = UNINITIALIZED) -> HistoryRecord:
    """Fresh record with no past, no future and recording active."""
    return HistoryRecord(past=(), present=present, future=(), suspend_depth=0)


def length(record: HistoryRecord) -> int:
    """Total number of snapshots: past + present + future."""
    return len(record.past) + 1 + len(record.future)
