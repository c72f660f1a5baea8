"""
Transition operations: pure functions over a HistoryRecord.

Every operation is total. Boundary inputs (empty past or future, an
unmatched resume, a jump index outside the target sequence) return the
input record unchanged instead of raising.
"""

import operator
from dataclasses import replace
from typing import Any, Callable, Optional

from .record import HistoryRecord, UNINITIALIZED, length

# Snapshot equality: (present, last_past) -> bool
Equality = Callable[[Any, Any], bool]


def _valid_index(index: Any, size: int) -> bool:
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < size


def insert(record: HistoryRecord, new_present: Any, limit: Optional[int] = None) -> HistoryRecord:
    """
    Make new_present the present, pushing the old present onto past.

    The first insert into an uninitialized record only sets the present.
    Future is always cleared. When the record already holds `limit`
    snapshots the oldest past entry is evicted.

    Args:
        record: Current record
        new_present: Snapshot to record
        limit: Maximum length (None = unbounded)

    Returns:
        New record
    """
    if record.present is UNINITIALIZED:
        return HistoryRecord(
            past=(),
            present=new_present,
            future=(),
            suspend_depth=record.suspend_depth,
        )

    overflow = limit is not None and length(record) >= limit
    past = record.past[1 if overflow else 0:] + (record.present,)
    if limit is not None and len(past) + 1 > limit:
        past = past[len(past) + 1 - limit:]

    return HistoryRecord(
        past=past,
        present=new_present,
        future=(),
        suspend_depth=record.suspend_depth,
    )


def undo(record: HistoryRecord) -> HistoryRecord:
    """Step back one snapshot. No-op when past is empty."""
    if not record.past:
        return record

    return HistoryRecord(
        past=record.past[:-1],
        present=record.past[-1],
        future=(record.present,) + record.future,
        suspend_depth=record.suspend_depth,
    )


def redo(record: HistoryRecord) -> HistoryRecord:
    """Step forward one snapshot. No-op when future is empty."""
    if not record.future:
        return record

    return HistoryRecord(
        past=record.past + (record.present,),
        present=record.future[0],
        future=record.future[1:],
        suspend_depth=record.suspend_depth,
    )


def jump_to_future(record: HistoryRecord, index: Any) -> HistoryRecord:
    """
    Jump to future[index], moving the skipped snapshots onto past.

    Index 0 is a redo. An index outside future is a no-op.
    """
    if not _valid_index(index, len(record.future)):
        return record
    if index == 0:
        return redo(record)

    return HistoryRecord(
        past=record.past + (record.present,) + record.future[:index],
        present=record.future[index],
        future=record.future[index + 1:],
        suspend_depth=record.suspend_depth,
    )


def jump_to_past(record: HistoryRecord, index: Any) -> HistoryRecord:
    """
    Jump to past[index], moving the skipped snapshots onto future.

    The last index of past is an undo. An index outside past is a no-op.
    """
    if not _valid_index(index, len(record.past)):
        return record
    if index == len(record.past) - 1:
        return undo(record)

    return HistoryRecord(
        past=record.past[:index],
        present=record.past[index],
        future=record.past[index + 1:] + (record.present,) + record.future,
        suspend_depth=record.suspend_depth,
    )


def suspend(record: HistoryRecord) -> HistoryRecord:
    """Increase suspend depth; snapshots are untouched."""
    return replace(record, suspend_depth=record.suspend_depth + 1)


def resume(record: HistoryRecord, revert: bool = False, equals: Equality = operator.eq) -> HistoryRecord:
    """
    Match one suspend call.

    When revert is requested, or the present still equals the snapshot taken
    at suspend time, that snapshot becomes the present again. Otherwise the
    change made while suspended stays as present without a past entry.

    Args:
        record: Current record
        revert: Discard changes made while suspended
        equals: Snapshot equality used to detect "no change"

    Returns:
        New record, or record itself when there is no matching suspend
    """
    if record.suspend_depth < 1:
        return record

    depth = record.suspend_depth - 1
    if record.past and (revert or equals(record.present, record.past[-1])):
        return HistoryRecord(
            past=record.past[:-1],
            present=record.past[-1],
            future=record.future,
            suspend_depth=depth,
        )

    return replace(record, suspend_depth=depth)
