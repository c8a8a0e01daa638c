"""
Change Tracking

Inspects the unit-of-work state of a mapped instance: which lifecycle state it
is in, and which columns a flush would write for it.

Pending changes are diffed against the values the instance was loaded with.
A replaced value object is therefore compared field by field with the
previous one, and a field equal to its column default is still reported
whenever it differs from what was loaded.
"""

import enum
from dataclasses import dataclass
from typing import Any, Dict, List

from sqlalchemy import inspect


class TrackingState(str, enum.Enum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    DETACHED = "detached"


@dataclass(frozen=True)
class ColumnChange:
    column: str
    previous: Any
    current: Any


def pending_changes(instance: Any) -> Dict[str, ColumnChange]:
    """
    Columns whose current value differs from the loaded value, keyed by
    column name.

    For an instance that was never loaded every set column is reported with
    ``previous=None``.
    """
    state = inspect(instance)
    changes: Dict[str, ColumnChange] = {}

    for prop in state.mapper.column_attrs:
        history = state.attrs[prop.key].history
        if not history.has_changes():
            continue
        changes[prop.columns[0].name] = ColumnChange(
            column=prop.columns[0].name,
            previous=history.deleted[0] if history.deleted else None,
            current=history.added[0] if history.added else None,
        )

    return changes


def update_columns(instance: Any) -> List[str]:
    """Column names an UPDATE for ``instance`` would set, in table order."""
    changes = pending_changes(instance)
    table = inspect(instance).mapper.local_table
    return [c.name for c in table.columns if c.name in changes]


def tracking_state(instance: Any) -> TrackingState:
    state = inspect(instance)

    if state.transient or state.detached:
        return TrackingState.DETACHED
    if state.pending:
        return TrackingState.ADDED
    # session.delete() marks the instance; state.deleted only flips on flush
    if state.deleted or (state.session is not None and instance in state.session.deleted):
        return TrackingState.DELETED
    if pending_changes(instance):
        return TrackingState.MODIFIED
    return TrackingState.UNCHANGED


def describe_changes(instance: Any) -> str:
    changes = pending_changes(instance)
    if not changes:
        return "no changes"
    return ", ".join(
        f"{c.column}: {c.previous!r} -> {c.current!r}" for c in changes.values()
    )
