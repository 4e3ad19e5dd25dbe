"""Compare strings against snapshot files recorded on disk."""

from snapshot_check.checker import UPDATE_SNAPSHOTS_VAR, check_snapshot, check_snapshot_no_diff, update_requested
from snapshot_check.diff import Changeset, compare
from snapshot_check.errors import (
    Created,
    Difference,
    FileOpenError,
    ReadError,
    SnapshotError,
    SnapshotIOError,
    SnapshotMismatch,
    Updated,
    WriteError,
)

__all__ = [
    "UPDATE_SNAPSHOTS_VAR",
    "Changeset",
    "Created",
    "Difference",
    "FileOpenError",
    "ReadError",
    "SnapshotError",
    "SnapshotIOError",
    "SnapshotMismatch",
    "Updated",
    "WriteError",
    "check_snapshot",
    "check_snapshot_no_diff",
    "compare",
    "update_requested",
]
