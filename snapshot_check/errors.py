"""Outcomes raised by the snapshot checker."""


class SnapshotError(Exception):
    message = "Snapshot error"

    def __init__(self, path, cause=None):
        self.path = path
        self.cause = cause
        if cause is not None:
            super().__init__("{}: {}".format(self.message, cause))
        else:
            super().__init__(self.message)


class SnapshotMismatch(SnapshotError, AssertionError):
    """A check that should fail the calling test."""


class Created(SnapshotMismatch):
    message = "Created new snapshot"


class Updated(SnapshotMismatch):
    message = "Updated snapshot"


class Difference(SnapshotMismatch):
    message = "Difference between actual and expected"


class SnapshotIOError(SnapshotError):
    """Wraps the OS error from one stage of snapshot file access."""


class FileOpenError(SnapshotIOError):
    message = "Error opening file"


class ReadError(SnapshotIOError):
    message = "Error reading file"


class WriteError(SnapshotIOError):
    message = "Error writing file"
