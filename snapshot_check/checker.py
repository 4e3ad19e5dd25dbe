"""Checks a string against a snapshot file, creating or updating it as needed."""

import os

from snapshot_check.diff import compare
from snapshot_check.errors import Created, Difference, FileOpenError, ReadError, Updated, WriteError

UPDATE_SNAPSHOTS_VAR = "UPDATE_SNAPSHOTS"


def update_requested(environ=None):
    """Return True when the update variable is set, to any value."""
    if environ is None:
        environ = os.environ
    return UPDATE_SNAPSHOTS_VAR in environ


def check_snapshot(actual, snapshot, update=None, stream=None):
    """Check `actual` against the snapshot file, printing a diff on mismatch.

    Raises Created when the snapshot did not exist and Updated when update
    mode rewrote it; both are failures so the new baseline gets reviewed.
    """
    _check(actual, snapshot, True, update, stream)


def check_snapshot_no_diff(actual, snapshot, update=None, stream=None):
    _check(actual, snapshot, False, update, stream)


def _check(actual, snapshot, show_diff, update, stream):
    if update is None:
        update = update_requested()
    if not os.path.exists(snapshot):
        _create(actual, snapshot, show_diff, stream)
    elif update:
        _check_and_update(actual, snapshot, show_diff, stream)
    else:
        _check_existing(actual, snapshot, show_diff, stream)


def _check_existing(actual, snapshot, show_diff, stream):
    expected = _read(snapshot)
    if compare(actual, expected, show_diff, stream):
        raise Difference(snapshot)


def _create(actual, snapshot, show_diff, stream):
    _write(snapshot, actual)
    compare(actual, "", show_diff, stream)
    raise Created(snapshot)


def _check_and_update(actual, snapshot, show_diff, stream):
    expected = _read(snapshot)
    if not compare(actual, expected, show_diff, stream):
        return
    _write(snapshot, actual)
    raise Updated(snapshot)


def _read(snapshot):
    try:
        handle = open(snapshot, "rb")
    except OSError as exc:
        raise FileOpenError(snapshot, exc) from exc
    with handle:
        try:
            return handle.read().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(snapshot, exc) from exc


def _write(snapshot, actual):
    try:
        data = actual.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise WriteError(snapshot, exc) from exc
    try:
        handle = open(snapshot, "wb")
    except OSError as exc:
        raise FileOpenError(snapshot, exc) from exc
    with handle:
        try:
            handle.write(data)
        except OSError as exc:
            raise WriteError(snapshot, exc) from exc
