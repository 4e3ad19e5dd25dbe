#!/usr/bin/env python3
"""Command-line comparator that checks an output file against a snapshot."""

import argparse
import sys

from snapshot_check.checker import check_snapshot, check_snapshot_no_diff
from snapshot_check.errors import SnapshotIOError, SnapshotMismatch


def read_text(path):
    with open(path, "rb") as handle:
        return handle.read().decode("utf-8")


def build_parser():
    parser = argparse.ArgumentParser(description="Compare an output file against its snapshot.")
    parser.add_argument("output", help="Path to the produced output file.")
    parser.add_argument("snapshot", help="Path to the snapshot file.")
    parser.add_argument(
        "--no-diff",
        action="store_true",
        help="Do not print a diff on mismatch.",
    )
    parser.add_argument(
        "--update",
        action="store_true",
        default=None,
        help="Overwrite the snapshot when it differs (default: UPDATE_SNAPSHOTS is set).",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        actual = read_text(args.output)
    except (OSError, UnicodeDecodeError) as exc:
        print("[snapshot] cannot read output {}: {}".format(args.output, exc), file=sys.stderr)
        return 2

    check = check_snapshot_no_diff if args.no_diff else check_snapshot
    try:
        check(actual, args.snapshot, update=args.update)
    except SnapshotMismatch as exc:
        print("[snapshot] {}: {}".format(args.snapshot, exc), file=sys.stderr)
        return 1
    except SnapshotIOError as exc:
        print("[snapshot] {}: {}".format(args.snapshot, exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
