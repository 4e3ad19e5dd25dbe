"""Line-oriented changesets between an expected and an actual string."""

import difflib
import re
import sys

_LINE = re.compile(r"[^\n]*\n|[^\n]+")

NO_NEWLINE_MARKER = "\\ No newline at end of file"


def split_lines(text):
    return _LINE.findall(text)


class Changeset:
    def __init__(self, expected, actual):
        self.expected = split_lines(expected)
        self.actual = split_lines(actual)
        matcher = difflib.SequenceMatcher(None, self.expected, self.actual, autojunk=False)
        self.opcodes = matcher.get_opcodes()
        self.distance = _distance(self.opcodes)

    def __bool__(self):
        return self.distance != 0

    def lines(self):
        """Yield the unified diff without line terminators."""
        diff = difflib.unified_diff(
            self.expected,
            self.actual,
            fromfile="expected",
            tofile="actual",
            lineterm="",
        )
        for index, line in enumerate(diff):
            if index < 2 or line.startswith("@@"):
                yield line
            elif line.endswith("\n"):
                yield line[:-1]
            else:
                yield line
                yield NO_NEWLINE_MARKER

    def __str__(self):
        return "\n".join(self.lines())


def _distance(opcodes):
    distance = 0
    for tag, i1, i2, j1, j2 in opcodes:
        if tag == "equal":
            continue
        distance += (i2 - i1) + (j2 - j1)
    return distance


def compare(actual, expected, show_diff, stream=None):
    changeset = Changeset(expected, actual)
    if changeset.distance and show_diff:
        if stream is None:
            stream = sys.stderr
        print(changeset, file=stream)
    return changeset
