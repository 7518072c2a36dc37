"""Scoring the alignment of two melodies against a hierarchy of tunes."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Sequence


class TuneHierarchy:
    """A tree of named tunes, each at a depth below the first parent given."""

    def __init__(self, root: str, children: dict[str, list[str]]) -> None:
        self.root = root
        self._children = children
        self._levels = {name: -1 for name in children}
        self._levels[root] = 0
        queue = deque([root])
        while queue:
            current = queue.popleft()
            for child in children[current]:
                if self._levels[child] == -1:
                    self._levels[child] = self._levels[current] + 1
                    queue.append(child)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TuneHierarchy":
        """Build a hierarchy from lines of the form ``parent: child child ...``.

        The parent on the first line is the root.
        """
        children: dict[str, list[str]] = {}
        root = None
        for line in lines:
            parent, _, rest = line.rstrip("\r\n").partition(":")
            parent = parent.rstrip(" \t")
            children.setdefault(parent, [])
            if root is None:
                root = parent
            for child in rest.split():
                children.setdefault(child, [])
                children[parent].append(child)
        if root is None:
            raise ValueError("a tune hierarchy needs at least one line")
        return cls(root, children)

    def level(self, name: str) -> int:
        """Return the depth of ``name``; -1 when it cannot be reached from the root."""
        if name not in self._levels:
            raise KeyError(name)
        return self._levels[name]

    def __contains__(self, name: object) -> bool:
        return name in self._levels


def parse_melody(text: str) -> list[str]:
    """Split a melody written as ``note-note-...`` into its notes."""
    text = text.rstrip("\r\n")
    if not text:
        return []
    notes = text.split("-")
    if notes[-1] == "":
        notes.pop()
    return notes


def melody_score(
    hierarchy: TuneHierarchy,
    first: Sequence[str],
    second: Sequence[str],
    match: int,
    mismatch: int,
    gap: int,
) -> int:
    """Return the best alignment score of two melodies.

    Aligned notes that are equal or sit at the same level earn ``match``;
    other aligned known notes cost ``mismatch``; each skipped note costs ``gap``.
    Notes missing from the hierarchy can only be skipped.
    """
    previous = [-gap * j for j in range(len(second) + 1)]
    for i, note1 in enumerate(first, start=1):
        current = [-gap * i]
        for j, note2 in enumerate(second, start=1):
            best = max(previous[j] - gap, current[j - 1] - gap)
            if note1 in hierarchy and note2 in hierarchy:
                if note1 == note2 or hierarchy.level(note1) == hierarchy.level(note2):
                    best = max(previous[j - 1] + match, best)
                else:
                    best = max(previous[j - 1] - mismatch, best)
            current.append(best)
        previous = current
    return previous[-1]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a hierarchy, two melodies and the scores, then print the best score."""
    parser = argparse.ArgumentParser(description="Score two melodies against a tune hierarchy.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    with args.input as stream:
        lines = stream.read().splitlines()
    count = int(lines[0])
    hierarchy = TuneHierarchy.from_lines(lines[1 : count + 1])
    first = parse_melody(lines[count + 1])
    second = parse_melody(lines[count + 2])
    match, mismatch, gap = (int(token) for token in " ".join(lines[count + 3 :]).split()[:3])
    sys.stdout.write(str(melody_score(hierarchy, first, second, match, mismatch, gap)))
    return 0