"""Small problems solved with sets."""

from __future__ import annotations

import string
from collections.abc import Iterable


def is_pangram(text: str) -> bool:
    """Tell whether ``text`` uses every letter of the English alphabet, ignoring case."""
    return set(string.ascii_lowercase) <= set(text.lower())


def possible_scores(questions: int, correct_marks: int, incorrect_marks: int) -> set[int]:
    """Return every total reachable by answering some questions right and some wrong.

    Unanswered questions score nothing.
    """
    if questions < 0:
        raise ValueError("number of questions must not be negative")
    return {
        correct * correct_marks + incorrect * incorrect_marks
        for correct in range(questions + 1)
        for incorrect in range(questions - correct + 1)
    }


def second_smallest(values: Iterable[int]) -> int:
    """Return the second smallest distinct value."""
    distinct = sorted(set(values))
    if len(distinct) < 2:
        raise ValueError("fewer than two distinct values")
    return distinct[1]


def common_sum(first: Iterable[int], second: Iterable[int]) -> int:
    """Sum the items of ``second`` that also occur in ``first``."""
    present = set(first)
    return sum(value for value in second if value in present)