"""Classic string algorithms."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Sequence

_DIGITS = "0123456789"


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards."""
    return text == text[::-1]


def decode(text: str) -> str:
    """Expand an encoding such as ``3[a]2[bc]`` into ``aaabcbc``; groups may nest."""
    result: list[str] = []
    for ch in text:
        if ch != "]":
            result.append(ch)
            continue
        try:
            opening = len(result) - 1 - result[::-1].index("[")
        except ValueError:
            raise ValueError("']' without a matching '['") from None
        segment = result[opening + 1 :]
        del result[opening:]
        start = len(result)
        while start > 0 and result[start - 1] in _DIGITS:
            start -= 1
        if start == len(result):
            raise ValueError("'[' not preceded by a repeat count")
        count = int("".join(result[start:]))
        del result[start:]
        result.extend(segment * count)
    return "".join(result)


def longest_common_prefix(words: Sequence[str]) -> str:
    """Return the longest prefix shared by every word."""
    if not words:
        raise ValueError("longest_common_prefix() of an empty sequence")
    first = words[0]
    length = len(first)
    for word in words[1:]:
        shared = 0
        for a, b in zip(first, word):
            if a != b:
                break
            shared += 1
        length = min(length, shared)
    return first[:length]


def counting_sort(text: str) -> str:
    """Sort a string of lowercase letters by counting each letter."""
    frequency = Counter(text)
    if not set(frequency) <= set(string.ascii_lowercase):
        raise ValueError("only lowercase letters a-z can be sorted")
    return "".join(letter * frequency[letter] for letter in string.ascii_lowercase)


def is_anagram(first: str, second: str) -> bool:
    """Tell whether the two strings use exactly the same letters."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def is_isomorphic(first: str, second: str) -> bool:
    """Tell whether one string maps onto the other by a one-to-one character mapping."""
    if len(first) != len(second):
        return False
    last_first: dict[str, int] = {}
    last_second: dict[str, int] = {}
    for index, (a, b) in enumerate(zip(first, second)):
        if last_first.get(a, -1) != last_second.get(b, -1):
            return False
        last_first[a] = last_second[b] = index
    return True


def longest_ones(bits: str, k: int) -> int:
    """Return the longest run of ones reachable by flipping at most ``k`` zeros."""
    start = 0
    zeros = 0
    best = 0
    for end, bit in enumerate(bits):
        if bit == "0":
            zeros += 1
        while zeros > k:
            if bits[start] == "0":
                zeros -= 1
            start += 1
        best = max(best, end - start + 1)
    return best