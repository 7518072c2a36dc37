"""Classic algorithms over flat integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations


def count_greater(values: Iterable[int], x: int) -> int:
    """Count the values strictly greater than ``x``."""
    return sum(1 for value in values if value > x)


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Return the running totals of ``values``."""
    return list(accumulate(values))


def sorted_squares(values: Sequence[int]) -> list[int]:
    """Return the squares of an ascending sequence, in ascending order."""
    squares: list[int] = []
    left, right = 0, len(values) - 1
    while left <= right:
        if abs(values[left]) < abs(values[right]):
            squares.append(values[right] * values[right])
            right -= 1
        else:
            squares.append(values[left] * values[left])
            left += 1
    squares.reverse()
    return squares


def has_equal_split(values: Sequence[int]) -> bool:
    """Tell whether some prefix sums to the same total as the remaining suffix."""
    total = sum(values)
    return any(prefix == total - prefix for prefix in accumulate(values))


def is_strictly_increasing(values: Sequence[int]) -> bool:
    """Tell whether each value is greater than the one before it."""
    return all(later > earlier for earlier, later in zip(values, values[1:]))


def even_odd_partition(values: Sequence[int]) -> list[int]:
    """Return the values rearranged so that all even values precede the odd ones."""
    result = list(values)
    left, right = 0, len(result) - 1
    while left < right:
        if result[left] % 2 != 0 and result[right] % 2 == 0:
            result[left], result[right] = result[right], result[left]
            left += 1
            right -= 1
        if result[left] % 2 == 0:
            left += 1
        if result[right] % 2 != 0:
            right -= 1
    return result


def alternating_sum(values: Iterable[int]) -> int:
    """Add values at even positions and subtract those at odd positions."""
    return sum(value if index % 2 == 0 else -value for index, value in enumerate(values))


def last_index(values: Sequence[int], x: int) -> int:
    """Return the index of the last occurrence of ``x``, or -1 when absent."""
    return next((i for i in range(len(values) - 1, -1, -1) if values[i] == x), -1)


def count_occurrences(values: Iterable[int], queries: Iterable[int]) -> list[int]:
    """Answer, for each query, how many times it occurs among ``values``."""
    frequency = Counter(values)
    return [frequency[query] for query in queries]


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Return ``values`` rotated ``k`` places to the right."""
    if not values:
        return []
    k %= len(values)
    reversed_values = list(values)[::-1]
    return reversed_values[:k][::-1] + reversed_values[k:][::-1]


def second_largest(values: Sequence[int]) -> int:
    """Return the largest value that differs from the maximum."""
    if not values:
        raise ValueError("second_largest() of an empty sequence")
    largest = max(values)
    rest = [value for value in values if value != largest]
    if not rest:
        raise ValueError("no value differs from the maximum")
    return max(rest)


def sort_binary(values: Sequence[int]) -> list[int]:
    """Return a sequence of zeros and ones sorted, zeros first."""
    if any(value not in (0, 1) for value in values):
        raise ValueError("values must be 0 or 1")
    zeros = list(values).count(0)
    return [0] * zeros + [1] * (len(values) - zeros)


def range_sums(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer 1-based inclusive range-sum queries ``(l, r)`` using prefix sums."""
    prefix = [0, *accumulate(values)]
    answers = []
    for low, high in queries:
        if low < 1 or low - 1 > len(values) or high < 0 or high > len(values):
            raise IndexError(f"query ({low}, {high}) outside 1..{len(values)}")
        answers.append(prefix[high] - prefix[low - 1])
    return answers


def count_triplets(values: Sequence[int], target: int) -> int:
    """Count the triples of distinct positions whose values add up to ``target``."""
    return sum(1 for triple in combinations(values, 3) if sum(triple) == target)


def unique_values(values: Sequence[int]) -> list[int]:
    """Return, in order, the values that occur exactly once."""
    frequency = Counter(values)
    return [value for value in values if frequency[value] == 1]