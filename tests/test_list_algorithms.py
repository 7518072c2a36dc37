import pytest

from dsakit.arrays import rotate_right as rotate_values
from dsakit.linked_list import from_values, has_cycle, to_list
from dsakit.list_algorithms import (
    is_palindrome,
    merge_k_sorted,
    merge_sorted,
    odd_even,
    remove_kth_from_end,
    reorder,
    rotate_right,
    swap_pairs,
)


def test_merge_sorted_two_chains():
    merged = merge_sorted(from_values([1, 4, 5]), from_values([2, 3]))
    assert to_list(merged) == sorted([1, 4, 5, 2, 3])


def test_merge_sorted_with_empty_side():
    assert to_list(merge_sorted(None, from_values([2, 3]))) == [2, 3]
    assert to_list(merge_sorted(from_values([1]), None)) == [1]
    assert merge_sorted(None, None) is None


def test_merge_sorted_ties_take_second_first():
    first = from_values([5])
    second = from_values([5])
    merged = merge_sorted(first, second)
    assert merged is second
    assert merged.next is first


def test_merge_k_sorted():
    heads = [from_values([1, 6, 7]), from_values([2, 3]), from_values([4, 5])]
    assert to_list(merge_k_sorted(heads)) == sorted([1, 6, 7, 2, 3, 4, 5])


def test_merge_k_sorted_empty_and_single():
    assert merge_k_sorted([]) is None
    assert to_list(merge_k_sorted([from_values([3, 8])])) == [3, 8]


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5, 6], [1, 2, 3, 4, 5], [7], [7, 8]])
def test_odd_even_groups_positions(values):
    result = to_list(odd_even(from_values(values)))
    assert result == values[::2] + values[1::2]


def test_odd_even_pinned():
    assert to_list(odd_even(from_values([1, 2, 3, 4, 5, 6]))) == [1, 3, 5, 2, 4, 6]
    assert odd_even(None) is None


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
def test_remove_kth_from_end(k):
    values = [1, 2, 3, 4, 5]
    result = to_list(remove_kth_from_end(from_values(values), k))
    cut = len(values) - k
    assert result == values[:cut] + values[cut + 1 :]


def test_remove_kth_from_end_too_far_leaves_chain():
    head = from_values([1, 2, 3])
    assert remove_kth_from_end(head, 4) is head
    assert to_list(head) == [1, 2, 3]


def test_remove_kth_from_end_rejects_zero():
    with pytest.raises(ValueError):
        remove_kth_from_end(from_values([1, 2]), 0)


def test_reorder_odd_length():
    assert to_list(reorder(from_values([1, 2, 3, 4, 5]))) == [1, 5, 2, 4, 3]


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [1, 2, 3, 4, 5, 6, 7], [1, 2]])
def test_reorder_alternates_ends(values):
    result = to_list(reorder(from_values(values)))
    assert sorted(result) == values
    assert result[0::2] == values[: len(result[0::2])]
    assert result[1::2] == values[::-1][: len(result[1::2])]


def test_reorder_trivial():
    assert reorder(None) is None
    assert to_list(reorder(from_values([9]))) == [9]


@pytest.mark.parametrize("k", [0, 1, 2, 3, 4, 7])
def test_rotate_right_matches_array_rotation(k):
    values = [1, 2, 3, 4]
    head = rotate_right(from_values(values), k)
    assert not has_cycle(head)
    assert to_list(head) == rotate_values(values, k)


def test_rotate_right_empty():
    assert rotate_right(None, 3) is None


def test_swap_pairs():
    assert to_list(swap_pairs(from_values([1, 2, 3, 4, 5, 6]))) == [2, 1, 4, 3, 6, 5]


def test_swap_pairs_odd_length_keeps_last():
    result = to_list(swap_pairs(from_values([1, 2, 3, 4, 5])))
    assert result[-1] == 5
    assert to_list(swap_pairs(swap_pairs(from_values([1, 2, 3, 4, 5])))) == [1, 2, 3, 4, 5]
    assert swap_pairs(None) is None


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 2, 1], True),
        ([1, 2, 2, 1], True),
        ([1, 2, 3, 4, 5], False),
        ([1, 2], False),
        ([4], True),
        ([], True),
    ],
)
def test_is_palindrome(values, expected):
    assert is_palindrome(from_values(values)) is expected


def test_is_palindrome_restores_chain():
    values = [1, 2, 3, 3, 4]
    head = from_values(values)
    is_palindrome(head)
    assert to_list(head) == values