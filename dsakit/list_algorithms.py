"""Algorithms that rearrange or inspect singly linked chains."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Optional

from dsakit.linked_list import Node, middle_node, reverse


def merge_sorted(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Splice two ascending chains into one ascending chain and return its head.

    On equal values the node from ``second`` comes first.
    """
    dummy = Node(None)
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def merge_k_sorted(heads: Iterable[Optional[Node]]) -> Optional[Node]:
    """Merge any number of ascending chains, pairing them off front to back."""
    pending = deque(heads)
    if not pending:
        return None
    while len(pending) > 1:
        first = pending.popleft()
        second = pending.popleft()
        pending.append(merge_sorted(first, second))
    return pending[0]


def odd_even(head: Optional[Node]) -> Optional[Node]:
    """Relink the nodes at odd positions ahead of those at even positions."""
    if head is None:
        return None
    even_head = head.next
    odd, even = head, even_head
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def remove_kth_from_end(head: Optional[Node], k: int) -> Optional[Node]:
    """Unlink the ``k``-th node counted from the end and return the head.

    The chain is left unchanged when it has fewer than ``k`` nodes.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    lead = head
    for _ in range(k):
        if lead is None:
            return head
        lead = lead.next
    if lead is None:
        return head.next
    trail = head
    while lead.next is not None:
        trail = trail.next
        lead = lead.next
    trail.next = trail.next.next
    return head


def reorder(head: Optional[Node]) -> Optional[Node]:
    """Relink a chain as first, last, second, second-to-last, and so on."""
    if head is None or head.next is None:
        return head
    middle = middle_node(head)
    second = reverse(middle.next)
    middle.next = None
    first = head
    while second is not None:
        next_first, next_second = first.next, second.next
        first.next = second
        second.next = next_first
        first, second = next_first, next_second
    return head


def rotate_right(head: Optional[Node], k: int) -> Optional[Node]:
    """Rotate a chain ``k`` places to the right and return its new head."""
    if head is None:
        return None
    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1
    k %= length
    if k == 0:
        return head
    tail.next = head
    new_tail = head
    for _ in range(length - k - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def swap_pairs(head: Optional[Node]) -> Optional[Node]:
    """Swap each pair of adjacent nodes and return the new head."""
    dummy = Node(None, head)
    before = dummy
    while before.next is not None and before.next.next is not None:
        a = before.next
        b = a.next
        a.next = b.next
        b.next = a
        before.next = b
        before = a
    return dummy.next


def is_palindrome(head: Optional[Node]) -> bool:
    """Tell whether a chain reads the same both ways; the chain is left as found."""
    if head is None:
        return True
    middle = middle_node(head)
    back = reverse(middle)
    try:
        front, node = head, back
        while node is not None:
            if front.val != node.val:
                return False
            front, node = front.next, node.next
        return True
    finally:
        reverse(back)