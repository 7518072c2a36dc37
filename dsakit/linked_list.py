"""Singly linked lists: a list container and algorithms over raw node chains."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked chain; nodes compare by identity."""

    val: Any
    next: Optional["Node"] = None


def _walk(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[Any]) -> Optional[Node]:
    """Build a chain holding ``values`` in order and return its head."""
    dummy = Node(None)
    tail = dummy
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[Node]) -> list[Any]:
    """Return the values of an acyclic chain as a list."""
    return [node.val for node in _walk(head)]


def format_chain(head: Optional[Node]) -> str:
    """Render a chain as ``a->b->...->NULL``."""
    return "".join(f"{node.val}->" for node in _walk(head)) + "NULL"


class LinkedList:
    """A singly linked list of values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = from_values(values)

    def _node_at(self, pos: int) -> Node:
        if pos < 0:
            raise IndexError(f"position {pos} out of range")
        for index, node in enumerate(_walk(self.head)):
            if index == pos:
                return node
        raise IndexError(f"position {pos} out of range")

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        self.head = Node(value, self.head)

    def append(self, value: Any) -> None:
        """Insert ``value`` at the tail."""
        if self.head is None:
            self.head = Node(value)
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = Node(value)

    def insert(self, pos: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at zero-based position ``pos``."""
        if pos == 0:
            self.push_front(value)
            return
        before = self._node_at(pos - 1)
        before.next = Node(value, before.next)

    def update(self, pos: int, value: Any) -> None:
        """Replace the value stored at zero-based position ``pos``."""
        self._node_at(pos).val = value

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        return node.val

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        if self.head.next is None:
            return self.pop_front()
        second_last = self.head
        while second_last.next.next is not None:
            second_last = second_last.next
        value = second_last.next.val
        second_last.next = None
        return value

    def delete_at(self, pos: int) -> Any:
        """Remove and return the value at zero-based position ``pos``."""
        if pos == 0:
            return self.pop_front()
        before = self._node_at(pos - 1)
        if before.next is None:
            raise IndexError(f"position {pos} out of range")
        removed = before.next
        before.next = removed.next
        return removed.val

    def __iter__(self) -> Iterator[Any]:
        return (node.val for node in _walk(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self.head))

    def __str__(self) -> str:
        return format_chain(self.head)


def chains_equal(first: Optional[Node], second: Optional[Node]) -> bool:
    """Tell whether two chains hold the same values in the same order."""
    while first is not None and second is not None:
        if first.val != second.val:
            return False
        first, second = first.next, second.next
    return first is None and second is None


def middle_node(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node; with an even count, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def _meeting_point(head: Optional[Node]) -> Optional[Node]:
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: Optional[Node]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    return _meeting_point(head) is not None


def remove_cycle(head: Optional[Node]) -> bool:
    """Break the cycle in a chain, if any; return whether one was removed."""
    slow = _meeting_point(head)
    if slow is None:
        return False
    fast = head
    if slow is fast:
        # The cycle starts at the head: cut at the node that points back to it.
        while slow.next is not head:
            slow = slow.next
    else:
        while slow.next is not fast.next:
            slow = slow.next
            fast = fast.next
    slow.next = None
    return True


def intersection(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the first node shared by two chains, or None."""
    if first is None or second is None:
        return None
    first_length = sum(1 for _ in _walk(first))
    second_length = sum(1 for _ in _walk(second))
    for _ in range(first_length - second_length):
        first = first.next
    for _ in range(second_length - first_length):
        second = second.next
    while first is not None and second is not None:
        if first is second:
            return first
        first, second = first.next, second.next
    return None


def delete_alternate(head: Optional[Node]) -> Optional[Node]:
    """Remove every second node in place and return the head."""
    node = head
    while node is not None and node.next is not None:
        node.next = node.next.next
        node = node.next
    return head


def delete_duplicates(head: Optional[Node]) -> Optional[Node]:
    """Collapse runs of equal adjacent values in place and return the head."""
    for node in _walk(head):
        while node.next is not None and node.val == node.next.val:
            node.next = node.next.next
    return head


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse a chain in place and return its new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def reverse_recursive(head: Optional[Node]) -> Optional[Node]:
    """Reverse a chain in place by recursion and return its new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def reverse_in_groups(head: Optional[Node], k: int) -> Optional[Node]:
    """Reverse each run of ``k`` nodes, including a shorter final run."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    dummy = Node(None)
    joint = dummy
    current = head
    while current is not None:
        group_tail = current
        previous = None
        for _ in range(k):
            if current is None:
                break
            current.next, previous, current = previous, current, current.next
        joint.next = previous
        joint = group_tail
    return dummy.next