"""A doubly linked list with in-place reversal, palindrome and neighbour checks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class DoubleNode:
    """A node linked to both its neighbours; nodes compare by identity."""

    val: Any
    prev: Optional["DoubleNode"] = field(default=None, repr=False)
    next: Optional["DoubleNode"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list of values. Positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[DoubleNode] = None
        self.tail: Optional[DoubleNode] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[DoubleNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, pos: int) -> DoubleNode:
        if not 1 <= pos <= self._size:
            raise IndexError(f"position {pos} out of range 1..{self._size}")
        for index, node in enumerate(self._nodes(), start=1):
            if index == pos:
                return node
        raise IndexError(f"position {pos} out of range 1..{self._size}")

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        node = DoubleNode(value, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        node = DoubleNode(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def insert_at(self, pos: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the node at 1-based position ``pos``."""
        if not 1 <= pos <= self._size + 1:
            raise IndexError(f"position {pos} out of range 1..{self._size + 1}")
        if pos == 1:
            self.push_front(value)
            return
        if pos == self._size + 1:
            self.append(value)
            return
        before = self._node_at(pos - 1)
        after = before.next
        node = DoubleNode(value, prev=before, next=after)
        before.next = node
        after.prev = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        else:
            self.head.prev = None
        self._size -= 1
        return node.val

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self.tail is None:
            raise IndexError("pop from an empty list")
        node = self.tail
        self.tail = node.prev
        if self.tail is None:
            self.head = None
        else:
            self.tail.next = None
        self._size -= 1
        return node.val

    def delete_at(self, pos: int) -> Any:
        """Remove and return the value at 1-based position ``pos``."""
        node = self._node_at(pos)
        if node is self.head:
            return self.pop_front()
        if node is self.tail:
            return self.pop_back()
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.val

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self.head
        while node is not None:
            following = node.next
            node.next, node.prev = node.prev, following
            node = following
        self.head, self.tail = self.tail, self.head

    def is_palindrome(self) -> bool:
        """Tell whether the values read the same from both ends."""
        front, back = self.head, self.tail
        while front is not back and front is not None and back is not front.prev:
            if front.val != back.val:
                return False
            front, back = front.next, back.prev
        return True

    def remove_equal_neighbours(self) -> None:
        """Working from the back, drop each inner node whose two neighbours are equal."""
        if self.tail is None:
            return
        current = self.tail.prev
        while current is not None and current is not self.head:
            before, after = current.prev, current.next
            if before.val == after.val:
                before.next = after
                after.prev = before
                self._size -= 1
            current = before

    def __iter__(self) -> Iterator[Any]:
        return (node.val for node in self._nodes())

    def __len__(self) -> int:
        return self._size