"""A singly linked circular list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.linked_list import Node


class CircularLinkedList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _link(self, value: Any) -> Node:
        node = Node(value)
        if self.head is None:
            node.next = node
            self.head = self._tail = node
        else:
            node.next = self.head
            self._tail.next = node
        self._size += 1
        return node

    def push_front(self, value: Any) -> None:
        """Insert ``value`` as the new first node."""
        self.head = self._link(value)

    def append(self, value: Any) -> None:
        """Insert ``value`` as the new last node."""
        self._tail = self._link(value)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        for _ in range(self._size):
            yield node.val
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        if self.head is None:
            return "List is empty."
        return "".join(f"{value} -> " for value in self) + "NULL"