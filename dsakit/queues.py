"""Queues built from stacks and linked nodes, plus queue algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional

from dsakit.linked_list import Node


def _drain(source: list[Any], target: list[Any], keep: int = 0) -> None:
    """Move items from the top of ``source`` onto ``target`` until ``keep`` remain."""
    while len(source) > keep:
        target.append(source.pop())


class LazyStackQueue:
    """A FIFO queue on one stack: cheap pushes, reads dig down to the bottom."""

    def __init__(self) -> None:
        self._stack: list[Any] = []

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._stack.append(value)

    def _with_bottom(self, remove: bool) -> Any:
        if not self._stack:
            raise IndexError("queue is empty")
        held: list[Any] = []
        _drain(self._stack, held, keep=1)
        bottom = self._stack.pop() if remove else self._stack[-1]
        _drain(held, self._stack)
        return bottom

    def pop(self) -> Any:
        """Remove and return the front value."""
        return self._with_bottom(remove=True)

    def front(self) -> Any:
        """Return the front value without removing it."""
        return self._with_bottom(remove=False)

    def __len__(self) -> int:
        return len(self._stack)


class EagerStackQueue:
    """A FIFO queue on one stack kept with the front on top: pushes do the work."""

    def __init__(self) -> None:
        self._stack: list[Any] = []

    def push(self, value: Any) -> None:
        """Add ``value`` at the back by slipping it under every stored item."""
        held: list[Any] = []
        _drain(self._stack, held)
        self._stack.append(value)
        _drain(held, self._stack)

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._stack:
            raise IndexError("queue is empty")
        return self._stack.pop()

    def front(self) -> Any:
        """Return the front value without removing it."""
        if not self._stack:
            raise IndexError("queue is empty")
        return self._stack[-1]

    def __len__(self) -> int:
        return len(self._stack)


class LinkedQueue:
    """A FIFO queue on a chain of nodes with head and tail references."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        node = Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self._head is None:
            raise IndexError("dequeue from an empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        return node.val

    def front(self) -> Any:
        """Return the front value without removing it."""
        if self._head is None:
            raise IndexError("queue is empty")
        return self._head.val

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.val
            node = node.next

    def __len__(self) -> int:
        return self._size


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError(f"window size {k} out of range 1..{len(values)}")
    candidates: deque[int] = deque()
    maxima: list[int] = []
    for index, value in enumerate(values):
        if candidates and candidates[0] <= index - k:
            candidates.popleft()
        while candidates and value >= values[candidates[-1]]:
            candidates.pop()
        candidates.append(index)
        if index >= k - 1:
            maxima.append(values[candidates[0]])
    return maxima


def reverse_queue(queue: Iterable[Any]) -> deque[Any]:
    """Return a new queue holding the items of ``queue`` in reverse order."""
    stack = list(queue)
    reversed_queue: deque[Any] = deque()
    while stack:
        reversed_queue.append(stack.pop())
    return reversed_queue