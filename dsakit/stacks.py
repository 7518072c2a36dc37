"""Bounded stacks and classic stack algorithms.

Free functions take a stack as a sequence whose last item is the top and
return a new list, leaving their argument untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional

from dsakit.linked_list import Node

_PAIRS = {")": "(", "]": "[", "}": "{"}


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that is at capacity."""


class StackEmptyError(IndexError):
    """Raised when reading from or popping an empty stack."""


class ArrayStack:
    """A fixed-capacity stack kept in a list."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Place ``value`` on top; raise StackFullError when at capacity."""
        if self.is_full():
            raise StackFullError("Overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("Underflow")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("Underflow")
        return self._items[-1]

    def is_full(self) -> bool:
        """Tell whether the stack holds ``capacity`` values."""
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack:
    """A fixed-capacity stack built on a chain of nodes."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._head: Optional[Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Place ``value`` on top; raise StackFullError when at capacity."""
        if self.is_full():
            raise StackFullError("Overflow")
        self._head = Node(value, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._head is None:
            raise StackEmptyError("Underflow")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.val

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._head is None:
            raise StackEmptyError("Underflow")
        return self._head.val

    def is_full(self) -> bool:
        """Tell whether the stack holds ``capacity`` values."""
        return self._size == self.capacity

    def __len__(self) -> int:
        return self._size


def is_balanced(text: str) -> bool:
    """Tell whether ``text`` consists only of properly nested brackets."""
    pending: list[str] = []
    for ch in text:
        if ch in "([{":
            pending.append(ch)
        elif ch in _PAIRS and pending and pending[-1] == _PAIRS[ch]:
            pending.pop()
        else:
            return False
    return not pending


def copy_stack(stack: Sequence[Any]) -> list[Any]:
    """Return a copy of ``stack`` with the same top."""
    return list(stack)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _apply(left: int, right: int, op: str) -> int:
    if op == "^":
        return left**right if right >= 0 else int(left**right)
    if op == "*":
        return left * right
    if op == "/":
        return _truncating_div(left, right)
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    raise ValueError(f"unknown operator {op!r}")


def _pop_operand(operands: list[int]) -> int:
    if not operands:
        raise ValueError("malformed expression: missing operand")
    return operands.pop()


def _finish(operands: list[int]) -> int:
    if len(operands) != 1:
        raise ValueError("malformed expression")
    return operands[0]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands."""
    operands: list[int] = []
    for ch in expression:
        if ch.isdigit():
            operands.append(int(ch))
        else:
            right = _pop_operand(operands)
            left = _pop_operand(operands)
            operands.append(_apply(left, right, ch))
    return _finish(operands)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single-digit operands."""
    operands: list[int] = []
    for ch in reversed(expression):
        if ch.isdigit():
            operands.append(int(ch))
        else:
            left = _pop_operand(operands)
            right = _pop_operand(operands)
            operands.append(_apply(left, right, ch))
    return _finish(operands)


def insert_at_bottom(stack: Sequence[Any], value: Any) -> list[Any]:
    """Return ``stack`` with ``value`` placed beneath every item."""
    return [value, *stack]


def insert_at(stack: Sequence[Any], value: Any, index: int) -> list[Any]:
    """Return ``stack`` with ``value`` at ``index``, counted from the bottom."""
    if not 0 <= index <= len(stack):
        raise IndexError(f"index {index} out of range 0..{len(stack)}")
    items = list(stack)
    items.insert(index, value)
    return items


def remove_at(stack: Sequence[Any], index: int) -> list[Any]:
    """Return ``stack`` without the item at ``index``, counted from the bottom."""
    if not 0 <= index < len(stack):
        raise IndexError(f"index {index} out of range")
    items = list(stack)
    del items[index]
    return items


def remove_bottom(stack: Sequence[Any]) -> list[Any]:
    """Return ``stack`` without its bottom item."""
    if not stack:
        raise StackEmptyError("remove from an empty stack")
    return list(stack[1:])


def reverse_stack(stack: Sequence[Any]) -> list[Any]:
    """Return ``stack`` turned upside down."""
    return list(reversed(stack))


def next_greater(values: Sequence[int]) -> list[int]:
    """For each value, return the next strictly greater value to its right, or -1."""
    answer = [-1] * len(values)
    waiting: list[int] = []
    for index, value in enumerate(values):
        while waiting and value > values[waiting[-1]]:
            answer[waiting.pop()] = value
        waiting.append(index)
    return answer


def stock_span(values: Iterable[int]) -> list[int]:
    """For each day, count the consecutive days ending there with price not above it."""
    prices = list(values)
    spans: list[int] = []
    greater: list[int] = []
    for index, price in enumerate(prices):
        while greater and prices[greater[-1]] <= price:
            greater.pop()
        spans.append(index - (greater[-1] if greater else -1))
        greater.append(index)
    return spans