"""Two stacks sharing one fixed-size array, growing towards each other."""

from __future__ import annotations

from typing import Any


class StackOverflowError(Exception):
    """Raised when a push finds no free slot between the two stacks."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty stack."""


class TwoStacks:
    """Two stacks in one array of ``capacity`` slots.

    Stack 1 grows up from the start and stack 2 grows down from the end, so
    either may use all the room the other leaves free.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._slots: list[Any] = [None] * capacity
        self._top1 = -1
        self._top2 = capacity

    @property
    def capacity(self) -> int:
        """The number of slots shared by both stacks."""
        return len(self._slots)

    def _ensure_room(self) -> None:
        if self._top1 >= self._top2 - 1:
            raise StackOverflowError("stack overflow")

    def push1(self, value: Any) -> None:
        """Push ``value`` onto stack 1."""
        self._ensure_room()
        self._top1 += 1
        self._slots[self._top1] = value

    def push2(self, value: Any) -> None:
        """Push ``value`` onto stack 2."""
        self._ensure_room()
        self._top2 -= 1
        self._slots[self._top2] = value

    def pop1(self) -> Any:
        """Remove and return the top of stack 1."""
        if self._top1 < 0:
            raise StackUnderflowError("stack 1 is empty")
        value = self._slots[self._top1]
        self._slots[self._top1] = None
        self._top1 -= 1
        return value

    def pop2(self) -> Any:
        """Remove and return the top of stack 2."""
        if self._top2 >= len(self._slots):
            raise StackUnderflowError("stack 2 is empty")
        value = self._slots[self._top2]
        self._slots[self._top2] = None
        self._top2 += 1
        return value

    def first(self) -> list[Any]:
        """Contents of stack 1, top first."""
        return list(reversed(self._slots[: self._top1 + 1]))

    def second(self) -> list[Any]:
        """Contents of stack 2, top first."""
        return self._slots[self._top2:]