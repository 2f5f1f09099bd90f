"""Singly linked lists and the flattening of a two-level sorted list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    value: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list reachable from ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.insert_at_tail(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` at the front of the list."""
        self.head = Node(value, self.head)

    def insert_at_tail(self, value: Any) -> None:
        """Append ``value`` at the end of the list."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def delete_head(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        value = self.head.value
        self.head = self.head.next
        return value

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        if self.head is None:
            raise ValueError(f"{value!r} is not in the list")
        if self.head.value == value:
            self.head = self.head.next
            return
        previous = self.head
        while previous.next is not None:
            if previous.next.value == value:
                previous.next = previous.next.next
                return
            previous = previous.next
        raise ValueError(f"{value!r} is not in the list")

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place, recursively."""
        self.head = _reverse_from(self.head)

    def rotate(self, k: int) -> None:
        """Move the last ``k`` nodes (modulo the length) to the front."""
        length = len(self)
        if length == 0:
            return
        k %= length
        if k == 0:
            return
        new_tail = self.head
        for _ in range(length - k - 1):
            new_tail = new_tail.next
        new_head = new_tail.next
        new_tail.next = None
        last = new_head
        while last.next is not None:
            last = last.next
        last.next = self.head
        self.head = new_head


def _reverse_from(node: Node | None) -> Node | None:
    if node is None or node.next is None:
        return node
    new_head = _reverse_from(node.next)
    node.next.next = node
    node.next = None
    return new_head


@dataclass(eq=False)
class MultiNode:
    """A node linked sideways to the next column and downwards within its own."""

    value: Any
    right: MultiNode | None = None
    down: MultiNode | None = None


def build_multilevel(columns: Iterable[Sequence[Any]]) -> MultiNode | None:
    """Build columns linked by ``down``, whose heads are linked by ``right``."""
    heads: list[MultiNode] = []
    for column in columns:
        head = None
        for value in reversed(column):
            head = MultiNode(value, down=head)
        if head is None:
            raise ValueError("columns must not be empty")
        heads.append(head)
    for left, right in zip(heads, heads[1:]):
        left.right = right
    return heads[0] if heads else None


def _merge(first: MultiNode | None, second: MultiNode | None) -> MultiNode | None:
    anchor = MultiNode(None)
    tail = anchor
    while first is not None and second is not None:
        if first.value < second.value:
            chosen, first = first, first.down
        else:
            chosen, second = second, second.down
        chosen.right = None
        tail.down = chosen
        tail = chosen
    rest = first if first is not None else second
    tail.down = rest
    while rest is not None:
        rest.right = None
        rest = rest.down
    return anchor.down


def flatten(root: MultiNode | None) -> MultiNode | None:
    """Merge every sorted column into one sorted list linked by ``down``."""
    if root is None:
        return None
    heads = []
    node: MultiNode | None = root
    while node is not None:
        heads.append(node)
        node = node.right
    result = heads[-1]
    for head in reversed(heads[:-1]):
        result = _merge(head, result)
    return result


def iter_down(node: MultiNode | None) -> Iterator[Any]:
    """Yield the values met by following ``down`` links from ``node``."""
    while node is not None:
        yield node.value
        node = node.down