"""Huffman coding: build a prefix-free code from symbol frequencies."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class HuffmanNode:
    """A Huffman tree node; leaves carry a symbol, inner nodes carry None."""

    frequency: int
    symbol: Any = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_huffman_tree(symbols: Iterable[Any], frequencies: Iterable[int]) -> HuffmanNode:
    """Repeatedly join the two least frequent nodes until one tree remains."""
    symbol_list = list(symbols)
    frequency_list = list(frequencies)
    if len(symbol_list) != len(frequency_list):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbol_list:
        raise ValueError("at least one symbol is needed")
    order = itertools.count()
    heap = [
        (frequency, next(order), HuffmanNode(frequency, symbol))
        for symbol, frequency in zip(symbol_list, frequency_list)
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        joined = HuffmanNode(left.frequency + right.frequency, None, left, right)
        heapq.heappush(heap, (joined.frequency, next(order), joined))
    return heap[0][2]


def huffman_codes(symbols: Iterable[Any], frequencies: Iterable[int]) -> dict[Any, str]:
    """Map each symbol to its code of '0' (left) and '1' (right) digits.

    Symbols appear in the order a left-first walk of the tree meets them.
    """
    root = build_huffman_tree(symbols, frequencies)
    codes: dict[Any, str] = {}
    stack = [(root, "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = code
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes