"""Binary tree nodes and traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node."""

    key: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _children(node: TreeNode) -> list[TreeNode]:
    return [child for child in (node.left, node.right) if child is not None]


def level_order(root: TreeNode | None) -> list[Any]:
    """Keys level by level, left to right."""
    if root is None:
        return []
    keys = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        keys.append(node.key)
        queue.extend(_children(node))
    return keys


def nodes_at_distance(root: TreeNode | None, k: int) -> list[Any]:
    """Keys of the nodes exactly ``k`` edges below ``root``, left to right."""
    if root is None or k < 0:
        return []
    level = [root]
    for _ in range(k):
        level = [child for node in level for child in _children(node)]
    return [node.key for node in level]


def preorder(root: TreeNode | None) -> list[Any]:
    """Keys in root, left subtree, right subtree order."""
    keys = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        keys.append(node.key)
        stack.extend(reversed(_children(node)))
    return keys


def postorder(root: TreeNode | None) -> list[Any]:
    """Keys in left subtree, right subtree, root order."""
    keys = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        keys.append(node.key)
        stack.extend(_children(node))
    keys.reverse()
    return keys