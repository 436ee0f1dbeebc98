"""Binary tree algorithms: traversals, height, balance, symmetry, width and BST queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def is_mirror(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Tell whether two trees are mirror images of each other."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.data == second.data
        and is_mirror(first.left, second.right)
        and is_mirror(first.right, second.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether a tree is a mirror of itself."""
    return is_mirror(root, root)


def max_width(root: TreeNode | None) -> int:
    """Return the largest number of nodes on any one level."""
    if root is None:
        return 0
    widest = 0
    level = deque([root])
    while level:
        widest = max(widest, len(level))
        for _ in range(len(level)):
            node = level.popleft()
            if node.left is not None:
                level.append(node.left)
            if node.right is not None:
                level.append(node.right)
    return widest


def _balanced_height(root: TreeNode | None) -> int | None:
    if root is None:
        return 0
    left = _balanced_height(root.left)
    if left is None:
        return None
    right = _balanced_height(root.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def preorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values root, left, right."""
    if root is None:
        return
    yield root.data
    yield from preorder(root.left)
    yield from preorder(root.right)


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values left, root, right."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.data
    yield from inorder(root.right)


def postorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values left, right, root."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.data


def count_in_range(root: TreeNode | None, low: Any, high: Any) -> int:
    """Count the nodes of a binary search tree whose values lie in ``[low, high]``."""
    if root is None:
        return 0
    if low <= root.data <= high:
        return (
            1
            + count_in_range(root.left, low, high)
            + count_in_range(root.right, low, high)
        )
    if root.data < low:
        return count_in_range(root.right, low, high)
    return count_in_range(root.left, low, high)


def search(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Return the node holding ``key`` in a binary search tree, or None."""
    node = root
    while node is not None and node.data != key:
        node = node.right if node.data < key else node.left
    return node