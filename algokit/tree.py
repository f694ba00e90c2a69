"""Binary search tree queries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def range_sum_bst(root: TreeNode | None, low: int, high: int) -> int:
    """Sum of the values in a binary search tree that lie within [low, high]."""
    total = 0
    pending: list[TreeNode | None] = [root]
    while pending:
        node = pending.pop()
        if node is None:
            continue
        if node.val < low:
            pending.append(node.right)
        elif node.val > high:
            pending.append(node.left)
        else:
            total += node.val
            pending.extend((node.left, node.right))
    return total