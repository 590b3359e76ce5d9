"""Binary tree height and balance, and quad trees built from grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


@dataclass
class QuadNode:
    """A quad tree node; a leaf stands for a square of equal cells."""

    val: bool
    is_leaf: bool
    top_left: Optional["QuadNode"] = None
    top_right: Optional["QuadNode"] = None
    bottom_left: Optional["QuadNode"] = None
    bottom_right: Optional["QuadNode"] = None


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    """Return the height of ``node``, or None if some subtree is unbalanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced_tree(root: Optional[TreeNode]) -> bool:
    """Report whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def construct_quad_tree(grid: Sequence[Sequence[int]]) -> Optional[QuadNode]:
    """Build the quad tree of a square grid of 0/1 cells.

    Returns None for an empty grid. Raises ValueError unless the grid is
    square with a side that is a power of two.
    """
    size = len(grid)
    if size == 0:
        return None
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")
    if size & (size - 1):
        raise ValueError("grid side must be a power of two")

    def build(row: int, col: int, side: int) -> QuadNode:
        if side == 1:
            return QuadNode(grid[row][col] == 1, True)
        half = side // 2
        children = (
            build(row, col, half),
            build(row, col + half, half),
            build(row + half, col, half),
            build(row + half, col + half, half),
        )
        if all(child.is_leaf for child in children) and len({c.val for c in children}) == 1:
            return QuadNode(children[0].val, True)
        return QuadNode(True, False, *children)

    return build(0, 0, size)