"""Binary tree algorithms."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the deepest node having both ``p`` and ``q`` as descendants."""
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def binary_tree_paths(root: TreeNode | None) -> list[str]:
    """Return every root-to-leaf path as ``"a->b->c"``, left paths first."""

    def walk(node: TreeNode, prefix: str) -> Iterator[str]:
        if node.left is None and node.right is None:
            yield prefix
            return
        for child in (node.left, node.right):
            if child is not None:
                yield from walk(child, f"{prefix}->{child.val}")

    if root is None:
        return []
    return list(walk(root, str(root.val)))


def is_valid_serialization(preorder: str) -> bool:
    """Check a comma separated preorder serialization using ``#`` for null."""
    tokens = preorder.split(",")
    if tokens[-1] == "":
        tokens.pop()
    slots = 1
    for token in tokens:
        slots -= 1
        if slots < 0:
            return False
        if token != "#":
            slots += 2
    return slots == 0


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between two nodes."""
    best = 0

    def height(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def insert_into_bst(root: TreeNode | None, val: int) -> TreeNode:
    """Insert ``val`` as a new leaf of a search tree and return the root.

    Values not less than a node go to its right.
    """
    new_node = TreeNode(val)
    if root is None:
        return new_node
    node = root
    while True:
        if val < node.val:
            if node.left is None:
                node.left = new_node
                break
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                break
            node = node.right
    return root


def prune_tree(root: TreeNode | None) -> TreeNode | None:
    """Remove every subtree that holds no 1; return the new root."""
    if root is None:
        return None
    root.left = prune_tree(root.left)
    root.right = prune_tree(root.right)
    if root.val == 0 and root.left is None and root.right is None:
        return None
    return root


def distribute_coins(root: TreeNode | None) -> int:
    """Return the moves needed so that every node holds exactly one coin."""
    moves = 0

    def excess(node: TreeNode | None) -> int:
        nonlocal moves
        if node is None:
            return 0
        left = excess(node.left)
        right = excess(node.right)
        moves += abs(left) + abs(right)
        return node.val + left + right - 1

    excess(root)
    return moves


def is_valid_bst(root: TreeNode | None) -> bool:
    """Check that the tree is a strict binary search tree."""

    def valid(node: TreeNode | None, low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.val < high:
            return False
        return valid(node.left, low, node.val) and valid(node.right, node.val, high)

    return valid(root, float("-inf"), float("inf"))


def tree_insert(root: TreeNode | None, data: int) -> TreeNode:
    """Insert into a search tree where values not greater than a node go left."""
    new_node = TreeNode(data)
    if root is None:
        return new_node
    node = root
    while True:
        if data <= node.val:
            if node.left is None:
                node.left = new_node
                break
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                break
            node = node.right
    return root


def top_view(root: TreeNode | None) -> list[int]:
    """Return the left spine bottom-up, the root, then the right spine."""
    if root is None:
        return []
    left: list[int] = []
    node = root.left
    while node is not None:
        left.append(node.val)
        node = node.left
    right: list[int] = []
    node = root.right
    while node is not None:
        right.append(node.val)
        node = node.right
    return [*reversed(left), root.val, *right]