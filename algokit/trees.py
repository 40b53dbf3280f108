"""Binary tree traversals and checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def _postorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[tuple[TreeNode, bool]] = [(root, False)] if root is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def postorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the node values in left, right, root order."""
    return [node.val for node in _postorder_nodes(root)]


def _truncated_mean(total: int, count: int) -> int:
    mean = abs(total) // count
    return mean if total >= 0 else -mean


def average_of_subtree(root: TreeNode | None) -> int:
    """Count nodes equal to the integer average of the subtree they head."""
    totals: dict[TreeNode, tuple[int, int]] = {}
    matches = 0
    for node in _postorder_nodes(root):
        total, count = node.val, 1
        for child in (node.left, node.right):
            if child is not None:
                child_total, child_count = totals.pop(child)
                total += child_total
                count += child_count
        totals[node] = (total, count)
        if node.val == _truncated_mean(total, count):
            matches += 1
    return matches


def validate_binary_tree_nodes(
    n: int, left_child: Sequence[int], right_child: Sequence[int]
) -> bool:
    """Tell whether nodes 0..n-1 with the given children form exactly one binary tree."""
    if len(left_child) != n or len(right_child) != n:
        raise ValueError("child lists must have one entry per node")
    children: dict[int, list[int]] = {}
    in_degree = [0] * n
    for node, pair in enumerate(zip(left_child, right_child)):
        for child in pair:
            if child != -1:
                children.setdefault(node, []).append(child)
                in_degree[child] += 1

    roots = [node for node, degree in enumerate(in_degree) if degree == 0]
    if len(roots) != 1:
        return False

    root = roots[0]
    seen = {root}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for child in children.get(node, ()):
            if child in seen:
                return False
            seen.add(child)
            queue.append(child)
    return len(seen) == n