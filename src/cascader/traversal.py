"""Depth-first traversal helpers over a forest of tree nodes."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from cascader.node import TreeNode


def iter_nodes(nodes: Iterable[TreeNode]) -> Iterator[TreeNode]:
    """Yield every node in pre-order, depth first."""
    for node in nodes:
        yield node
        yield from iter_nodes(node.children)


def iter_leaves(nodes: Iterable[TreeNode]) -> Iterator[TreeNode]:
    """Yield every leaf in depth-first order."""
    for node in iter_nodes(nodes):
        if node.is_leaf:
            yield node


def find_node(nodes: Iterable[TreeNode], node_id: Any) -> TreeNode | None:
    """Return the first node with ``node_id`` in depth-first order."""
    for node in iter_nodes(nodes):
        if node.id == node_id:
            return node
    return None


def count_nodes(nodes: Iterable[TreeNode]) -> int:
    """Count total nodes in the forest."""
    total = 0
    for node in nodes:
        total += 1
        total += count_nodes(node.children)
    return total
