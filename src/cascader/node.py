"""Option tree node with three-state check propagation."""

from __future__ import annotations

import weakref
from typing import Any, Mapping

from cascader.schemas import FieldMapping


class TreeNode:
    """One option record wrapped with its tree position and check state.

    Children are owned by their parent; the parent link is a weak reference
    used for lookups only, so callers must keep the root alive for as long
    as they use any descendant. Structure is fixed after construction, only
    ``checked`` and ``indeterminate`` change.

    Attributes:
        data: The raw option record.
        id: Identifier read from ``fields.id``.
        value: Value read from ``fields.value``.
        label: Label read from ``fields.label``.
        depth: 1 for roots, parent depth + 1 otherwise.
        path: Values from the root down to this node.
        path_labels: Labels from the root down to this node.
        children: Child nodes in record order.
        checked: Node (or its whole subtree) is selected.
        indeterminate: Some but not all descendants are selected.
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        fields: FieldMapping,
        parent: TreeNode | None = None,
    ) -> None:
        self.data = data
        self.fields = fields
        self._parent = weakref.ref(parent) if parent is not None else None
        self.depth = parent.depth + 1 if parent is not None else 1
        self.checked = False
        self.indeterminate = False

        self.id = data.get(fields.id)
        self.value = data.get(fields.value)
        self.label = data.get(fields.label)

        path_nodes = self.path_nodes
        self.path = [node.value for node in path_nodes]
        self.path_labels = [node.label for node in path_nodes]

        raw_children = data.get(fields.children)
        if not isinstance(raw_children, (list, tuple)):
            raw_children = []
        self.children: list[TreeNode] = [
            TreeNode(child, fields, self) for child in raw_children
        ]

    def __repr__(self) -> str:
        return f"TreeNode(id={self.id!r}, label={self.label!r}, depth={self.depth})"

    @property
    def parent(self) -> TreeNode | None:
        return self._parent() if self._parent is not None else None

    @property
    def path_nodes(self) -> list[TreeNode]:
        """Nodes from the root down to this node, inclusive."""
        nodes = [self]
        parent = self.parent
        while parent is not None:
            nodes.insert(0, parent)
            parent = parent.parent
        return nodes

    @property
    def root(self) -> TreeNode:
        return self.path_nodes[0]

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def get_value(self) -> Any:
        return self.value

    def get_path(self) -> list[Any]:
        return self.path

    def on_parent_check(self, checked: bool) -> None:
        """Snap this node and its whole subtree to ``checked``."""
        self.checked = checked
        self.indeterminate = False
        _check_all(self.children, checked)

    def on_child_check(self, checked: bool, *, strict: bool = True) -> None:
        """Set this node's state and recompute its ancestors.

        Args:
            checked: New state for this node.
            strict: Recompute each ancestor's ``checked`` from its own
                children instead of copying the parent's flag upward.
        """
        self.checked = checked
        self.indeterminate = False
        parent = self.parent
        if parent is None:
            return
        is_checked = all(child.checked for child in parent.children)
        set_check_state(parent, is_checked, strict=strict)


def set_check_state(parent: TreeNode, checked: bool, *, strict: bool = True) -> None:
    """Recompute ``parent`` from its children, then recurse toward the root.

    Checked children weigh 1, indeterminate children 0.5. The parent is
    indeterminate when the weighted count is above zero but short of the
    number of children.

    Args:
        parent: Ancestor to update.
        checked: Flag assigned to ``parent.checked`` when ``strict`` is False.
            The same flag is carried to every further ancestor.
        strict: Derive ``checked`` from the children at every level.
    """
    total = len(parent.children)
    weighted = sum(
        1.0 if child.checked else 0.5 if child.indeterminate else 0.0
        for child in parent.children
    )
    if strict:
        checked = total > 0 and weighted == total
    parent.checked = checked
    parent.indeterminate = weighted != total and weighted > 0

    grandparent = parent.parent
    if grandparent is not None:
        set_check_state(grandparent, checked, strict=strict)


def _check_all(nodes: list[TreeNode], checked: bool) -> None:
    for node in nodes:
        node.checked = checked
        node.indeterminate = False
        _check_all(node.children, checked)
