"""Selection state for a cascading option tree."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from cascader.exceptions import BulkClearDisabledError, ConfigurationError, UnknownNodeError
from cascader.node import TreeNode
from cascader.schemas import CascaderConfig, SelectionSnapshot
from cascader.traversal import count_nodes, find_node, iter_leaves, iter_nodes

logger = logging.getLogger(__name__)


class SelectionController:
    """Owns the node forest, the open menu chain and the selected set.

    The selected set maps leaf ids to their label paths. In multi-select mode
    every toggle keeps ancestor ``checked``/``indeterminate`` flags consistent
    with their subtrees; single-select keeps at most one selected leaf.

    Not thread safe: callers serialise access to one instance.
    """

    def __init__(
        self,
        options: Iterable[Mapping[str, Any]],
        config: CascaderConfig | Mapping[str, Any] | None = None,
    ) -> None:
        """Build the forest and apply any preselected ids.

        Args:
            options: Raw option records, each optionally holding children.
            config: A ``CascaderConfig`` or a mapping validated into one.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        self.config = _coerce_config(config)
        fields = self.config.field_map
        self._forest: list[TreeNode] = [TreeNode(record, fields) for record in options]
        self._menus: list[list[TreeNode]] = [self._forest]
        self._selected: dict[Any, list[Any]] = {}

        logger.debug(
            "Built option forest",
            extra={"roots": len(self._forest), "nodes": count_nodes(self._forest)},
        )

        if self.config.preselected_ids:
            self.rehydrate(self.config.preselected_ids)

    @property
    def forest(self) -> list[TreeNode]:
        return self._forest

    @property
    def menus(self) -> list[list[TreeNode]]:
        """Sibling lists currently navigable, index 0 holding the roots."""
        return self._menus

    @property
    def selected(self) -> dict[Any, list[Any]]:
        return dict(self._selected)

    @property
    def multiple(self) -> bool:
        return self.config.multiple

    @property
    def separator(self) -> str:
        return self.config.separator

    @property
    def clearable(self) -> bool:
        return self.config.clearable

    def find_node(self, node_id: Any) -> TreeNode | None:
        return find_node(self._forest, node_id)

    def expand(self, node: TreeNode) -> list[list[TreeNode]]:
        """Open ``node`` in the menu chain.

        Deeper levels are dropped and the node's children, if any, become the
        deepest level.

        Args:
            node: A node from this controller's forest.

        Returns:
            The updated menu chain.

        Raises:
            UnknownNodeError: If ``node`` is not part of this forest.
        """
        self._require_owned(node)
        menus = self._menus[: node.depth]
        if node.children:
            menus.append(node.children)
        self._menus = menus
        return menus

    def toggle(self, node: TreeNode, checked: bool = True) -> None:
        """Check or uncheck ``node`` according to the selection mode.

        Args:
            node: A node from this controller's forest.
            checked: Target state.

        Raises:
            UnknownNodeError: If ``node`` is not part of this forest.
        """
        self._require_owned(node)
        if not self.multiple:
            self._toggle_single(node, checked)
            return

        strict = self.config.strict_ancestors
        # Ancestors first, then the subtree, so the node's forced state wins.
        if node.depth > 1:
            node.on_child_check(checked, strict=strict)
        node.on_parent_check(checked)

        if node.children:
            for leaf in iter_leaves(node.children):
                self._store(leaf)
        else:
            self._store(node)

        logger.debug(
            "Toggled node",
            extra={"node_id": node.id, "checked": checked, "selected": len(self._selected)},
        )

    def activate(self, node: TreeNode, checked: bool | None = None) -> list[list[TreeNode]]:
        """Handle a user activating ``node`` in a menu.

        Single-select toggles leaves on; multi-select toggles only when a
        checkbox state is supplied. The node is then expanded.

        Returns:
            The updated menu chain.
        """
        if not self.multiple:
            if node.is_leaf:
                self.toggle(node, True)
        elif checked is not None:
            self.toggle(node, checked)
        return self.expand(node)

    def uncheck_by_id(self, node_id: Any) -> TreeNode:
        """Remove the selection held by ``node_id``.

        Raises:
            UnknownNodeError: If no node carries ``node_id``.
        """
        node = self.find_node(node_id)
        if node is None:
            raise UnknownNodeError(f"No option with id {node_id!r}")
        self.toggle(node, False)
        return node

    def rehydrate(self, ids: Iterable[Any]) -> list[TreeNode]:
        """Restore checked state and menu position from previously selected ids.

        Every leaf whose id is listed is checked with full propagation. The
        menu chain is reset to the roots and then opened along the path of
        the first match. Single-select keeps the first match only.

        Matching nothing is not an error; inspect ``get_selected_ids``
        afterwards to confirm the restore.

        Args:
            ids: Previously selected leaf ids.

        Returns:
            The matched leaves in depth-first order.
        """
        wanted = list(ids)
        matches: list[TreeNode] = []
        for leaf in iter_leaves(self._forest):
            if leaf.id not in wanted:
                continue
            matches.append(leaf)
            if not self.multiple:
                # Single-select tracks the choice in the selected set only.
                self.toggle(leaf, True)
                break
            leaf.checked = True
            self.toggle(leaf, True)

        self._menus = [self._forest]
        if not matches:
            logger.debug("No options matched preselected ids", extra={"ids": wanted})
            return matches

        levels: list[list[TreeNode]] = []
        node = matches[0]
        while node.parent is not None:
            levels.append(node.parent.children)
            node = node.parent
        self._menus.extend(reversed(levels))

        logger.info(
            "Rehydrated selection",
            extra={"requested": len(wanted), "matched": len(matches)},
        )
        return matches

    def clear_all(self) -> None:
        """Drop every selection and reset every node's state.

        The menu chain is left as it is.

        Raises:
            BulkClearDisabledError: If the configuration disables bulk clear.
        """
        if not self.clearable:
            raise BulkClearDisabledError("Bulk clear is disabled for this cascader")
        self._selected = {}
        for node in iter_nodes(self._forest):
            node.checked = False
            node.indeterminate = False
        logger.debug("Cleared all selections")

    def get_selected_ids(self) -> list[Any]:
        return list(self._selected)

    def get_selected_label_paths(self) -> list[str]:
        return [
            self.separator.join(str(label) for label in labels)
            for labels in self._selected.values()
        ]

    def snapshot(self) -> SelectionSnapshot:
        return SelectionSnapshot(
            mode=self.config.mode,
            selected_ids=self.get_selected_ids(),
            label_paths=self.get_selected_label_paths(),
            menu_depth=len(self._menus),
        )

    def _toggle_single(self, node: TreeNode, checked: bool) -> None:
        if not node.is_leaf:
            return
        if checked:
            self._selected = {node.id: list(node.path_labels)}
        else:
            self._selected.pop(node.id, None)

    def _store(self, node: TreeNode) -> None:
        if node.checked:
            self._selected[node.id] = list(node.path_labels)
        else:
            self._selected.pop(node.id, None)

    def _require_owned(self, node: TreeNode) -> None:
        root = node.root
        if not any(root is candidate for candidate in self._forest):
            raise UnknownNodeError(f"Option {node.id!r} does not belong to this cascader")


def _coerce_config(config: CascaderConfig | Mapping[str, Any] | None) -> CascaderConfig:
    if config is None:
        return CascaderConfig()
    if isinstance(config, CascaderConfig):
        return config
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Configuration must be a mapping or CascaderConfig, got {type(config).__name__}"
        )
    try:
        return CascaderConfig.model_validate(dict(config))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid cascader configuration: {exc}") from exc
