"""Format a cascader's menu chain and selection as plain text."""

from __future__ import annotations

from cascader.controller import SelectionController
from cascader.node import TreeNode


def format_selection(controller: SelectionController) -> str:
    """Create the menu listing followed by the selected label paths."""
    blocks = [_render_menus(controller), _render_selected(controller)]
    summary = (
        f"Mode: {controller.config.mode.value}\n"
        f"Selected: {len(controller.get_selected_ids())}"
    )
    blocks.append(summary)
    return "\n\n".join(blocks)


def node_marker(node: TreeNode, *, multiple: bool) -> str:
    """Checkbox marker for ``node``: ``[x]``, ``[-]`` or ``[ ]``."""
    if not multiple:
        return ""
    if node.checked:
        return "[x] "
    if node.indeterminate:
        return "[-] "
    return "[ ] "


def _render_menus(controller: SelectionController) -> str:
    lines: list[str] = []
    for level, menu in enumerate(controller.menus, start=1):
        lines.append(f"Level {level}:")
        for node in menu:
            suffix = " >" if node.has_children else ""
            marker = node_marker(node, multiple=controller.multiple)
            lines.append(f"    {marker}{node.label}{suffix}")
    return "\n".join(lines)


def _render_selected(controller: SelectionController) -> str:
    paths = controller.get_selected_label_paths()
    if not paths:
        return "Selected options:\n    (none)"
    lines = ["Selected options:"]
    for node_id, path in zip(controller.get_selected_ids(), paths):
        lines.append(f"    {node_id}: {path}")
    return "\n".join(lines)
