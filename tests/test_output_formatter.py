"""Tests for plain-text selection output."""

from __future__ import annotations

from cascader.controller import SelectionController
from cascader.output_formatter import format_selection, node_marker


def test_multi_select_listing_marks_state(small_tree: list[dict]) -> None:
    controller = SelectionController(small_tree, {"mode": "multiple"})
    a1 = controller.find_node("a1")
    controller.expand(controller.find_node("A"))
    controller.expand(a1)
    controller.toggle(controller.find_node("x1"), True)

    output = format_selection(controller)

    assert output == (
        "Level 1:\n"
        "    [-] Alpha >\n"
        "Level 2:\n"
        "    [-] Alpha One >\n"
        "    [ ] Alpha Two >\n"
        "Level 3:\n"
        "    [x] X One\n"
        "    [ ] X Two\n"
        "\n"
        "Selected options:\n"
        "    x1: Alpha / Alpha One / X One\n"
        "\n"
        "Mode: multiple\n"
        "Selected: 1"
    )


def test_single_select_listing_has_no_markers(small_tree: list[dict]) -> None:
    controller = SelectionController(small_tree)

    output = format_selection(controller)

    assert output.startswith("Level 1:\n    Alpha >\n\nSelected options:\n    (none)")
    assert output.endswith("Mode: single\nSelected: 0")


def test_node_marker(small_tree: list[dict]) -> None:
    controller = SelectionController(small_tree, {"mode": "multiple"})
    node = controller.find_node("y1")

    assert node_marker(node, multiple=False) == ""
    assert node_marker(node, multiple=True) == "[ ] "
    controller.toggle(node, True)
    assert node_marker(node, multiple=True) == "[x] "
    assert node_marker(controller.find_node("A"), multiple=True) == "[-] "
