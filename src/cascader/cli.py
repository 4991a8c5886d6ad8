"""Command-line entry point for inspecting cascader selections."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Sequence

from cascader.controller import SelectionController
from cascader.exceptions import CascaderError, UnknownNodeError
from cascader.node import TreeNode
from cascader.output_formatter import format_selection
from cascader.schemas import SelectionMode
from cascader.traversal import iter_nodes
from cascader.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cascader",
        description="Load an option tree, apply selections, and print the result.",
    )
    parser.add_argument("options", help="Path to a JSON file holding a list of option records")
    parser.add_argument("--multiple", action="store_true", help="Use multi-select mode")
    parser.add_argument("--separator", help="Separator for selected label paths")
    parser.add_argument("--id-field", help="Record key holding node ids")
    parser.add_argument("--value-field", help="Record key holding node values")
    parser.add_argument("--label-field", help="Record key holding node labels")
    parser.add_argument("--children-field", help="Record key holding child records")
    parser.add_argument(
        "--preselect",
        action="append",
        default=[],
        metavar="ID",
        help="Id to rehydrate at start-up (repeatable)",
    )
    parser.add_argument("--select", action="append", default=[], metavar="ID", help="Id to check (repeatable)")
    parser.add_argument("--uncheck", action="append", default=[], metavar="ID", help="Id to uncheck (repeatable)")
    parser.add_argument("--expand", action="append", default=[], metavar="ID", help="Id to open in the menu (repeatable)")
    parser.add_argument("--clear", action="store_true", help="Clear preselected options before applying --select")
    parser.add_argument("--json", action="store_true", help="Print the selection snapshot as JSON")
    parser.add_argument("--log-level", help="Logging level (defaults to CASCADER_LOG_LEVEL)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        options = load_options(Path(args.options))
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        controller = _run(options, args)
    except CascaderError as exc:
        logger.debug("Cascader command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(controller.snapshot().model_dump_json(indent=2))
    else:
        print(format_selection(controller))
    return 0


def load_options(path: Path) -> list[dict[str, Any]]:
    """Read a JSON list of option records from ``path``."""
    if not path.is_file():
        raise FileNotFoundError(f"Options file not found: {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Options file must hold a JSON list, got {type(data).__name__}")
    return data


def _run(options: list[dict[str, Any]], args: argparse.Namespace) -> SelectionController:
    field_map = {
        key: value
        for key, value in (
            ("id", args.id_field),
            ("value", args.value_field),
            ("label", args.label_field),
            ("children", args.children_field),
        )
        if value is not None
    }
    config: dict[str, Any] = {
        "mode": SelectionMode.MULTIPLE if args.multiple else SelectionMode.SINGLE,
        "field_map": field_map,
        "clearable": args.clear,
    }
    if args.separator is not None:
        config["separator"] = args.separator

    controller = SelectionController(options, config)
    if args.preselect:
        controller.rehydrate(_resolve_ids(controller, args.preselect))
    if args.clear:
        controller.clear_all()

    for raw_id in args.select:
        node = _resolve(controller, raw_id)
        controller.activate(node, True)
    for raw_id in args.uncheck:
        controller.uncheck_by_id(_resolve(controller, raw_id).id)
    for raw_id in args.expand:
        controller.expand(_resolve(controller, raw_id))
    return controller


def _resolve(controller: SelectionController, raw_id: str) -> TreeNode:
    # Command-line ids are strings; node ids keep their JSON type.
    for node in iter_nodes(controller.forest):
        if str(node.id) == raw_id:
            return node
    raise UnknownNodeError(f"No option with id {raw_id!r}")


def _resolve_ids(controller: SelectionController, raw_ids: list[str]) -> list[Any]:
    resolved: list[Any] = []
    for raw_id in raw_ids:
        try:
            resolved.append(_resolve(controller, raw_id).id)
        except UnknownNodeError:
            logger.warning("Ignoring unknown preselected id", extra={"raw_id": raw_id})
    return resolved


if __name__ == "__main__":
    sys.exit(main())
