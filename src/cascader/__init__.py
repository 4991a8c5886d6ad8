"""cascader: selection state for cascading option trees."""

from cascader.controller import SelectionController
from cascader.exceptions import (
    BulkClearDisabledError,
    CascaderError,
    ConfigurationError,
    UnknownNodeError,
)
from cascader.node import TreeNode
from cascader.schemas import CascaderConfig, FieldMapping, SelectionMode, SelectionSnapshot

__all__ = [
    "BulkClearDisabledError",
    "CascaderConfig",
    "CascaderError",
    "ConfigurationError",
    "FieldMapping",
    "SelectionController",
    "SelectionMode",
    "SelectionSnapshot",
    "TreeNode",
    "UnknownNodeError",
]
