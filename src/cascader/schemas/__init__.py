"""Shared schemas for cascader."""

from cascader.schemas.options import CascaderConfig, FieldMapping, SelectionMode
from cascader.schemas.selection import SelectionSnapshot

__all__ = ["CascaderConfig", "FieldMapping", "SelectionMode", "SelectionSnapshot"]
