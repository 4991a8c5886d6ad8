"""Configuration models for a cascader controller."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cascader.config import (
    CASCADER_CHILDREN_FIELD,
    CASCADER_ID_FIELD,
    CASCADER_LABEL_FIELD,
    CASCADER_SEPARATOR,
    CASCADER_VALUE_FIELD,
)


class SelectionMode(str, Enum):
    """Enumeration for selection modes."""

    SINGLE = "single"
    MULTIPLE = "multiple"


class FieldMapping(BaseModel):
    """Names of the keys read from each raw option record.

    Attributes
    ----------
    id : str
        Key holding the node identifier, unique across the whole tree.
    value : str
        Key holding the node value collected into ``TreeNode.path``.
    label : str
        Key holding the display label collected into ``TreeNode.path_labels``.
    children : str
        Key holding the list of child records.

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(default=CASCADER_ID_FIELD, description="Identifier key")
    value: str = Field(default=CASCADER_VALUE_FIELD, description="Value key")
    label: str = Field(default=CASCADER_LABEL_FIELD, description="Label key")
    children: str = Field(default=CASCADER_CHILDREN_FIELD, description="Children key")

    @field_validator("id", "value", "label", "children")
    @classmethod
    def validate_field_name(cls, v: str) -> str:
        """Validate that a field name is not empty."""
        if not v.strip():
            err = "field names cannot be empty"
            raise ValueError(err)
        return v.strip()


class CascaderConfig(BaseModel):
    """Configuration for a ``SelectionController``.

    Read once at construction and fixed thereafter.

    Attributes
    ----------
    mode : SelectionMode
        Single or multiple selection.
    field_map : FieldMapping
        Keys used to read raw option records.
    separator : str
        Joins ``path_labels`` in ``get_selected_label_paths``.
    clearable : bool
        Whether ``clear_all`` is allowed.
    preselected_ids : list | None
        Ids to rehydrate at construction.
    strict_ancestors : bool
        Recompute each ancestor's ``checked`` from its own children. When
        False the triggering flag is copied to every ancestor unchanged.

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: SelectionMode = Field(default=SelectionMode.SINGLE, description="Selection mode")
    field_map: FieldMapping = Field(default_factory=FieldMapping, description="Record keys")
    separator: str = Field(default=CASCADER_SEPARATOR, description="Label path separator")
    clearable: bool = Field(default=False, description="Allow clearing every selection")
    preselected_ids: list[Any] | None = Field(default=None, description="Ids to rehydrate")
    strict_ancestors: bool = Field(default=True, description="Recompute ancestors from children")

    @model_validator(mode="before")
    @classmethod
    def normalize_multiple_flag(cls, data: Any) -> Any:
        """Accept a boolean ``multiple`` key in place of ``mode``."""
        if not isinstance(data, dict) or "multiple" not in data:
            return data
        data = dict(data)
        multiple = data.pop("multiple")
        if not isinstance(multiple, bool):
            err = "multiple must be a boolean"
            raise ValueError(err)
        if "mode" in data:
            err = "pass either mode or multiple, not both"
            raise ValueError(err)
        data["mode"] = SelectionMode.MULTIPLE if multiple else SelectionMode.SINGLE
        return data

    @field_validator("preselected_ids", mode="before")
    @classmethod
    def normalize_preselected_ids(cls, v: Any) -> list[Any] | None:
        """Normalize preselected ids from tuples, sets, or a single id."""
        if v is None:
            return None
        if isinstance(v, (list, tuple, set, frozenset)):
            return list(v)
        return [v]

    @property
    def multiple(self) -> bool:
        return self.mode is SelectionMode.MULTIPLE
