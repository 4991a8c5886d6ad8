"""Selection output model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from cascader.schemas.options import SelectionMode


class SelectionSnapshot(BaseModel):
    """Read-only view of a controller's selection state."""

    mode: SelectionMode
    selected_ids: list[Any] = Field(default_factory=list)
    label_paths: list[str] = Field(default_factory=list)
    menu_depth: int = Field(default=1, ge=1)
