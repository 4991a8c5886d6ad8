"""Local configuration for cascader."""

from __future__ import annotations

import os


DEFAULT_ID_FIELD = "id"
DEFAULT_VALUE_FIELD = "id"
DEFAULT_LABEL_FIELD = "label"
DEFAULT_CHILDREN_FIELD = "children"
DEFAULT_SEPARATOR = " / "
DEFAULT_LOG_LEVEL = "WARNING"

# Field names used to read raw option records when no mapping is supplied.
CASCADER_ID_FIELD = os.getenv("CASCADER_ID_FIELD", DEFAULT_ID_FIELD)
CASCADER_VALUE_FIELD = os.getenv("CASCADER_VALUE_FIELD", DEFAULT_VALUE_FIELD)
CASCADER_LABEL_FIELD = os.getenv("CASCADER_LABEL_FIELD", DEFAULT_LABEL_FIELD)
CASCADER_CHILDREN_FIELD = os.getenv("CASCADER_CHILDREN_FIELD", DEFAULT_CHILDREN_FIELD)
CASCADER_SEPARATOR = os.getenv("CASCADER_SEPARATOR", DEFAULT_SEPARATOR)
CASCADER_LOG_LEVEL = os.getenv("CASCADER_LOG_LEVEL", DEFAULT_LOG_LEVEL)
