"""Test setup for cascader."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def small_tree() -> list[dict]:
    """Tree ``A{a1{x1, x2}, a2{y1}}``."""
    return [
        {
            "id": "A",
            "label": "Alpha",
            "children": [
                {
                    "id": "a1",
                    "label": "Alpha One",
                    "children": [
                        {"id": "x1", "label": "X One"},
                        {"id": "x2", "label": "X Two"},
                    ],
                },
                {
                    "id": "a2",
                    "label": "Alpha Two",
                    "children": [{"id": "y1", "label": "Y One"}],
                },
            ],
        }
    ]


@pytest.fixture
def region_tree() -> list[dict]:
    """Three-level tree with numeric ids and a second root."""
    return [
        {
            "id": 1,
            "name": "Asia",
            "code": "AS",
            "items": [
                {
                    "id": 11,
                    "name": "China",
                    "code": "CN",
                    "items": [
                        {"id": 111, "name": "Beijing", "code": "BJ"},
                        {"id": 112, "name": "Shanghai", "code": "SH"},
                        {"id": 113, "name": "Shenzhen", "code": "SZ"},
                    ],
                },
                {
                    "id": 12,
                    "name": "Japan",
                    "code": "JP",
                    "items": [
                        {"id": 121, "name": "Tokyo", "code": "TYO"},
                        {"id": 122, "name": "Osaka", "code": "OSA"},
                    ],
                },
            ],
        },
        {
            "id": 2,
            "name": "Europe",
            "code": "EU",
            "items": [
                {"id": 21, "name": "France", "code": "FR"},
                {"id": 22, "name": "Italy", "code": "IT", "items": None},
            ],
        },
    ]


@pytest.fixture
def region_fields() -> dict:
    """Field mapping for ``region_tree``."""
    return {"id": "id", "value": "code", "label": "name", "children": "items"}
