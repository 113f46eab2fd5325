"""Pytest configuration and shared fixtures for block layout tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from blocklayout.domain import BlockType, PlacedBlock, Vector3


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests that exercise the CLI or HTTP layers end to end"
    )


# =============================================================================
# Shared fixtures
# =============================================================================

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "layouts"


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding sample layout files."""
    return FIXTURES_PATH


@pytest.fixture
def standard_block() -> PlacedBlock:
    """A standard 8" core block at the origin, rotation 0.

    Its footprint is 48" along X and 13.5" along Z.
    """
    return PlacedBlock(
        id="A",
        block_type=BlockType.STANDARD,
        core_thickness=8,
        position=Vector3(0, 0, 0),
        rotation=0,
    )


@pytest.fixture
def layout_data() -> dict[str, Any]:
    """A minimal layout with one standard block at the origin."""
    return {
        "schema_version": "1.0",
        "blocks": [
            {
                "id": "A",
                "type": "standard",
                "core_thickness": 8,
                "position": {"x": 0, "y": 0, "z": 0},
                "rotation": 0,
            }
        ],
    }


@pytest.fixture
def layout_file(tmp_path: Path, layout_data: dict[str, Any]) -> Path:
    """The minimal layout written to a temporary file."""
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(layout_data), encoding="utf-8")
    return path
