"""Pytest configuration and shared fixtures for cabinet scene tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cabinet_scene.domain import CabinetSpec, SceneGraphBuilder, SceneNode


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests that drive the CLI end to end")


# =============================================================================
# Reference cabinets
# =============================================================================


@pytest.fixture
def base_spec() -> CabinetSpec:
    """24" x 34.5" x 24" base cabinet."""
    return CabinetSpec("Sink Base", width_mm=610, height_mm=876, depth_mm=610, style_id="base")


@pytest.fixture
def wall_spec() -> CabinetSpec:
    """30" x 30" x 12" wall cabinet."""
    return CabinetSpec("Upper", width_mm=762, height_mm=762, depth_mm=305, style_id="wall")


@pytest.fixture
def tall_spec() -> CabinetSpec:
    """24" x 84" x 24" pantry."""
    return CabinetSpec("Pantry", width_mm=610, height_mm=2134, depth_mm=610, style_id="tall")


@pytest.fixture
def drawer_spec() -> CabinetSpec:
    """24" x 34.5" x 24" drawer base."""
    return CabinetSpec(
        "Drawers", width_mm=610, height_mm=876, depth_mm=610, style_id="drawer_base"
    )


@pytest.fixture
def base_scene(base_spec: CabinetSpec) -> SceneNode:
    """Scene root for the base cabinet.

    Parent links are weak, so tests hold on to the root while they inspect
    its children.
    """
    return SceneGraphBuilder().build(base_spec)


# =============================================================================
# Configuration files
# =============================================================================


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a configuration document to a temporary JSON file."""

    def _write(data: dict, name: str = "cabinet.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def base_config_data() -> dict:
    """Minimal valid configuration for a base cabinet."""
    return {
        "schema_version": "1.0",
        "cabinet": {
            "name": "Sink Base",
            "style": "base",
            "width_mm": 610,
            "height_mm": 876,
            "depth_mm": 610,
        },
    }
