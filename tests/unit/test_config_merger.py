"""Unit tests for CLI merging and config-to-spec conversion."""

import pytest

from cabinet_scene.application.config import (
    CabinetSpecConfig,
    ConfigError,
    MaterialsConfig,
    SceneConfiguration,
    config_to_spec,
    merge_config_with_cli,
)
from cabinet_scene.domain import CabinetSpec


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli()."""

    @pytest.fixture
    def base_config(self) -> SceneConfiguration:
        return SceneConfiguration(
            schema_version="1.0",
            cabinet=CabinetSpecConfig(
                name="Sink Base",
                style="base",
                width_mm=610,
                height_mm=876,
                depth_mm=610,
                materials=MaterialsConfig(box="maple-3/4"),
            ),
        )

    def test_no_overrides(self, base_config: SceneConfiguration) -> None:
        merged = merge_config_with_cli(base_config)
        assert merged.model_dump() == base_config.model_dump()
        assert merged is not base_config

    def test_cli_value_wins(self, base_config: SceneConfiguration) -> None:
        merged = merge_config_with_cli(base_config, width_mm=762, style="wall")
        assert merged.cabinet.width_mm == 762
        assert merged.cabinet.style == "wall"
        assert merged.cabinet.height_mm == 876
        assert merged.cabinet.materials.box == "maple-3/4"

    def test_original_unchanged(self, base_config: SceneConfiguration) -> None:
        merge_config_with_cli(base_config, name="Other")
        assert base_config.cabinet.name == "Sink Base"

    def test_cli_only(self) -> None:
        merged = merge_config_with_cli(
            None, width_mm=610, height_mm=2134, depth_mm=610, style="tall", shelf_count=5
        )
        assert merged.cabinet.style == "tall"
        assert merged.cabinet.shelf_count == 5

    def test_cli_only_missing_dimension(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(None, width_mm=610, height_mm=876)
        assert exc_info.value.details[0]["path"] == "cabinet.depth_mm"

    def test_invalid_override(self, base_config: SceneConfiguration) -> None:
        with pytest.raises(ConfigError):
            merge_config_with_cli(base_config, drawer_count=0)


class TestConfigToSpec:
    """Tests for config_to_spec()."""

    def test_conversion(self) -> None:
        config = CabinetSpecConfig(
            name="Pantry",
            style=3,
            width_mm=610,
            height_mm=2134,
            depth_mm=610,
            shelf_count=5,
            materials=MaterialsConfig(shelf="mdf-3/4"),
        )
        spec = config_to_spec(config)
        assert spec == CabinetSpec(
            name="Pantry",
            width_mm=610,
            height_mm=2134,
            depth_mm=610,
            style_id=3,
            shelf_count=5,
            material_refs={"box": "plywood-3/4", "back": "plywood-1/4", "shelf": "mdf-3/4"},
        )

    def test_accepts_root_document(self) -> None:
        root = SceneConfiguration(
            cabinet=CabinetSpecConfig(width_mm=762, height_mm=762, depth_mm=305, style="wall")
        )
        spec = config_to_spec(root)
        assert spec.style_id == "wall"
        assert spec.toe_kick_height_mm is None
