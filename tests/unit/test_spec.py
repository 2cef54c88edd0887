"""Unit tests for spec resolution and style parsing."""

import logging

import pytest

from cabinet_scene.domain import (
    CabinetSpec,
    CabinetStyle,
    SceneGraphBuilder,
    ValidationError,
    parse_style,
    resolve_spec,
)
from cabinet_scene.domain.value_objects import MaterialRefs


class TestParseStyle:
    """Tests for parse_style()."""

    @pytest.mark.parametrize(
        "style_id,expected",
        [
            (CabinetStyle.TALL, CabinetStyle.TALL),
            ("wall", CabinetStyle.WALL),
            ("WALL", CabinetStyle.WALL),
            ("Drawer-Base", CabinetStyle.DRAWER_BASE),
            ("Base Cabinet", CabinetStyle.BASE),
            (3, CabinetStyle.TALL),
            ("4", CabinetStyle.DRAWER_BASE),
        ],
    )
    def test_recognised(self, style_id: object, expected: CabinetStyle) -> None:
        assert parse_style(style_id) is expected

    @pytest.mark.parametrize("style_id", [None, "", "   ", "corner", 0, 99, True])
    def test_unrecognised(self, style_id: object) -> None:
        assert parse_style(style_id) is None


class TestResolveSpec:
    """Tests for resolve_spec()."""

    def test_converts_millimetres_to_inches(self, base_spec: CabinetSpec) -> None:
        resolved = resolve_spec(base_spec)
        assert resolved.overall.width == pytest.approx(24.015748)
        assert resolved.overall.height == pytest.approx(34.488189)
        assert resolved.overall.depth == pytest.approx(24.015748)

    def test_defaults(self, base_spec: CabinetSpec) -> None:
        """Omitted fields get the standard defaults."""
        resolved = resolve_spec(base_spec)
        assert resolved.style is CabinetStyle.BASE
        assert not resolved.style_defaulted
        assert resolved.toe_kick.height == 4.5
        assert resolved.toe_kick.depth == 3.0
        assert resolved.shelf_count == 1
        assert resolved.drawer_count == 3
        assert resolved.materials == MaterialRefs()

    def test_style_shelf_defaults(self, wall_spec: CabinetSpec, tall_spec: CabinetSpec) -> None:
        assert resolve_spec(wall_spec).shelf_count == 2
        assert resolve_spec(tall_spec).shelf_count == 4

    def test_box_height(self, base_spec: CabinetSpec, wall_spec: CabinetSpec) -> None:
        """Box height excludes the toe kick only for toe-kick styles."""
        assert resolve_spec(base_spec).box_height == pytest.approx(29.988189)
        assert resolve_spec(wall_spec).box_height == pytest.approx(30.0)

    def test_missing_style_defaults_to_base(self, caplog: pytest.LogCaptureFixture) -> None:
        spec = CabinetSpec("Mystery", 610, 876, 610)
        with caplog.at_level(logging.WARNING, logger="cabinet_scene.domain.spec"):
            resolved = resolve_spec(spec)
        assert resolved.style is CabinetStyle.BASE
        assert resolved.style_defaulted
        assert "No cabinet style given" in caplog.text

    def test_unknown_style_defaults_to_base(self, caplog: pytest.LogCaptureFixture) -> None:
        spec = CabinetSpec("Mystery", 610, 876, 610, style_id="corner")
        with caplog.at_level(logging.WARNING, logger="cabinet_scene.domain.spec"):
            resolved = resolve_spec(spec)
        assert resolved.style is CabinetStyle.BASE
        assert resolved.requested_style == "corner"
        assert "Unrecognised cabinet style 'corner'" in caplog.text

    def test_custom_toe_kick(self) -> None:
        spec = CabinetSpec(
            "Low Kick", 610, 876, 610, "base", toe_kick_height_mm=101.6, toe_kick_depth_mm=50.8
        )
        resolved = resolve_spec(spec)
        assert resolved.toe_kick.height == 4.0
        assert resolved.toe_kick.depth == 2.0

    def test_shelf_count_only_applies_to_tall(self) -> None:
        tall = resolve_spec(CabinetSpec("T", 610, 2134, 610, "tall", shelf_count=6))
        base = resolve_spec(CabinetSpec("B", 610, 876, 610, "base", shelf_count=6))
        assert tall.shelf_count == 6
        assert base.shelf_count == 1

    def test_blank_name_gets_default(self) -> None:
        assert resolve_spec(CabinetSpec("  ", 610, 876, 610, "base")).name == "Cabinet"

    def test_material_refs(self) -> None:
        spec = CabinetSpec(
            "M", 610, 876, 610, "base", material_refs={"box": "maple-3/4", "shelf": "mdf-3/4"}
        )
        materials = resolve_spec(spec).materials
        assert materials.box == "maple-3/4"
        assert materials.shelf == "mdf-3/4"
        assert materials.back == "plywood-1/4"

    def test_spec_is_not_modified(self, base_spec: CabinetSpec) -> None:
        before = CabinetSpec(**base_spec.__dict__)
        resolve_spec(base_spec)
        assert base_spec == before


class TestResolveSpecErrors:
    """Tests for resolve_spec() rejections."""

    @pytest.mark.parametrize(
        "width,height,depth",
        [(0, 876, 610), (610, -1, 610), (610, 876, 0)],
    )
    def test_non_positive_dimensions(self, width: float, height: float, depth: float) -> None:
        with pytest.raises(ValidationError, match="must be a positive finite length"):
            resolve_spec(CabinetSpec("Bad", width, height, depth, "base"))

    def test_all_dimension_errors_reported(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            resolve_spec(CabinetSpec("Bad", 0, 0, 0, "base"))
        assert len(exc_info.value.errors) == 3

    def test_toe_kick_taller_than_cabinet(self) -> None:
        spec = CabinetSpec("Short", 610, 100, 610, "base")
        with pytest.raises(ValidationError, match="Toe kick height"):
            resolve_spec(spec)

    def test_toe_kick_deeper_than_cabinet(self) -> None:
        spec = CabinetSpec("Shallow", 610, 876, 610, "base", toe_kick_depth_mm=610)
        with pytest.raises(ValidationError, match="Toe kick depth"):
            resolve_spec(spec)

    def test_default_toe_kick_not_checked_for_wall(self) -> None:
        """A shallow wall cabinet is fine even though the default kick is deeper."""
        resolved = resolve_spec(CabinetSpec("Shallow", 610, 100, 50, "wall"))
        assert resolved.box_height == pytest.approx(3.937008)

    def test_explicit_toe_kick_checked_for_wall(self) -> None:
        spec = CabinetSpec("Shallow", 610, 100, 50, "wall", toe_kick_depth_mm=60)
        with pytest.raises(ValidationError, match="Toe kick depth"):
            resolve_spec(spec)

    def test_non_positive_toe_kick(self) -> None:
        spec = CabinetSpec("Kick", 610, 876, 610, "base", toe_kick_height_mm=0)
        with pytest.raises(ValidationError, match="Toe kick height must be a positive finite length"):
            resolve_spec(spec)

    def test_negative_shelf_count(self) -> None:
        with pytest.raises(ValidationError, match="Shelf count"):
            resolve_spec(CabinetSpec("T", 610, 2134, 610, "tall", shelf_count=-1))

    def test_zero_drawers(self) -> None:
        with pytest.raises(ValidationError, match="Drawer count"):
            resolve_spec(CabinetSpec("D", 610, 876, 610, "drawer_base", drawer_count=0))

    def test_unknown_material_role(self) -> None:
        spec = CabinetSpec("M", 610, 876, 610, "base", material_refs={"door": "oak"})
        with pytest.raises(ValidationError, match="Unknown material role 'door'"):
            resolve_spec(spec)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_dimensions(self, value: float) -> None:
        with pytest.raises(ValidationError, match="Overall width must be a positive finite length"):
            resolve_spec(CabinetSpec("Bad", value, 876, 610, "base"))

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_non_finite_toe_kick(self, value: float) -> None:
        spec = CabinetSpec("Kick", 610, 876, 610, "base", toe_kick_depth_mm=value)
        with pytest.raises(ValidationError, match="Toe kick depth must be a positive finite length"):
            resolve_spec(spec)

    def test_non_finite_dimension_never_builds_a_scene(self) -> None:
        with pytest.raises(ValidationError):
            SceneGraphBuilder().build(CabinetSpec("Bad", float("nan"), 876, 610, "base"))


class TestCabinetSpec:
    """Tests for the CabinetSpec value object."""

    def test_material_refs_are_copied(self) -> None:
        refs = {"box": "maple-3/4"}
        spec = CabinetSpec("M", 610, 876, 610, "base", material_refs=refs)
        refs["box"] = "mdf-3/4"
        assert spec.material_refs["box"] == "maple-3/4"

    def test_material_refs_are_read_only(self) -> None:
        spec = CabinetSpec("M", 610, 876, 610, "base", material_refs={"box": "maple-3/4"})
        with pytest.raises(TypeError):
            spec.material_refs["box"] = "mdf-3/4"  # type: ignore[index]
