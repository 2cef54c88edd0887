"""Unit tests for PartGeometryCalculator."""

import logging

import pytest

from cabinet_scene.domain import (
    CabinetSpec,
    CabinetStyle,
    Dimensions3D,
    PartGeometry,
    PartGeometryCalculator,
    PartType,
    Position3D,
    ValidationError,
    resolve_spec,
)
from cabinet_scene.domain.rules import StyleRuleInput, StyleRuleRegistry, base_cabinet


def _part(name: str, position: tuple, size: tuple) -> PartGeometry:
    return PartGeometry(
        name=name,
        part_type=PartType.SHELF,
        dimensions=Dimensions3D(*size),
        position=Position3D(*position),
        material="plywood-3/4",
    )


class TestCalculate:
    """Tests for PartGeometryCalculator.calculate()."""

    @pytest.mark.parametrize("style", list(CabinetStyle))
    def test_every_style_stays_in_envelope(self, style: CabinetStyle) -> None:
        spec = CabinetSpec("Any", 610, 876 if style is not CabinetStyle.TALL else 2134, 610, style)
        resolved = resolve_spec(spec)
        parts = PartGeometryCalculator().calculate(resolved)
        assert parts
        assert PartGeometryCalculator.check_parts(parts, resolved.overall) == []

    def test_accepts_raw_spec(self, base_spec: CabinetSpec) -> None:
        parts = PartGeometryCalculator().calculate(base_spec)
        assert parts[0].name == "Left Side"

    def test_invalid_spec_raises(self) -> None:
        with pytest.raises(ValidationError):
            PartGeometryCalculator().calculate(CabinetSpec("Bad", 0, 876, 610, "base"))

    def test_unregistered_style_falls_back_to_base(
        self, wall_spec: CabinetSpec, caplog: pytest.LogCaptureFixture
    ) -> None:
        registry = StyleRuleRegistry()
        registry.register(CabinetStyle.BASE)(base_cabinet)
        calculator = PartGeometryCalculator(registry=registry)
        with caplog.at_level(logging.WARNING):
            parts = calculator.calculate(wall_spec)
        assert any(part.part_type is PartType.NAILER for part in parts)
        assert "No rule for style WALL" in caplog.text

    def test_rule_outside_envelope_rejected(self, base_spec: CabinetSpec) -> None:
        registry = StyleRuleRegistry()

        @registry.register(CabinetStyle.BASE)
        def oversized(rule_input: StyleRuleInput) -> list[PartGeometry]:
            width = rule_input.overall.width
            return [_part("Too Wide", (0, 0, 0), (width + 1, 1, 1))]

        with pytest.raises(ValidationError, match="outside the cabinet envelope"):
            PartGeometryCalculator(registry=registry).calculate(base_spec)

    def test_degenerate_rule_geometry_rejected(self) -> None:
        """A negative dimension inside a rule surfaces as a ValidationError."""
        spec = CabinetSpec("Slim", 30, 876, 610, "base")
        with pytest.raises(ValidationError, match="degenerate geometry"):
            PartGeometryCalculator().calculate(spec)


class TestCheckParts:
    """Tests for PartGeometryCalculator.check_parts()."""

    def test_valid_part(self) -> None:
        overall = Dimensions3D(10, 10, 10)
        assert PartGeometryCalculator.check_parts([_part("Ok", (1, 1, 1), (9, 9, 9))], overall) == []

    def test_negative_position(self) -> None:
        errors = PartGeometryCalculator.check_parts(
            [_part("Neg", (-1, 0, 0), (1, 1, 1))], Dimensions3D(10, 10, 10)
        )
        assert errors == ["Part 'Neg' has a negative position"]

    def test_no_geometry(self) -> None:
        errors = PartGeometryCalculator.check_parts(
            [_part("Flat", (0, 0, 0), (0, 0, 0))], Dimensions3D(10, 10, 10)
        )
        assert errors == ["Part 'Flat' has no geometry"]

    def test_part_ending_exactly_at_envelope_is_inside(self) -> None:
        errors = PartGeometryCalculator.check_parts(
            [_part("Back", (0, 0, 9.75), (10, 10, 0.25))], Dimensions3D(10, 10, 10)
        )
        assert errors == []
