"""Text formatters for scene trees and part lists."""

from __future__ import annotations

from cabinet_scene.domain import PartGeometry, SceneNode
from cabinet_scene.domain.measurement import Unit, format_fractional, inches_to_mm


class SceneTreeFormatter:
    """Formats a scene tree as an indented outline.

    Example output::

        Sink Base (cabinet-root)  24.016 x 34.488 x 24.016 in
          Left Side  at (0, 4.5, 0)  0.75 x 29.988 x 23.266 in
          ...
    """

    def __init__(self, units: Unit | str = Unit.INCHES, indent: str = "  ") -> None:
        units = Unit(units)
        if units not in (Unit.INCHES, Unit.MILLIMETERS):
            raise ValueError(f"Unsupported tree units: {units.value}")
        self.units = units
        self.indent = indent

    def format(self, root: SceneNode) -> str:
        lines: list[str] = []
        for node in root.walk():
            prefix = self.indent * node.depth
            if node.is_root:
                title = f"{node.label} ({node.name})"
                placement = ""
            else:
                title = node.name
                pos = node.position
                placement = f"  at ({self._len(pos.x)}, {self._len(pos.y)}, {self._len(pos.z)})"
            size = node.size
            lines.append(
                f"{prefix}{title}{placement}  "
                f"{self._len(size.width)} x {self._len(size.height)} x {self._len(size.depth)} "
                f"{self.units.value}"
            )
        return "\n".join(lines)

    def _len(self, inches: float) -> str:
        value = inches_to_mm(inches) if self.units is Unit.MILLIMETERS else inches
        return f"{value:.3f}".rstrip("0").rstrip(".")


class PartListFormatter:
    """Formats calculated parts as a fixed-width table in shop fractions."""

    def format(self, parts: list[PartGeometry]) -> str:
        header = f"{'Part':<16} {'Type':<14} {'Width':>10} {'Height':>10} {'Depth':>10}  Material"
        lines = [header, "-" * len(header)]
        for part in parts:
            dims = part.dimensions
            lines.append(
                f"{part.name:<16} {part.part_type.display_name:<14} "
                f"{format_fractional(dims.width):>10} "
                f"{format_fractional(dims.height):>10} "
                f"{format_fractional(dims.depth):>10}  {part.material}"
            )
        return "\n".join(lines)
