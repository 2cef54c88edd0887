"""Scene graph construction from calculated cabinet parts."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ..measurement import quantize
from ..presentation import PresentationStyle
from ..scene import SceneNode
from ..spec import CabinetSpec, ResolvedCabinetSpec, resolve_spec
from ..value_objects import Dimensions3D, PartGeometry, PartType, Position3D
from .part_geometry import PartGeometryCalculator

logger = logging.getLogger(__name__)

ROOT_NODE_NAME = "cabinet-root"


class SceneGraphBuilder:
    """Builds a rooted scene graph for a cabinet.

    The root is named ``cabinet-root``, labelled with the cabinet name and
    sized to the overall envelope. It gets one child per part, in the order
    the style rule produced them, so output is stable across builds.

    Example:
        >>> root = SceneGraphBuilder().build(CabinetSpec("Pantry", 610, 2134, 610, "tall"))
        >>> root.name, root.label
        ('cabinet-root', 'Pantry')
    """

    def __init__(
        self,
        calculator: PartGeometryCalculator | None = None,
        part_style: PresentationStyle | None = None,
        root_style: PresentationStyle | None = None,
        part_type_styles: Mapping[PartType, PresentationStyle] | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            calculator: Part calculator to use.
            part_style: Style for part nodes (defaults to PresentationStyle()).
            root_style: Style for the root node (defaults to PresentationStyle()).
            part_type_styles: Optional per-part-type overrides of ``part_style``.
        """
        self.calculator = calculator or PartGeometryCalculator()
        self.part_style = part_style or PresentationStyle()
        self.root_style = root_style or PresentationStyle()
        self.part_type_styles = dict(part_type_styles or {})

    def build(self, spec: CabinetSpec | ResolvedCabinetSpec) -> SceneNode:
        """Resolve the spec, calculate its parts and assemble a fresh tree.

        Raises:
            ValidationError: If the spec cannot produce valid geometry. No
                node is created in that case.
        """
        resolved = spec if isinstance(spec, ResolvedCabinetSpec) else resolve_spec(spec)
        parts = self.calculator.calculate(resolved)
        return self.assemble(resolved.name, resolved.overall, parts)

    def assemble(
        self, label: str, overall: Dimensions3D, parts: Sequence[PartGeometry]
    ) -> SceneNode:
        """Wrap already calculated parts into a new tree."""
        children = [self.part_node(part) for part in parts]
        root = SceneNode(
            ROOT_NODE_NAME,
            label=label,
            size=Dimensions3D(
                quantize(overall.width), quantize(overall.height), quantize(overall.depth)
            ),
            style=self.root_style,
            children=children,
        )
        logger.debug("Assembled scene '%s' with %d part nodes", label, len(children))
        return root

    def part_node(self, part: PartGeometry) -> SceneNode:
        """Create a detached node for a single part."""
        pos = part.position
        dims = part.dimensions
        return SceneNode(
            part.name,
            position=Position3D(quantize(pos.x), quantize(pos.y), quantize(pos.z)),
            size=Dimensions3D(quantize(dims.width), quantize(dims.height), quantize(dims.depth)),
            style=self.part_type_styles.get(part.part_type, self.part_style),
        )
