"""Part builders shared by the style rules.

All coordinates are inches from the cabinet's front-bottom-left corner:
x runs left to right, y bottom to top, z front to back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import (
    BACK_THICKNESS,
    DRAWER_GAP,
    MIN_DRAWER_FRONT_HEIGHT,
    MIN_DRAWER_GAP,
    NAILER_HEIGHT,
    PANEL_THICKNESS,
    RABBET_ALLOWANCE,
    SHELF_FRONT_SETBACK,
    SHELF_REAR_CLEARANCE,
    SHELF_SIDE_INSET,
)
from ..errors import ValidationError
from ..value_objects import Dimensions3D, PartGeometry, PartType, Position3D
from .registry import StyleRuleInput

logger = logging.getLogger(__name__)


def make_part(
    rule_input: StyleRuleInput,
    name: str,
    part_type: PartType,
    size: tuple[float, float, float],
    position: tuple[float, float, float],
) -> PartGeometry:
    """Build a part, taking its material from the rule input.

    Raises:
        ValueError: If any size component is negative.
    """
    return PartGeometry(
        name=name,
        part_type=part_type,
        dimensions=Dimensions3D(*size),
        position=Position3D(*position),
        material=rule_input.materials.for_part(part_type),
    )


@dataclass(frozen=True)
class Carcass:
    """Derived box measurements for one style.

    Attributes:
        rule_input: The rule's input.
        toe_kick: Whether the box sits on a toe kick.
        has_top: Whether the box is closed by a top panel.
        inset_back: Whether the back seats in a rabbet, shortening the sides.
    """

    rule_input: StyleRuleInput
    toe_kick: bool
    has_top: bool
    inset_back: bool = True

    @property
    def width(self) -> float:
        return self.rule_input.overall.width

    @property
    def height(self) -> float:
        return self.rule_input.overall.height

    @property
    def depth(self) -> float:
        return self.rule_input.overall.depth

    @property
    def base_y(self) -> float:
        return self.rule_input.toe_kick.height if self.toe_kick else 0.0

    @property
    def box_height(self) -> float:
        return self.height - self.base_y

    @property
    def interior_width(self) -> float:
        return self.width - 2 * PANEL_THICKNESS

    @property
    def panel_depth(self) -> float:
        """Depth of the top and bottom, stopping at the back."""
        return self.depth - BACK_THICKNESS

    @property
    def side_depth(self) -> float:
        return self.depth - RABBET_ALLOWANCE if self.inset_back else self.depth

    @property
    def interior_bottom(self) -> float:
        return self.base_y + PANEL_THICKNESS

    @property
    def interior_top(self) -> float:
        return self.height - PANEL_THICKNESS if self.has_top else self.height

    @property
    def interior_height(self) -> float:
        return self.interior_top - self.interior_bottom

    def sides(self) -> list[PartGeometry]:
        size = (PANEL_THICKNESS, self.box_height, self.side_depth)
        return [
            make_part(self.rule_input, "Left Side", PartType.SIDE_PANEL, size, (0.0, self.base_y, 0.0)),
            make_part(
                self.rule_input,
                "Right Side",
                PartType.SIDE_PANEL,
                size,
                (self.width - PANEL_THICKNESS, self.base_y, 0.0),
            ),
        ]

    def top(self) -> PartGeometry:
        return make_part(
            self.rule_input,
            "Top",
            PartType.TOP_PANEL,
            (self.interior_width, PANEL_THICKNESS, self.panel_depth),
            (PANEL_THICKNESS, self.height - PANEL_THICKNESS, 0.0),
        )

    def bottom(self) -> PartGeometry:
        return make_part(
            self.rule_input,
            "Bottom",
            PartType.BOTTOM_PANEL,
            (self.interior_width, PANEL_THICKNESS, self.panel_depth),
            (PANEL_THICKNESS, self.base_y, 0.0),
        )

    def back(self) -> PartGeometry:
        # Seated in the rabbet above the bottom, flush with the rear face
        return make_part(
            self.rule_input,
            "Back",
            PartType.BACK_PANEL,
            (self.interior_width, self.box_height - PANEL_THICKNESS, BACK_THICKNESS),
            (PANEL_THICKNESS, self.base_y + PANEL_THICKNESS, self.depth - BACK_THICKNESS),
        )

    def toe_kick_part(self) -> PartGeometry:
        kick = self.rule_input.toe_kick
        return make_part(
            self.rule_input,
            "Toe Kick",
            PartType.TOEKICK,
            (self.interior_width, kick.height, kick.depth),
            (PANEL_THICKNESS, 0.0, 0.0),
        )

    def top_nailer(self) -> PartGeometry:
        nailer_height = min(NAILER_HEIGHT, self.box_height - PANEL_THICKNESS)
        return make_part(
            self.rule_input,
            "Top Nailer",
            PartType.NAILER,
            (self.interior_width, nailer_height, PANEL_THICKNESS),
            (
                PANEL_THICKNESS,
                self.height - nailer_height,
                self.depth - BACK_THICKNESS - PANEL_THICKNESS,
            ),
        )

    def shelves(self, count: int, setback: float = SHELF_FRONT_SETBACK) -> list[PartGeometry]:
        """Shelves evenly spaced through the interior height.

        The interior is split into ``count + 1`` equal openings.

        Raises:
            ValidationError: If the shelves do not fit in the interior.
        """
        if count <= 0:
            return []

        opening = (self.interior_height - count * PANEL_THICKNESS) / (count + 1)
        if opening <= 0:
            raise ValidationError(
                f"{count} shelves do not fit in {self.interior_height:.3f}\" of interior height"
            )

        size = (
            self.interior_width - 2 * SHELF_SIDE_INSET,
            PANEL_THICKNESS,
            self.panel_depth - setback - SHELF_REAR_CLEARANCE,
        )
        x = PANEL_THICKNESS + SHELF_SIDE_INSET
        parts = []
        for index, name in enumerate(shelf_names(count)):
            y = self.interior_bottom + (index + 1) * opening + index * PANEL_THICKNESS
            parts.append(make_part(self.rule_input, name, PartType.SHELF, size, (x, y, setback)))
        return parts

    def drawer_fronts(self, count: int) -> list[PartGeometry]:
        """Drawer fronts stacked bottom to top over the box height.

        Each front owns one gap, split half below and half above it. When
        the fronts cannot keep their minimum height at the nominal gap, the
        gap shrinks, down to ``MIN_DRAWER_GAP``.

        Raises:
            ValidationError: If the fronts would have no height left.
        """
        available = self.box_height
        gap = DRAWER_GAP
        if count * (MIN_DRAWER_FRONT_HEIGHT + gap) > available:
            gap = max(MIN_DRAWER_GAP, (available - count * MIN_DRAWER_FRONT_HEIGHT) / count)
            logger.warning(
                "Compressed drawer gap to %.4f\" to fit %d fronts in %.3f\"",
                gap,
                count,
                available,
            )

        front_height = (available - count * gap) / count
        if front_height <= 0:
            raise ValidationError(
                f"{count} drawer fronts do not fit in {available:.3f}\" of box height"
            )

        parts = []
        for index in range(count):
            y = self.base_y + gap / 2 + index * (front_height + gap)
            parts.append(
                make_part(
                    self.rule_input,
                    f"Drawer Front {index + 1}",
                    PartType.DRAWER_FRONT,
                    (self.interior_width, front_height, PANEL_THICKNESS),
                    (PANEL_THICKNESS, y, 0.0),
                )
            )
        return parts


def shelf_names(count: int) -> list[str]:
    """Names for ``count`` shelves, bottom to top."""
    if count == 1:
        return ["Shelf"]
    if count == 2:
        return ["Lower Shelf", "Upper Shelf"]
    return [f"Shelf {i}" for i in range(1, count + 1)]
