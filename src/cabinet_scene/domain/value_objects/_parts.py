"""Construction styles, part types and produced part geometry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._geometry import Box3D, Dimensions3D, Position3D


class CabinetStyle(str, Enum):
    """Construction categories.

    The style decides which parts exist and where they sit:
    - BASE: floor-standing with toe kick and top nailer
    - WALL: wall-mounted, no toe kick
    - TALL: full-height pantry/utility with toe kick
    - DRAWER_BASE: base carcass fronted by a stack of drawers
    """

    BASE = "base"
    WALL = "wall"
    TALL = "tall"
    DRAWER_BASE = "drawer_base"

    @property
    def display_name(self) -> str:
        return _STYLE_DISPLAY_NAMES[self]

    @property
    def has_toe_kick(self) -> bool:
        return self is not CabinetStyle.WALL


_STYLE_DISPLAY_NAMES: dict[CabinetStyle, str] = {
    CabinetStyle.BASE: "Base Cabinet",
    CabinetStyle.WALL: "Wall Cabinet",
    CabinetStyle.TALL: "Tall Cabinet",
    CabinetStyle.DRAWER_BASE: "Drawer Base",
}


class PartType(str, Enum):
    """Role of a part in the carcass."""

    SIDE_PANEL = "side_panel"
    TOP_PANEL = "top_panel"
    BOTTOM_PANEL = "bottom_panel"
    BACK_PANEL = "back_panel"
    SHELF = "shelf"
    TOEKICK = "toe_kick"
    NAILER = "nailer"
    DRAWER_FRONT = "drawer_front"

    @property
    def display_name(self) -> str:
        if self is PartType.NAILER:
            return "Nailer Strip"
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class ToeKick:
    """Recessed base dimensions in inches."""

    height: float
    depth: float

    def __post_init__(self) -> None:
        if self.height <= 0 or self.depth <= 0:
            raise ValueError("Toe kick height and depth must be positive")


DEFAULT_BOX_MATERIAL = "plywood-3/4"
DEFAULT_BACK_MATERIAL = "plywood-1/4"


@dataclass(frozen=True)
class MaterialRefs:
    """Material references per part role.

    Only ``box`` and ``back`` are always set; the other roles fall back to
    the box material when left empty.
    """

    box: str = DEFAULT_BOX_MATERIAL
    back: str = DEFAULT_BACK_MATERIAL
    shelf: str | None = None
    toe_kick: str | None = None
    drawer_front: str | None = None

    def for_part(self, part_type: PartType) -> str:
        """Resolve the material reference for a part type."""
        if part_type is PartType.BACK_PANEL:
            return self.back
        if part_type is PartType.SHELF:
            return self.shelf or self.box
        if part_type is PartType.TOEKICK:
            return self.toe_kick or self.box
        if part_type is PartType.DRAWER_FRONT:
            return self.drawer_front or self.box
        return self.box


@dataclass(frozen=True)
class PartGeometry:
    """A fully dimensioned part produced by a style rule.

    Attributes:
        name: Human-readable part name ("Left Side", "Shelf 2", ...).
        part_type: Role of the part in the carcass.
        dimensions: Width/height/depth in inches.
        position: Offset of the part's minimum corner from the cabinet origin
            (front-bottom-left), in inches.
        material: Material reference for the part.
    """

    name: str
    part_type: PartType
    dimensions: Dimensions3D
    position: Position3D
    material: str

    @property
    def max_x(self) -> float:
        return self.position.x + self.dimensions.width

    @property
    def max_y(self) -> float:
        return self.position.y + self.dimensions.height

    @property
    def max_z(self) -> float:
        return self.position.z + self.dimensions.depth

    @property
    def box(self) -> Box3D:
        """Local bounding box of the part."""
        return Box3D.from_placement(self.position, self.dimensions)

    def format(self) -> str:
        d = self.dimensions
        return (
            f"{self.name} ({self.part_type.display_name}): "
            f"{d.width:.3f} x {d.height:.3f} x {d.depth:.3f} [{self.material}]"
        )
