"""Value objects for the cabinet scene domain.

Immutable geometry and part types shared by the style rules, the geometry
calculator and the scene graph. All classes are re-exported from
sub-modules for convenience.
"""

from __future__ import annotations

# Vectors, boxes and dimensions
from ._geometry import (
    Box3D,
    Dimensions3D,
    Position3D,
    Vector3D,
)

# Styles, part roles and produced parts
from ._parts import (
    DEFAULT_BACK_MATERIAL,
    DEFAULT_BOX_MATERIAL,
    CabinetStyle,
    MaterialRefs,
    PartGeometry,
    PartType,
    ToeKick,
)

__all__ = [
    "Box3D",
    "CabinetStyle",
    "DEFAULT_BACK_MATERIAL",
    "DEFAULT_BOX_MATERIAL",
    "Dimensions3D",
    "MaterialRefs",
    "PartGeometry",
    "PartType",
    "Position3D",
    "ToeKick",
    "Vector3D",
]
