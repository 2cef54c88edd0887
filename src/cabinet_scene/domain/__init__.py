"""Domain layer - cabinet geometry and scene graph."""

from .errors import SceneGraphError, ValidationError
from .presentation import Color, PresentationStyle
from .scene import SceneNode
from .services import ROOT_NODE_NAME, PartGeometryCalculator, SceneGraphBuilder
from .spec import CabinetSpec, ResolvedCabinetSpec, parse_style, resolve_spec
from .value_objects import (
    Box3D,
    CabinetStyle,
    Dimensions3D,
    MaterialRefs,
    PartGeometry,
    PartType,
    Position3D,
    ToeKick,
    Vector3D,
)

__all__ = [
    "Box3D",
    "CabinetSpec",
    "CabinetStyle",
    "Color",
    "Dimensions3D",
    "MaterialRefs",
    "PartGeometry",
    "PartGeometryCalculator",
    "PartType",
    "Position3D",
    "PresentationStyle",
    "ROOT_NODE_NAME",
    "ResolvedCabinetSpec",
    "SceneGraphBuilder",
    "SceneGraphError",
    "SceneNode",
    "ToeKick",
    "ValidationError",
    "Vector3D",
    "parse_style",
    "resolve_spec",
]
