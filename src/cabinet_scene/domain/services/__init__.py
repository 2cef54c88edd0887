"""Domain services: part calculation and scene assembly."""

from .part_geometry import PartGeometryCalculator
from .scene_builder import ROOT_NODE_NAME, SceneGraphBuilder

__all__ = [
    "PartGeometryCalculator",
    "ROOT_NODE_NAME",
    "SceneGraphBuilder",
]
