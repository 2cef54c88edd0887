"""Infrastructure layer - scene exporters and text formatters."""

from .exporters import (
    ExporterRegistry,
    JsonSceneExporter,
    SceneExporter,
    TreeSceneExporter,
)
from .formatters import PartListFormatter, SceneTreeFormatter

__all__ = [
    "ExporterRegistry",
    "JsonSceneExporter",
    "PartListFormatter",
    "SceneExporter",
    "SceneTreeFormatter",
    "TreeSceneExporter",
]
