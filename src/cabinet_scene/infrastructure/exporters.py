"""Scene exporters with a format registry.

Exporters turn a built scene tree into data for downstream renderers. They
never paint anything themselves.
"""

from __future__ import annotations

import json
import logging
from abc import abstractmethod
from pathlib import Path
from typing import Any, ClassVar, Protocol, runtime_checkable

from cabinet_scene.domain import SceneNode
from cabinet_scene.domain.measurement import Unit, inches_to_mm, quantize

from .formatters import SceneTreeFormatter

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


@runtime_checkable
class SceneExporter(Protocol):
    """Protocol for scene exporters.

    Attributes:
        format_name: Registry key (e.g. "json").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export_string(self, root: SceneNode) -> str:
        """Render the scene rooted at ``root`` as text."""
        ...

    def export(self, root: SceneNode, path: Path) -> None:
        """Write the rendered scene to ``path``."""
        ...


class ExporterRegistry:
    """Registry of exporter classes keyed by format name.

    Example:
        @ExporterRegistry.register("json")
        class JsonSceneExporter:
            ...
    """

    _exporters: ClassVar[dict[str, type[SceneExporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator registering an exporter class under ``format_name``."""

        def decorator(exporter_class: type[SceneExporter]) -> type[SceneExporter]:
            if format_name in cls._exporters:
                logger.warning(f"Overwriting existing exporter for format '{format_name}'")
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[SceneExporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters)) or "none"
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


def _length(value: float, units: Unit) -> float:
    return inches_to_mm(value) if units is Unit.MILLIMETERS else quantize(value)


@ExporterRegistry.register("json")
class JsonSceneExporter:
    """Exports a scene tree as nested JSON.

    Every node carries its local position and size, its derived world
    position and its presentation style. The document also records the
    units used and the total bounds of the tree:

        {"schema_version": "1.0", "units": "in",
         "bounds": {"min": {...}, "max": {...}, "size": {...}},
         "scene": {"name": "cabinet-root", "label": "...", "children": [...]}}
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, units: Unit | str = Unit.INCHES, indent: int = 2) -> None:
        """Initialize the exporter.

        Args:
            units: Output units, inches or millimetres.
            indent: JSON indentation.

        Raises:
            ValueError: If ``units`` is not inches or millimetres.
        """
        units = Unit(units)
        if units not in (Unit.INCHES, Unit.MILLIMETERS):
            raise ValueError(f"Unsupported export units: {units.value}")
        self.units = units
        self.indent = indent

    def export(self, root: SceneNode, path: Path) -> None:
        path.write_text(self.export_string(root), encoding="utf-8")
        logger.info("Exported scene '%s' to %s", root.label, path)

    def export_string(self, root: SceneNode) -> str:
        return json.dumps(self.to_dict(root), indent=self.indent)

    def to_dict(self, root: SceneNode) -> dict[str, Any]:
        """Build the export document for a tree."""
        bounds = root.total_bounds()
        return {
            "schema_version": SCHEMA_VERSION,
            "units": self.units.value,
            "bounds": {
                "min": self._xyz(*bounds.min.as_tuple()),
                "max": self._xyz(*bounds.max.as_tuple()),
                "size": self._whd(bounds.width, bounds.height, bounds.depth),
            },
            "scene": self.node_to_dict(root),
        }

    def node_to_dict(self, node: SceneNode) -> dict[str, Any]:
        pos = node.position
        size = node.size
        world = node.world_position()
        return {
            "name": node.name,
            "label": node.label,
            "position": self._xyz(pos.x, pos.y, pos.z),
            "size": self._whd(size.width, size.height, size.depth),
            "world_position": self._xyz(world.x, world.y, world.z),
            "style": node.style.to_dict(),
            "children": [self.node_to_dict(child) for child in node.children],
        }

    def _xyz(self, x: float, y: float, z: float) -> dict[str, float]:
        return {
            "x": _length(x, self.units),
            "y": _length(y, self.units),
            "z": _length(z, self.units),
        }

    def _whd(self, width: float, height: float, depth: float) -> dict[str, float]:
        return {
            "width": _length(width, self.units),
            "height": _length(height, self.units),
            "depth": _length(depth, self.units),
        }


@ExporterRegistry.register("tree")
class TreeSceneExporter:
    """Exports a scene as an indented text outline."""

    format_name: ClassVar[str] = "tree"
    file_extension: ClassVar[str] = "txt"

    def __init__(self, units: Unit | str = Unit.INCHES) -> None:
        self.formatter = SceneTreeFormatter(units=units)

    def export(self, root: SceneNode, path: Path) -> None:
        path.write_text(self.export_string(root) + "\n", encoding="utf-8")
        logger.info("Exported scene '%s' to %s", root.label, path)

    def export_string(self, root: SceneNode) -> str:
        return self.formatter.format(root)
