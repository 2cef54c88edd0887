"""Data transfer objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cabinet_scene.domain import PartGeometry, ResolvedCabinetSpec, SceneNode


@dataclass
class SceneBuildOutput:
    """Result of building a cabinet scene.

    Either ``root`` holds a complete tree or ``errors`` explains why none
    was built; a partial tree is never returned.

    Attributes:
        root: Root of the scene graph, None when the build failed.
        parts: Calculated parts in scene order.
        spec: The resolved spec the scene was built from.
        errors: Validation errors.
        warnings: Non-fatal issues, such as a style that fell back to base.
    """

    root: SceneNode | None
    parts: list[PartGeometry] = field(default_factory=list)
    spec: ResolvedCabinetSpec | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the scene was built successfully."""
        return self.root is not None and not self.errors
