"""Application commands (use cases) for cabinet scenes."""

from __future__ import annotations

import logging

from cabinet_scene.domain import (
    CabinetSpec,
    PartGeometryCalculator,
    SceneGraphBuilder,
    ValidationError,
    resolve_spec,
)

from .dtos import SceneBuildOutput

logger = logging.getLogger(__name__)


class BuildSceneCommand:
    """Command to build the scene graph for one cabinet.

    Domain validation failures are reported through the output's ``errors``
    rather than raised, so the CLI can print every problem at once.
    """

    def __init__(
        self,
        calculator: PartGeometryCalculator | None = None,
        builder: SceneGraphBuilder | None = None,
    ) -> None:
        self.calculator = calculator or PartGeometryCalculator()
        self.builder = builder or SceneGraphBuilder(calculator=self.calculator)

    def execute(self, spec: CabinetSpec) -> SceneBuildOutput:
        """Resolve the spec, calculate its parts and assemble the scene.

        Args:
            spec: Cabinet specification in millimetres.

        Returns:
            SceneBuildOutput with the scene, or with errors and no scene.
        """
        try:
            resolved = resolve_spec(spec)
        except ValidationError as exc:
            logger.info("Spec '%s' rejected: %s", spec.name, exc)
            return SceneBuildOutput(root=None, errors=list(exc.errors))

        warnings: list[str] = []
        if resolved.style_defaulted:
            if resolved.requested_style is None:
                warnings.append("No cabinet style given; built as Base Cabinet")
            else:
                warnings.append(
                    f"Unrecognised cabinet style {resolved.requested_style!r}; "
                    "built as Base Cabinet"
                )

        try:
            parts = self.calculator.calculate(resolved)
        except ValidationError as exc:
            logger.info("Geometry for '%s' rejected: %s", resolved.name, exc)
            return SceneBuildOutput(
                root=None, spec=resolved, errors=list(exc.errors), warnings=warnings
            )

        root = self.builder.assemble(resolved.name, resolved.overall, parts)
        return SceneBuildOutput(root=root, parts=parts, spec=resolved, warnings=warnings)
