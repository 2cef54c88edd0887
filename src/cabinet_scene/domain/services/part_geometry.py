"""Part geometry calculation for a resolved cabinet spec."""

from __future__ import annotations

import logging

from ..constants import ENVELOPE_TOLERANCE
from ..errors import ValidationError
from ..rules import StyleRuleInput, StyleRuleRegistry, style_rules
from ..spec import CabinetSpec, ResolvedCabinetSpec, resolve_spec
from ..value_objects import CabinetStyle, Dimensions3D, PartGeometry

logger = logging.getLogger(__name__)


class PartGeometryCalculator:
    """Produces the ordered part list for a cabinet.

    Selects the style rule for the spec, runs it and checks every produced
    part against the cabinet envelope. Either the full part list is returned
    or a ValidationError is raised; partial results are never exposed.

    Example:
        >>> calculator = PartGeometryCalculator()
        >>> parts = calculator.calculate(CabinetSpec("Sink", 610, 876, 610, "base"))
        >>> [part.name for part in parts][:3]
        ['Left Side', 'Right Side', 'Bottom']
    """

    def __init__(self, registry: StyleRuleRegistry | None = None) -> None:
        """Initialize the calculator.

        Args:
            registry: Rule registry to use. Defaults to the shared registry
                holding the built-in styles.
        """
        self.registry = registry or style_rules

    def calculate(self, spec: CabinetSpec | ResolvedCabinetSpec) -> list[PartGeometry]:
        """Calculate the parts of a cabinet.

        Args:
            spec: A raw spec (resolved first) or an already resolved one.

        Returns:
            Parts in the order the style rule produced them.

        Raises:
            ValidationError: If the spec is invalid or any part would be
                degenerate or fall outside the envelope.
        """
        resolved = spec if isinstance(spec, ResolvedCabinetSpec) else resolve_spec(spec)

        style = resolved.style
        if style not in self.registry:
            logger.warning("No rule for style %s, using %s", style.name, CabinetStyle.BASE.name)
            style = CabinetStyle.BASE
        rule = self.registry.get(style)
        logger.debug("Applying %s rule to '%s'", style.name, resolved.name)

        try:
            parts = rule(StyleRuleInput.from_spec(resolved))
        except ValueError as exc:
            raise ValidationError(
                f"{style.display_name} '{resolved.name}' has degenerate geometry: {exc}"
            ) from exc

        errors = self.check_parts(parts, resolved.overall)
        if errors:
            raise ValidationError(errors)

        logger.debug("Generated %d parts for '%s'", len(parts), resolved.name)
        return parts

    @staticmethod
    def check_parts(parts: list[PartGeometry], overall: Dimensions3D) -> list[str]:
        """Check part post-conditions.

        Every part must have geometry, a non-negative position and must end
        inside the overall envelope. Back panels and nailers end exactly at
        the overall depth, which is still inside.

        Returns:
            Error messages, empty when every part is valid.
        """
        errors: list[str] = []
        tol = ENVELOPE_TOLERANCE
        for part in parts:
            if not part.position.is_non_negative:
                errors.append(f"Part '{part.name}' has a negative position")
            if not part.dimensions.has_geometry:
                errors.append(f"Part '{part.name}' has no geometry")
            if (
                part.max_x > overall.width + tol
                or part.max_y > overall.height + tol
                or part.max_z > overall.depth + tol
            ):
                errors.append(f"Part '{part.name}' extends outside the cabinet envelope")
        return errors
