"""Registry mapping construction styles to their part rules."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from ..value_objects import (
    CabinetStyle,
    Dimensions3D,
    MaterialRefs,
    PartGeometry,
    ToeKick,
)

if TYPE_CHECKING:
    from ..spec import ResolvedCabinetSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleRuleInput:
    """Everything a style rule may look at.

    Attributes:
        overall: Overall cabinet envelope in inches.
        toe_kick: Toe kick dimensions in inches (ignored by WALL).
        shelf_count: Number of shelves to place.
        drawer_count: Number of drawer fronts (DRAWER_BASE only).
        materials: Material references per part role.
    """

    overall: Dimensions3D
    toe_kick: ToeKick
    shelf_count: int
    drawer_count: int
    materials: MaterialRefs

    @classmethod
    def from_spec(cls, spec: ResolvedCabinetSpec) -> StyleRuleInput:
        return cls(
            overall=spec.overall,
            toe_kick=spec.toe_kick,
            shelf_count=spec.shelf_count,
            drawer_count=spec.drawer_count,
            materials=spec.materials,
        )


StyleRule = Callable[[StyleRuleInput], list[PartGeometry]]


class StyleRuleRegistry:
    """Lookup table of one pure rule function per cabinet style.

    Rules register themselves with a decorator:

    Example:
        @style_rules.register(CabinetStyle.WALL)
        def wall_rule(rule_input: StyleRuleInput) -> list[PartGeometry]:
            ...

        parts = style_rules.get(CabinetStyle.WALL)(rule_input)

    Rules hold no state, so a single registry is shared by every build.
    """

    def __init__(self) -> None:
        self._rules: dict[CabinetStyle, StyleRule] = {}

    def register(self, style: CabinetStyle) -> Callable[[StyleRule], StyleRule]:
        """Decorator registering ``rule`` as the rule for ``style``.

        Raises:
            ValueError: If the style already has a rule.
        """

        def decorator(rule: StyleRule) -> StyleRule:
            if style in self._rules:
                raise ValueError(f"Style '{style.name}' already has a rule")
            self._rules[style] = rule
            logger.debug("Registered style rule %s for %s", rule.__name__, style.name)
            return rule

        return decorator

    def get(self, style: CabinetStyle) -> StyleRule:
        """Return the rule for a style.

        Raises:
            KeyError: If no rule is registered for the style.
        """
        if style not in self._rules:
            raise KeyError(f"No rule registered for style '{style.name}'")
        return self._rules[style]

    def styles(self) -> list[CabinetStyle]:
        """Registered styles, in enum declaration order."""
        return [style for style in CabinetStyle if style in self._rules]

    def missing_styles(self) -> list[CabinetStyle]:
        """Styles declared on the enum that have no rule."""
        return [style for style in CabinetStyle if style not in self._rules]

    def __contains__(self, style: object) -> bool:
        return style in self._rules


# Shared registry populated by cabinet_scene.domain.rules.styles
style_rules = StyleRuleRegistry()
