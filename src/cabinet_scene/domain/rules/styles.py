"""Construction rules, one pure function per cabinet style.

Each rule lists the parts of its style in a fixed order: carcass sides,
top and bottom, back, base structure, then interior parts. That order is
carried through to the scene graph unchanged.
"""

from __future__ import annotations

from ..constants import DRAWER_BASE_SHELF_SETBACK
from ..value_objects import CabinetStyle, PartGeometry
from ._carcass import Carcass
from .registry import StyleRuleInput, style_rules


@style_rules.register(CabinetStyle.BASE)
def base_cabinet(rule_input: StyleRuleInput) -> list[PartGeometry]:
    """Floor-standing box on a toe kick, open top with a rear nailer.

    Standard proportions are 34.5" high on a 4.5" kick, a 30" box.
    """
    carcass = Carcass(rule_input, toe_kick=True, has_top=False)
    return [
        *carcass.sides(),
        carcass.bottom(),
        carcass.back(),
        carcass.toe_kick_part(),
        carcass.top_nailer(),
        *carcass.shelves(rule_input.shelf_count),
    ]


@style_rules.register(CabinetStyle.WALL)
def wall_cabinet(rule_input: StyleRuleInput) -> list[PartGeometry]:
    """Wall-mounted closed box, no toe kick (typically 30" x 12" deep)."""
    carcass = Carcass(rule_input, toe_kick=False, has_top=True)
    return [
        *carcass.sides(),
        carcass.top(),
        carcass.bottom(),
        carcass.back(),
        *carcass.shelves(rule_input.shelf_count),
    ]


@style_rules.register(CabinetStyle.TALL)
def tall_cabinet(rule_input: StyleRuleInput) -> list[PartGeometry]:
    """Full-height pantry or utility cabinet on a toe kick."""
    carcass = Carcass(rule_input, toe_kick=True, has_top=True)
    return [
        *carcass.sides(),
        carcass.top(),
        carcass.bottom(),
        carcass.back(),
        carcass.toe_kick_part(),
        *carcass.shelves(rule_input.shelf_count),
    ]


@style_rules.register(CabinetStyle.DRAWER_BASE)
def drawer_base_cabinet(rule_input: StyleRuleInput) -> list[PartGeometry]:
    """Base carcass behind a stack of drawer fronts.

    The shelf sits further back than in a plain base so it clears the
    fronts.
    """
    carcass = Carcass(rule_input, toe_kick=True, has_top=False)
    return [
        *carcass.sides(),
        carcass.bottom(),
        carcass.back(),
        carcass.toe_kick_part(),
        *carcass.shelves(rule_input.shelf_count, setback=DRAWER_BASE_SHELF_SETBACK),
        *carcass.drawer_fronts(rule_input.drawer_count),
    ]
