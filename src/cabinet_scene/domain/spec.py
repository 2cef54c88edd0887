"""Cabinet specifications and the boundary that accepts them.

``CabinetSpec`` is what callers hand in: millimetre lengths as stored by the
surrounding system, with most fields optional. ``resolve_spec`` is the one
place where a spec is validated, converted to inches and has every optional
field replaced by its default. Everything downstream works on the resulting
``ResolvedCabinetSpec`` and never re-checks for missing values.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .constants import (
    DEFAULT_BASE_SHELVES,
    DEFAULT_DRAWER_COUNT,
    DEFAULT_TALL_SHELVES,
    DEFAULT_TOE_KICK_DEPTH,
    DEFAULT_TOE_KICK_HEIGHT,
    DEFAULT_WALL_SHELVES,
)
from .errors import ValidationError
from .measurement import mm_to_inches
from .value_objects import CabinetStyle, Dimensions3D, MaterialRefs, ToeKick

logger = logging.getLogger(__name__)

DEFAULT_CABINET_NAME = "Cabinet"

# Cabinet type ids from the original lookup table seed data
LEGACY_STYLE_IDS: dict[int, CabinetStyle] = {
    1: CabinetStyle.BASE,
    2: CabinetStyle.WALL,
    3: CabinetStyle.TALL,
    4: CabinetStyle.DRAWER_BASE,
}

DEFAULT_SHELF_COUNTS: dict[CabinetStyle, int] = {
    CabinetStyle.BASE: DEFAULT_BASE_SHELVES,
    CabinetStyle.WALL: DEFAULT_WALL_SHELVES,
    CabinetStyle.TALL: DEFAULT_TALL_SHELVES,
    CabinetStyle.DRAWER_BASE: DEFAULT_BASE_SHELVES,
}


@dataclass(frozen=True)
class CabinetSpec:
    """A cabinet as described by the caller, lengths in millimetres.

    Attributes:
        name: Display name, used as the scene root label.
        width_mm: Overall width.
        height_mm: Overall height, floor to top.
        depth_mm: Overall depth, front face to rear of the back.
        style_id: Construction style identifier. Accepts a CabinetStyle, its
            value or name in any case, its display name, or a legacy numeric
            cabinet type id. Missing or unknown values build a BASE cabinet.
        toe_kick_height_mm: Toe kick height (default 114.3, i.e. 4.5").
        toe_kick_depth_mm: Toe kick recess depth (default 76.2, i.e. 3").
        shelf_count: Number of shelves for TALL cabinets (default 4).
        drawer_count: Number of drawer fronts for DRAWER_BASE (default 3).
        material_refs: Material reference per part role ("box", "back",
            "shelf", "toe_kick", "drawer_front").
    """

    name: str
    width_mm: float
    height_mm: float
    depth_mm: float
    style_id: CabinetStyle | str | int | None = None
    toe_kick_height_mm: float | None = None
    toe_kick_depth_mm: float | None = None
    shelf_count: int | None = None
    drawer_count: int | None = None
    material_refs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copy so the caller's dict cannot change a frozen spec
        object.__setattr__(self, "material_refs", MappingProxyType(dict(self.material_refs)))


@dataclass(frozen=True)
class ResolvedCabinetSpec:
    """A validated spec in inches with every default applied.

    Attributes:
        name: Display name.
        style: Construction style actually used.
        style_defaulted: True when the caller's style identifier was missing
            or unrecognised and BASE was used instead.
        overall: Overall envelope in inches.
        toe_kick: Toe kick dimensions in inches. Always populated; styles
            without a toe kick ignore it.
        shelf_count: Number of shelves the style rule will place.
        drawer_count: Number of drawer fronts (DRAWER_BASE only).
        materials: Material references per part role.
        requested_style: The raw identifier the caller supplied.
    """

    name: str
    style: CabinetStyle
    style_defaulted: bool
    overall: Dimensions3D
    toe_kick: ToeKick
    shelf_count: int
    drawer_count: int
    materials: MaterialRefs
    requested_style: CabinetStyle | str | int | None = None

    @property
    def has_toe_kick(self) -> bool:
        return self.style.has_toe_kick

    @property
    def base_height(self) -> float:
        """Height at which the carcass box starts."""
        return self.toe_kick.height if self.has_toe_kick else 0.0

    @property
    def box_height(self) -> float:
        """Carcass height above the toe kick."""
        return self.overall.height - self.base_height


def parse_style(style_id: CabinetStyle | str | int | None) -> CabinetStyle | None:
    """Map a style identifier to a CabinetStyle.

    Returns:
        The matching style, or None when the identifier is missing or not
        recognised.
    """
    if style_id is None:
        return None
    if isinstance(style_id, CabinetStyle):
        return style_id
    if isinstance(style_id, bool):
        return None
    if isinstance(style_id, int):
        return LEGACY_STYLE_IDS.get(style_id)

    text = str(style_id).strip()
    if not text:
        return None
    if text.isdigit():
        return LEGACY_STYLE_IDS.get(int(text))

    key = text.lower().replace("-", "_").replace(" ", "_")
    for style in CabinetStyle:
        if key in (style.value, style.display_name.lower().replace(" ", "_")):
            return style
    return None


def _is_positive_length(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def _resolve_materials(refs: Mapping[str, str]) -> MaterialRefs:
    known = {"box", "back", "shelf", "toe_kick", "drawer_front"}
    unknown = sorted(set(refs) - known)
    if unknown:
        raise ValidationError(
            [f"Unknown material role '{role}' (expected one of {sorted(known)})" for role in unknown]
        )
    values = {role: ref for role, ref in refs.items() if ref}
    return MaterialRefs(**values)


def resolve_spec(spec: CabinetSpec) -> ResolvedCabinetSpec:
    """Validate a spec and normalise it to inches with defaults applied.

    Args:
        spec: The caller's specification. Never modified.

    Returns:
        The resolved specification.

    Raises:
        ValidationError: If any overall dimension is not a positive finite
            length, a toe kick dimension is not a positive finite length or
            reaches the overall dimension it recesses into, or a count is
            out of range.
    """
    errors: list[str] = []

    for label, value in (
        ("width", spec.width_mm),
        ("height", spec.height_mm),
        ("depth", spec.depth_mm),
    ):
        if not _is_positive_length(value):
            errors.append(f"Overall {label} must be a positive finite length (got {value})")
    if errors:
        raise ValidationError(errors)

    style = parse_style(spec.style_id)
    style_defaulted = style is None
    if style is None:
        if spec.style_id is None:
            logger.warning("No cabinet style given, building as %s", CabinetStyle.BASE.name)
        else:
            logger.warning(
                "Unrecognised cabinet style %r, building as %s",
                spec.style_id,
                CabinetStyle.BASE.name,
            )
        style = CabinetStyle.BASE

    width = mm_to_inches(spec.width_mm)
    height = mm_to_inches(spec.height_mm)
    depth = mm_to_inches(spec.depth_mm)

    toe_kick_height = DEFAULT_TOE_KICK_HEIGHT
    toe_kick_depth = DEFAULT_TOE_KICK_DEPTH
    check_toe_kick = style.has_toe_kick
    if spec.toe_kick_height_mm is not None:
        check_toe_kick = True
        if not _is_positive_length(spec.toe_kick_height_mm):
            errors.append(
                f"Toe kick height must be a positive finite length (got {spec.toe_kick_height_mm})"
            )
        else:
            toe_kick_height = mm_to_inches(spec.toe_kick_height_mm)
    if spec.toe_kick_depth_mm is not None:
        check_toe_kick = True
        if not _is_positive_length(spec.toe_kick_depth_mm):
            errors.append(
                f"Toe kick depth must be a positive finite length (got {spec.toe_kick_depth_mm})"
            )
        else:
            toe_kick_depth = mm_to_inches(spec.toe_kick_depth_mm)

    if check_toe_kick:
        if toe_kick_height >= height:
            errors.append(
                f"Toe kick height ({toe_kick_height:.3f}\") must be less than "
                f"overall height ({height:.3f}\")"
            )
        if toe_kick_depth >= depth:
            errors.append(
                f"Toe kick depth ({toe_kick_depth:.3f}\") must be less than "
                f"overall depth ({depth:.3f}\")"
            )

    shelf_count = DEFAULT_SHELF_COUNTS[style]
    if spec.shelf_count is not None:
        if spec.shelf_count < 0:
            errors.append(f"Shelf count cannot be negative (got {spec.shelf_count})")
        elif style is CabinetStyle.TALL:
            shelf_count = spec.shelf_count
        else:
            logger.debug("Ignoring shelf_count for %s cabinet", style.name)

    drawer_count = DEFAULT_DRAWER_COUNT
    if spec.drawer_count is not None:
        if spec.drawer_count < 1:
            errors.append(f"Drawer count must be at least 1 (got {spec.drawer_count})")
        else:
            drawer_count = spec.drawer_count

    try:
        materials = _resolve_materials(spec.material_refs)
    except ValidationError as exc:
        errors.extend(exc.errors)
        materials = MaterialRefs()

    if errors:
        raise ValidationError(errors)

    return ResolvedCabinetSpec(
        name=spec.name.strip() if spec.name and spec.name.strip() else DEFAULT_CABINET_NAME,
        style=style,
        style_defaulted=style_defaulted,
        overall=Dimensions3D(width, height, depth),
        toe_kick=ToeKick(toe_kick_height, toe_kick_depth),
        shelf_count=shelf_count,
        drawer_count=drawer_count,
        materials=materials,
        requested_style=spec.style_id,
    )
