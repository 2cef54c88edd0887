"""Pydantic schema for cabinet scene configuration files.

A configuration file describes one cabinet in the units the surrounding
system stores (millimetres):

    {
        "schema_version": "1.0",
        "cabinet": {
            "name": "Sink Base",
            "style": "base",
            "width_mm": 610,
            "height_mm": 876,
            "depth_mm": 610,
            "materials": {"box": "plywood-3/4", "back": "plywood-1/4"}
        }
    }

Field names also accept the camelCase spelling used by the record store
(``widthMm``, ``styleId``, ``toeKickHeightMm``, ``materialRefs`` ...).
"""

from __future__ import annotations

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from cabinet_scene.domain.value_objects import DEFAULT_BACK_MATERIAL, DEFAULT_BOX_MATERIAL

# Version 1.0: Single cabinet with style, envelope, toe kick, counts, materials
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


def _aliases(*names: str) -> AliasChoices:
    return AliasChoices(*names)


class MaterialsConfig(BaseModel):
    """Material reference per part role.

    Attributes:
        box: Carcass material (sides, top, bottom, nailer).
        back: Back panel material.
        shelf: Shelf material, defaults to the box material.
        toe_kick: Toe kick material, defaults to the box material.
        drawer_front: Drawer front material, defaults to the box material.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    box: str = Field(default=DEFAULT_BOX_MATERIAL, min_length=1)
    back: str = Field(default=DEFAULT_BACK_MATERIAL, min_length=1)
    shelf: str | None = None
    toe_kick: str | None = Field(default=None, validation_alias=_aliases("toe_kick", "toeKick"))
    drawer_front: str | None = Field(
        default=None, validation_alias=_aliases("drawer_front", "drawerFront")
    )

    def to_refs(self) -> dict[str, str]:
        """Non-empty references keyed by role."""
        return {role: ref for role, ref in self.model_dump().items() if ref}


class CabinetSpecConfig(BaseModel):
    """A single cabinet specification.

    Attributes:
        name: Display name of the cabinet.
        style: Construction style ("base", "wall", "tall", "drawer_base"),
            display name, or legacy numeric id. Unknown or missing styles
            build a base cabinet.
        width_mm: Overall width in millimetres.
        height_mm: Overall height in millimetres.
        depth_mm: Overall depth in millimetres.
        toe_kick_height_mm: Toe kick height (default 114.3).
        toe_kick_depth_mm: Toe kick depth (default 76.2).
        shelf_count: Shelves for tall cabinets (default 4).
        drawer_count: Drawer fronts for drawer bases (default 3).
        materials: Material references.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, allow_inf_nan=False)

    name: str = Field(default="Cabinet", min_length=1)
    style: str | int | None = Field(
        default=None, validation_alias=_aliases("style", "style_id", "styleId")
    )
    width_mm: float = Field(gt=0, validation_alias=_aliases("width_mm", "widthMm"))
    height_mm: float = Field(gt=0, validation_alias=_aliases("height_mm", "heightMm"))
    depth_mm: float = Field(gt=0, validation_alias=_aliases("depth_mm", "depthMm"))
    toe_kick_height_mm: float | None = Field(
        default=None,
        gt=0,
        validation_alias=_aliases("toe_kick_height_mm", "toeKickHeightMm"),
    )
    toe_kick_depth_mm: float | None = Field(
        default=None,
        gt=0,
        validation_alias=_aliases("toe_kick_depth_mm", "toeKickDepthMm"),
    )
    shelf_count: int | None = Field(
        default=None, ge=0, le=50, validation_alias=_aliases("shelf_count", "shelfCount")
    )
    drawer_count: int | None = Field(
        default=None, ge=1, le=12, validation_alias=_aliases("drawer_count", "drawerCount")
    )
    materials: MaterialsConfig = Field(
        default_factory=MaterialsConfig,
        validation_alias=_aliases("materials", "material_refs", "materialRefs"),
    )


class SceneConfiguration(BaseModel):
    """Root of a configuration file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    cabinet: CabinetSpecConfig

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Reject schema versions this release cannot read."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(f"Unsupported schema version '{v}' (supported: {supported})")
        return v
