"""Conversion of validated configuration into domain specs."""

from cabinet_scene.application.config.schema import CabinetSpecConfig, SceneConfiguration
from cabinet_scene.domain.spec import CabinetSpec


def config_to_spec(config: SceneConfiguration | CabinetSpecConfig) -> CabinetSpec:
    """Build the domain ``CabinetSpec`` for a configuration.

    Optional values the file leaves out stay None so that the domain applies
    its own defaults.
    """
    cabinet = config.cabinet if isinstance(config, SceneConfiguration) else config
    return CabinetSpec(
        name=cabinet.name,
        width_mm=cabinet.width_mm,
        height_mm=cabinet.height_mm,
        depth_mm=cabinet.depth_mm,
        style_id=cabinet.style,
        toe_kick_height_mm=cabinet.toe_kick_height_mm,
        toe_kick_depth_mm=cabinet.toe_kick_depth_mm,
        shelf_count=cabinet.shelf_count,
        drawer_count=cabinet.drawer_count,
        material_refs=cabinet.materials.to_refs(),
    )
