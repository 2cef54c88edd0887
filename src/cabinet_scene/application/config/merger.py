"""Merging of command line values over configuration file values.

Precedence is CLI value > config value > default. Only values the user
actually passed (not None) override the file.
"""

from typing import Any

from cabinet_scene.application.config.loader import load_config_from_dict
from cabinet_scene.application.config.schema import SceneConfiguration


def merge_config_with_cli(
    config: SceneConfiguration | None,
    *,
    name: str | None = None,
    style: str | None = None,
    width_mm: float | None = None,
    height_mm: float | None = None,
    depth_mm: float | None = None,
    toe_kick_height_mm: float | None = None,
    toe_kick_depth_mm: float | None = None,
    shelf_count: int | None = None,
    drawer_count: int | None = None,
) -> SceneConfiguration:
    """Apply CLI overrides to a configuration.

    Args:
        config: Configuration loaded from file, or None when the cabinet is
            described entirely on the command line.

    Returns:
        A new, re-validated configuration.

    Raises:
        ConfigError: If the merged values do not form a valid configuration
            (for example a required dimension given nowhere).

    Example:
        >>> merged = merge_config_with_cli(config, width_mm=762)
        >>> merged.cabinet.width_mm
        762.0
    """
    data: dict[str, Any] = config.model_dump() if config is not None else {"cabinet": {}}
    overrides = {
        "name": name,
        "style": style,
        "width_mm": width_mm,
        "height_mm": height_mm,
        "depth_mm": depth_mm,
        "toe_kick_height_mm": toe_kick_height_mm,
        "toe_kick_depth_mm": toe_kick_depth_mm,
        "shelf_count": shelf_count,
        "drawer_count": drawer_count,
    }
    data["cabinet"].update({key: value for key, value in overrides.items() if value is not None})
    return load_config_from_dict(data)
