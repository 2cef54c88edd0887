"""Configuration files: schema, loading, CLI merging and conversion."""

from cabinet_scene.application.config.adapter import config_to_spec
from cabinet_scene.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cabinet_scene.application.config.merger import merge_config_with_cli
from cabinet_scene.application.config.schema import (
    SUPPORTED_VERSIONS,
    CabinetSpecConfig,
    MaterialsConfig,
    SceneConfiguration,
)

__all__ = [
    "CabinetSpecConfig",
    "ConfigError",
    "MaterialsConfig",
    "SUPPORTED_VERSIONS",
    "SceneConfiguration",
    "config_to_spec",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
