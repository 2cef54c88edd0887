"""CLI subcommands for the cabinet-scene application."""

from cabinet_scene.cli.commands.validate import display_config_error, validate_command

__all__ = ["display_config_error", "validate_command"]
