"""Typer CLI for cabinet scene generation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cabinet_scene.application import BuildSceneCommand, SceneBuildOutput
from cabinet_scene.application.config import (
    ConfigError,
    config_to_spec,
    load_config,
    merge_config_with_cli,
)
from cabinet_scene.cli.commands import display_config_error, validate_command
from cabinet_scene.domain import PresentationStyle, SceneGraphBuilder
from cabinet_scene.domain.rules import style_rules
from cabinet_scene.domain.spec import LEGACY_STYLE_IDS, CabinetSpec
from cabinet_scene.infrastructure import ExporterRegistry, PartListFormatter

app = typer.Typer(
    name="cabinet-scene",
    help="Build 3D scene graphs of cabinets from their specifications.",
)

app.command(name="validate")(validate_command)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
NameOption = Annotated[str | None, typer.Option("--name", "-n", help="Cabinet name")]
StyleOption = Annotated[
    str | None,
    typer.Option("--style", "-s", help="Cabinet style: base, wall, tall, drawer_base"),
]
WidthOption = Annotated[
    float | None, typer.Option("--width-mm", "-w", help="Overall width in millimetres")
]
HeightOption = Annotated[
    float | None, typer.Option("--height-mm", help="Overall height in millimetres")
]
DepthOption = Annotated[
    float | None, typer.Option("--depth-mm", "-d", help="Overall depth in millimetres")
]
ToeKickHeightOption = Annotated[
    float | None,
    typer.Option("--toe-kick-height-mm", help="Toe kick height in millimetres"),
]
ToeKickDepthOption = Annotated[
    float | None,
    typer.Option("--toe-kick-depth-mm", help="Toe kick depth in millimetres"),
]
ShelvesOption = Annotated[
    int | None, typer.Option("--shelves", help="Shelf count (tall cabinets)")
]
DrawersOption = Annotated[
    int | None, typer.Option("--drawers", help="Drawer count (drawer bases)")
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log rule selection and part counts"),
    ] = False,
) -> None:
    """Build 3D scene graphs of cabinets from their specifications."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_spec(
    config_file: Path | None,
    *,
    name: str | None,
    style: str | None,
    width_mm: float | None,
    height_mm: float | None,
    depth_mm: float | None,
    toe_kick_height_mm: float | None,
    toe_kick_depth_mm: float | None,
    shelves: int | None,
    drawers: int | None,
) -> CabinetSpec:
    """Load the config file (if any), apply CLI overrides and build the spec.

    Exits with code 1 when the configuration cannot be loaded or validated.
    """
    try:
        config = load_config(config_file) if config_file is not None else None
        merged = merge_config_with_cli(
            config,
            name=name,
            style=style,
            width_mm=width_mm,
            height_mm=height_mm,
            depth_mm=depth_mm,
            toe_kick_height_mm=toe_kick_height_mm,
            toe_kick_depth_mm=toe_kick_depth_mm,
            shelf_count=shelves,
            drawer_count=drawers,
        )
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)
    return config_to_spec(merged)


def _exit_on_errors(result: SceneBuildOutput) -> None:
    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)


@app.command()
def build(
    config_file: ConfigOption = None,
    name: NameOption = None,
    style: StyleOption = None,
    width_mm: WidthOption = None,
    height_mm: HeightOption = None,
    depth_mm: DepthOption = None,
    toe_kick_height_mm: ToeKickHeightOption = None,
    toe_kick_depth_mm: ToeKickDepthOption = None,
    shelves: ShelvesOption = None,
    drawers: DrawersOption = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: tree, json"),
    ] = "tree",
    units: Annotated[
        str,
        typer.Option("--units", "-u", help="Output units: in, mm"),
    ] = "in",
    presentation: Annotated[
        str,
        typer.Option(
            "--presentation",
            "-p",
            help="Part presentation: default, outline, wood, blueprint",
        ),
    ] = "default",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the scene to this file"),
    ] = None,
) -> None:
    """Build the scene graph of a cabinet.

    Values given on the command line override those in the config file.

    Example:
        cabinet-scene build --style tall -w 610 --height-mm 2134 -d 610 -f json
    """
    spec = _load_spec(
        config_file,
        name=name,
        style=style,
        width_mm=width_mm,
        height_mm=height_mm,
        depth_mm=depth_mm,
        toe_kick_height_mm=toe_kick_height_mm,
        toe_kick_depth_mm=toe_kick_depth_mm,
        shelves=shelves,
        drawers=drawers,
    )

    try:
        part_style = PresentationStyle.named(presentation)
    except KeyError:
        typer.echo(f"Error: Unknown presentation '{presentation}'", err=True)
        raise typer.Exit(code=1)

    try:
        exporter = ExporterRegistry.get(output_format)(units=units)
    except KeyError:
        available = ", ".join(ExporterRegistry.available_formats())
        typer.echo(
            f"Error: Unknown format '{output_format}'. Available formats: {available}",
            err=True,
        )
        raise typer.Exit(code=1)
    except ValueError:
        typer.echo(f"Error: Unsupported units '{units}'. Use 'in' or 'mm'", err=True)
        raise typer.Exit(code=1)

    command = BuildSceneCommand(builder=SceneGraphBuilder(part_style=part_style))
    result = command.execute(spec)
    _exit_on_errors(result)

    if output_file is not None:
        exporter.export(result.root, output_file)
        typer.echo(f"Scene written to {output_file}")
    else:
        typer.echo(exporter.export_string(result.root))


@app.command()
def parts(
    config_file: ConfigOption = None,
    name: NameOption = None,
    style: StyleOption = None,
    width_mm: WidthOption = None,
    height_mm: HeightOption = None,
    depth_mm: DepthOption = None,
    toe_kick_height_mm: ToeKickHeightOption = None,
    toe_kick_depth_mm: ToeKickDepthOption = None,
    shelves: ShelvesOption = None,
    drawers: DrawersOption = None,
) -> None:
    """List the calculated parts of a cabinet with shop dimensions."""
    spec = _load_spec(
        config_file,
        name=name,
        style=style,
        width_mm=width_mm,
        height_mm=height_mm,
        depth_mm=depth_mm,
        toe_kick_height_mm=toe_kick_height_mm,
        toe_kick_depth_mm=toe_kick_depth_mm,
        shelves=shelves,
        drawers=drawers,
    )
    result = BuildSceneCommand().execute(spec)
    _exit_on_errors(result)

    typer.echo(f"{result.spec.name} ({result.spec.style.display_name})")
    typer.echo(PartListFormatter().format(result.parts))


@app.command()
def styles() -> None:
    """List the supported cabinet styles."""
    legacy_ids = {style: style_id for style_id, style in LEGACY_STYLE_IDS.items()}
    for style in style_rules.styles():
        typer.echo(f"{style.value:<12} {style.display_name:<14} (id {legacy_ids[style]})")


if __name__ == "__main__":
    app()
