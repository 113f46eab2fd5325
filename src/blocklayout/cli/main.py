"""Typer CLI for block layout snapping."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from blocklayout.application import (
    PlaceBlockCommand,
    PlacementInput,
    PlacementOutput,
    SnapPlacementCommand,
)
from blocklayout.application.config import (
    ConfigError,
    LayoutConfiguration,
    append_block,
    block_to_config,
    config_to_blocks,
    config_to_snapper,
    load_config,
    save_config,
)
from blocklayout.cli.commands import validate_command
from blocklayout.domain.services import rotate_clockwise
from blocklayout.domain.value_objects import BlockType, RIGHT_ANGLE_ROTATIONS
from blocklayout.infrastructure import (
    BoundsReportFormatter,
    CatalogFormatter,
    JsonExporter,
    SnapResultFormatter,
)

app = typer.Typer(
    name="blocklayout",
    help="Place ICF wall blocks with edge-to-edge snapping.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Place ICF wall blocks with edge-to-edge snapping."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


LayoutArg = Annotated[
    Path,
    typer.Argument(help="Path to the JSON layout file"),
]
XOpt = Annotated[float, typer.Option("--x", help="Cursor X in inches")]
ZOpt = Annotated[float, typer.Option("--z", help="Cursor Z in inches")]
YOpt = Annotated[float, typer.Option("--y", help="Cursor Y in inches")]
TypeOpt = Annotated[
    str,
    typer.Option(
        "--type",
        "-t",
        help=f"Block type: {', '.join(t.value for t in BlockType)}",
    ),
]
CoreOpt = Annotated[int, typer.Option("--core", "-c", help="Core thickness in inches")]
RotationOpt = Annotated[
    int, typer.Option("--rotation", "-r", help="Rotation in degrees (0/90/180/270)")
]
TurnsOpt = Annotated[
    int,
    typer.Option(
        "--turns",
        "-q",
        min=0,
        help="Quarter turns clockwise applied on top of --rotation",
    ),
]
GridOpt = Annotated[
    float | None,
    typer.Option("--grid", "-g", help="Grid size override in inches"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: text, json"),
]


def _load_layout(layout_file: Path) -> LayoutConfiguration:
    """Load a layout file or exit with code 1."""
    try:
        return load_config(layout_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _exit_on_errors(output: PlacementOutput) -> None:
    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)


def _turned(rotation: int, turns: int) -> int:
    """Apply clockwise quarter turns, leaving a bad rotation for validation."""
    if rotation not in RIGHT_ANGLE_ROTATIONS:
        return rotation
    for _ in range(turns % 4):
        rotation = rotate_clockwise(rotation)
    return rotation


def _check_format(output_format: str) -> None:
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo("Available formats: text, json", err=True)
        raise typer.Exit(code=1)


@app.command()
def snap(
    layout_file: LayoutArg,
    x: XOpt,
    z: ZOpt,
    y: YOpt = 0.0,
    block_type: TypeOpt = BlockType.STANDARD.value,
    core: CoreOpt = 8,
    rotation: RotationOpt = 0,
    turns: TurnsOpt = 0,
    grid: GridOpt = None,
    output_format: FormatOpt = "text",
) -> None:
    """Show where a block would land for a cursor position."""
    _check_format(output_format)
    config = _load_layout(layout_file)

    command = SnapPlacementCommand(config_to_snapper(config))
    placement = PlacementInput(
        x=x,
        y=y,
        z=z,
        block_type=block_type,
        core_thickness=core,
        rotation=_turned(rotation, turns),
    )
    output = command.execute(placement, config_to_blocks(config), grid)
    _exit_on_errors(output)

    if output_format == "json":
        typer.echo(JsonExporter().export_placement(output))
    else:
        assert output.result is not None
        typer.echo(SnapResultFormatter().format(output.result))


@app.command()
def place(
    layout_file: LayoutArg,
    x: XOpt,
    z: ZOpt,
    y: YOpt = 0.0,
    block_type: TypeOpt = BlockType.STANDARD.value,
    core: CoreOpt = 8,
    rotation: RotationOpt = 0,
    turns: TurnsOpt = 0,
    grid: GridOpt = None,
    output_file: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the layout with the new block to this file",
        ),
    ] = None,
) -> None:
    """Snap a block and add it to the layout."""
    config = _load_layout(layout_file)

    command = PlaceBlockCommand(config_to_snapper(config))
    placement = PlacementInput(
        x=x,
        y=y,
        z=z,
        block_type=block_type,
        core_thickness=core,
        rotation=_turned(rotation, turns),
    )
    output = command.execute(placement, config_to_blocks(config), grid)
    _exit_on_errors(output)
    assert output.result is not None and output.block is not None

    typer.echo(SnapResultFormatter().format(output.result))
    if output_file is None:
        typer.echo(
            json.dumps(block_to_config(output.block).model_dump(mode="json"), indent=2)
        )
        return

    save_config(append_block(config, output.block), output_file)
    typer.echo(f"Added block {output.block.id} to {output_file}")


@app.command()
def bounds(
    layout_file: LayoutArg,
    output_format: FormatOpt = "text",
) -> None:
    """Show bounding rectangles and snap faces of every placed block."""
    _check_format(output_format)
    config = _load_layout(layout_file)
    blocks = config_to_blocks(config)

    if output_format == "json":
        typer.echo(JsonExporter().export_geometry(blocks))
    else:
        typer.echo(BoundsReportFormatter().format(blocks))


@app.command()
def catalog(
    core: CoreOpt = 8,
) -> None:
    """List block types with their dimensions for a core thickness."""
    typer.echo(CatalogFormatter().format(core))


if __name__ == "__main__":
    app()
