"""Typer CLI for room layouts."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from roomplan.application.config import (
    ConfigError,
    EditorSettings,
    config_to_snapshot,
    load_design,
    settings_to_snapper,
)
from roomplan.application.factory import get_factory
from roomplan.cli.commands import designs_app, validate_command
from roomplan.domain import (
    FurnitureItem,
    Room,
    RoomShape,
    item_half_extents,
)

app = typer.Typer(
    name="roomplan",
    help="Lay out furniture in a room and check placements.",
)

app.command(name="validate")(validate_command)
app.add_typer(designs_app, name="designs")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")
    ] = False,
) -> None:
    """Room layout designer."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def clamp(
    x: Annotated[float, typer.Option("--x", help="Candidate centre x in canvas units")],
    y: Annotated[float, typer.Option("--y", help="Candidate centre y in canvas units")],
    item_width: Annotated[
        float, typer.Option("--item-width", help="Item footprint width in metres")
    ],
    item_height: Annotated[
        float, typer.Option("--item-height", help="Item footprint depth in metres")
    ],
    width: Annotated[float, typer.Option("--width", "-w", help="Room width in metres")] = 4.0,
    length: Annotated[float, typer.Option("--length", "-l", help="Room length in metres")] = 3.0,
    shape: Annotated[
        str, typer.Option("--shape", "-s", help="Rectangle, Square or L-Shape")
    ] = "Rectangle",
    rotation: Annotated[float, typer.Option("--rotation", "-r", help="Rotation in degrees")] = 0.0,
    scale: Annotated[float, typer.Option("--scale", help="Item scale multiplier")] = 1.0,
    snap: Annotated[bool, typer.Option("--snap/--no-snap", help="Snap to the grid first")] = False,
    grid: Annotated[float, typer.Option("--grid", help="Grid size in canvas units")] = 20.0,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON")] = False,
) -> None:
    """Clamp a candidate centre so an item stays inside the room."""
    try:
        room_shape = RoomShape(shape)
        room = Room(width=width, length=length, shape=room_shape)
        item = FurnitureItem(
            id="cli",
            type="Item",
            width=item_width,
            height=item_height,
            rotation=rotation,
            scale=scale,
        )
        settings = EditorSettings(snap_enabled=snap, grid_size=grid)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    if room_shape == RoomShape.CUSTOM:
        typer.echo("Error: custom rooms need a design file; use 'scene' or 'validate'", err=True)
        raise typer.Exit(code=1)

    candidate_x, candidate_y = x, y
    snapper = settings_to_snapper(settings)
    if snapper is not None:
        snapped = snapper.snap_point(x, y)
        candidate_x, candidate_y = snapped.x, snapped.y

    result = get_factory().get_placement_clamp().clamp(item, candidate_x, candidate_y, room)
    extents = item_half_extents(item)

    if as_json:
        typer.echo(
            json.dumps(
                {
                    "x": result.x,
                    "y": result.y,
                    "halfWidth": extents.half_width,
                    "halfHeight": extents.half_height,
                }
            )
        )
        return

    typer.echo(f"Half extents: {extents.half_width:.2f} x {extents.half_height:.2f}")
    typer.echo(f"Requested:    ({x:g}, {y:g})")
    typer.echo(f"Clamped:      ({result.x:.2f}, {result.y:.2f})")


@app.command()
def scene(
    design_file: Annotated[Path, typer.Argument(help="Path to the JSON design file")],
    output_file: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write JSON here instead of stdout")
    ] = None,
) -> None:
    """Print the 3D scene description of a design."""
    try:
        config = load_design(design_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    snapshot = config_to_snapshot(config)
    mapper = get_factory().get_scene_mapper()
    content = json.dumps(mapper.build_scene(snapshot.room, snapshot.furniture).to_dict(), indent=2)

    if output_file is not None:
        output_file.write_text(content, encoding="utf-8")
        typer.echo(f"Scene written to {output_file}")
    else:
        typer.echo(content)


@app.command()
def catalog() -> None:
    """List the built-in furniture types."""
    typer.echo(f"{'Type':<14} {'Footprint':<12} {'Height':<8} Colour")
    typer.echo("-" * 44)
    for entry in get_factory().get_catalog().list_entries():
        footprint = f"{entry.width:g}x{entry.height:g}m"
        typer.echo(
            f"{entry.type:<14} {footprint:<12} {entry.vertical_height:<8g} {entry.default_color}"
        )


if __name__ == "__main__":
    app()
