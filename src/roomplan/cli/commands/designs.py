"""Design library management commands.

Provides `roomplan designs list|show|delete` over a library directory.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from roomplan.application.config import ConfigError
from roomplan.application.factory import ServiceFactory
from roomplan.application.library import DesignLibrary, DesignNotFoundError

designs_app = typer.Typer(help="Manage saved designs.")

LibraryOption = Annotated[
    Path | None,
    typer.Option(
        "--library",
        "-l",
        help="Design library directory",
        envvar="ROOMPLAN_LIBRARY_DIR",
    ),
]


def _library(root: Path | None) -> DesignLibrary:
    return ServiceFactory(library_dir=root).get_design_library()


@designs_app.command(name="list")
def list_designs(library: LibraryOption = None) -> None:
    """List saved designs, newest first."""
    records = _library(library).list_designs()
    if not records:
        typer.echo("No saved designs.")
        return

    typer.echo(f"{'ID':<34} {'Name':<24} {'Room':<14} Items")
    typer.echo("-" * 80)
    for record in records:
        room = record.snapshot.room
        size = f"{room.width:g}x{room.length:g}m"
        typer.echo(f"{record.id:<34} {record.name:<24} {size:<14} {record.item_count}")


@designs_app.command(name="show")
def show_design(
    design_id: Annotated[str, typer.Argument(help="Design id")],
    library: LibraryOption = None,
) -> None:
    """Print a saved design as JSON."""
    try:
        record = _library(library).get(design_id)
    except (DesignNotFoundError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(record.to_dict(), indent=2))


@designs_app.command(name="delete")
def delete_design(
    design_id: Annotated[str, typer.Argument(help="Design id")],
    library: LibraryOption = None,
) -> None:
    """Delete a saved design."""
    try:
        _library(library).delete(design_id)
    except DesignNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Deleted design {design_id}")
