"""Validate command for checking design documents.

This module provides the `validate` command that checks a JSON design file
for schema errors and geometry warnings.
"""

from pathlib import Path
from typing import Annotated

import typer

from roomplan.application.config import (
    ConfigError,
    ValidationResult,
    load_design,
    validate_design,
)


def validate_command(
    design_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON design file to validate"),
    ],
) -> None:
    """Validate a design file.

    Checks the design file for:
    - JSON syntax errors
    - Schema errors (room size out of range, missing fields, duplicate ids)
    - Geometry warnings (furniture outside the room, undefined outlines)

    Exit codes:
        0 - Design is valid with no warnings
        1 - Design has errors (cannot be used)
        2 - Design is valid but has warnings

    Example:
        roomplan validate living-room.json
    """
    typer.echo(f"Validating {design_file}...")
    typer.echo()

    try:
        config = load_design(design_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_design(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _display_load_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail.get('line', '?')}, Column {detail.get('column', '?')}: "
                f"{detail.get('message', 'Unknown error')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail.get('path') or '(root)'}: {detail.get('message')}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.is_valid:
        typer.echo("Validation passed.")
    else:
        typer.echo("Validation failed.", err=True)
