"""Validate command for checking door project files.

This module provides the `validate` command that checks a JSON project file
for errors and warnings, including impossible layouts and handle clashes.
"""

from itertools import groupby
from pathlib import Path
from typing import Annotated

import typer

from doorpanels.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file to validate"),
    ],
) -> None:
    """Validate a door project file.

    Checks the project file for:
    - JSON syntax errors
    - Schema validation errors (unknown fields, out-of-range values, etc.)
    - Layouts the cut engine rejects (panel too wide, negative heights)
    - Handle hardware overlapping the beading

    Exit codes:
        0 - Project is valid with no warnings
        1 - Project has errors (cannot be used)
        2 - Project is valid but has warnings

    Example:
        doorpanels validate hall-door.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _display_load_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        # Details arrive in file order, so each door's problems are adjacent
        for door, details in groupby(error.details, key=lambda d: d.get("door")):
            indent = "  "
            if door is not None:
                typer.echo(f"  Door '{door}':", err=True)
                indent = "    "
            for detail in details:
                path = detail.get("path", "unknown")
                message = detail.get("message", "Unknown error")
                typer.echo(f"{indent}{path}: {message}", err=True)
                value = detail.get("value")
                if value is not None:
                    typer.echo(f"{indent}  Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    if error.door_names:
        typer.echo(f"Doors affected: {', '.join(error.door_names)}", err=True)
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Project is valid.")
