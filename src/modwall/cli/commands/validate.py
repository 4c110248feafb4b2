"""Validate command for checking configuration files.

This module provides the `validate` command that checks a JSON configuration
file for errors and warnings, including product-range advisories.
"""

from pathlib import Path
from typing import Annotated

import typer

from modwall.application.config import (
    ConfigError,
    ModwallConfiguration,
    ValidationResult,
    config_to_wall_configuration,
    load_config,
    validate_config,
)
from modwall.application.factory import get_factory


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a wall configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing required fields, out-of-range values, etc.)
    - Special modules that do not fit the wall
    - Product-range advisories (custom quote, uncovered width, shelf count)

    A valid configuration also prints the module sequence it would produce.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        modwall validate living-room.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    if result.is_valid:
        _display_layout_preview(config)
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
        for detail in error.details:
            path = detail.get("path") or "(root)"
            typer.echo(f"  {path}: {detail.get('message', 'Unknown error')}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, dict):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_layout_preview(config: ModwallConfiguration) -> None:
    """Show the module sequence the configuration would produce."""
    output = get_factory().create_generate_command().execute_configuration(
        config_to_wall_configuration(config)
    )
    if not output.is_valid or output.layout is None:
        return

    layout = output.layout
    sequence = " | ".join(
        f"{m.type.value.upper()} {m.width}" if m.is_special else str(m.width)
        for m in layout.modules
    )
    typer.echo("Layout:")
    typer.echo(f"  {sequence or '(no modules)'}")
    typer.echo(
        f"  {len(layout)} modules, {layout.total_module_width}mm of "
        f"{layout.usable_width}mm usable"
    )
    if layout.gap > 0:
        typer.echo(f"  {layout.gap}mm uncovered")
    typer.echo()


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
        typer.echo("Validation passed. Configuration is valid.")
