"""The `validate` command: check a cut list plan without searching it.

Reports schema problems from loading, then the plan-level checks from
validate_config (unplaceable cuts, duplicate board ids, oversized spacing).
"""

from pathlib import Path
from typing import Annotated

import typer

from cutlist.application.config import (
    ConfigError,
    CutlistConfiguration,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="JSON plan file to check"),
    ],
) -> None:
    """Validate a cut list configuration file.

    Exit codes:
        0 - Plan is valid
        1 - Plan has errors and cannot be searched
        2 - Plan is valid but has warnings

    Example:
        cutlist validate shelf-plan.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo("Errors:", err=True)
        for line in _load_error_lines(e):
            typer.echo(f"  {line}", err=True)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    _echo_summary(config)
    result = validate_config(config)
    _echo_result(result)
    raise typer.Exit(code=result.exit_code)


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    if error.error_type == "json_parse":
        return ["Invalid JSON syntax"] + [
            f"  Line {d['line']}, Column {d['column']}: {d['message']}"
            for d in error.details
        ]
    if error.error_type == "validation":
        return [f"{d['path']}: {d['message']}" for d in error.details]
    return [error.message]


def _echo_summary(config: CutlistConfiguration) -> None:
    total_cuts = sum(cut.count for cut in config.cutlist)
    typer.echo(
        f"Stock sizes: {len(config.boards)}   "
        f"Cuts: {total_cuts} ({len(config.cutlist)} distinct)   "
        f"Spacing: {config.spacing:g}"
    )
    for board in config.boards:
        typer.echo(f"  board {board.id:<12} {board.length:g} x {board.width:g}")
    for cut in config.cutlist:
        typer.echo(f"  cut   {cut.name:<12} {cut.count} @ {cut.length:g} x {cut.width:g}")
    typer.echo()


def _echo_result(result: ValidationResult) -> None:
    for error in result.errors:
        typer.echo(f"Error: {error.path}: {error.message}", err=True)
    for warning in result.warnings:
        typer.echo(f"Warning: {warning.path}: {warning.message}")
        if warning.suggestion:
            typer.echo(f"  Suggestion: {warning.suggestion}")
    if result.errors or result.warnings:
        typer.echo()

    if not result.is_valid:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.has_warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
