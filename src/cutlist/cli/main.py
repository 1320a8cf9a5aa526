"""Typer CLI for cut list planning."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cutlist.application import PlanCutlistCommand, PlanOutput
from cutlist.application.config import (
    ConfigError,
    CutlistConfiguration,
    config_to_plan_input,
    config_to_search_config,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from cutlist.cli.commands import validate_command
from cutlist.infrastructure import CutDiagramRenderer, JsonExporter, SolutionFormatter
from cutlist.infrastructure.cut_diagram_renderer import MIN_ASCII_WIDTH

OUTPUT_FORMATS: tuple[str, ...] = ("text", "diagram", "svg", "json")

app = typer.Typer(
    name="cutlist",
    help="Plan how to cut a list of pieces from stock boards with minimal waste.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_plan_config(
    config_file: Path | None,
    boards: list[str] | None,
    cuts: list[str] | None,
) -> CutlistConfiguration:
    """Load the plan from a file or from --board/--cut options.

    Raises:
        typer.Exit: If the sources conflict or the configuration is invalid.
    """
    if config_file is not None and (boards or cuts):
        typer.echo("Error: use either --config or --board/--cut, not both", err=True)
        raise typer.Exit(code=1)

    try:
        if config_file is not None:
            return load_config(config_file)
        if not boards or not cuts:
            typer.echo(
                "Error: --board and --cut are required when --config is not provided",
                err=True,
            )
            raise typer.Exit(code=1)
        return load_config_from_dict({"boards": boards, "cutlist": cuts})
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _numbered_path(path: Path, rank: int, total: int) -> Path:
    """Return ``path`` for a single file, or ``name-<rank>.ext`` for several."""
    if total == 1:
        return path
    return path.with_name(f"{path.stem}-{rank}{path.suffix}")


def _emit(text: str, output_file: Path | None, what: str) -> None:
    if output_file is None:
        typer.echo(text)
        return
    output_file.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"{what} written to: {output_file}")


def _render(
    result: PlanOutput,
    output_format: str,
    output_file: Path | None,
    width: int,
) -> None:
    if output_format == "json":
        _emit(JsonExporter().export(result.solutions), output_file, "JSON")
    elif output_format == "diagram":
        renderer = CutDiagramRenderer()
        text = "\n\n".join(
            f"SOLUTION {rank}\n" + renderer.render_all_ascii(solution, width)
            for rank, solution in enumerate(result.solutions, start=1)
        )
        _emit(text, output_file, "Diagram")
    elif output_format == "svg":
        if output_file is None:
            typer.echo("Error: --output is required for svg format", err=True)
            raise typer.Exit(code=1)
        documents = CutDiagramRenderer().render_all_svg(result.solutions)
        for rank, document in enumerate(documents, start=1):
            path = _numbered_path(output_file, rank, len(documents))
            path.write_text(document, encoding="utf-8")
            typer.echo(f"SVG exported to: {path}")
    else:
        _emit(SolutionFormatter().format(result.solutions), output_file, "Plan")


@app.command()
def plan(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    boards: Annotated[
        list[str] | None,
        typer.Option("--board", "-b", help="Stock board as LENGTHxWIDTH:ID (repeatable)"),
    ] = None,
    cuts: Annotated[
        list[str] | None,
        typer.Option("--cut", help="Cut as COUNT@LENGTHxWIDTH:NAME (repeatable)"),
    ] = None,
    attempts: Annotated[
        int | None,
        typer.Option("--attempts", "-a", help="Number of shuffled allocation attempts"),
    ] = None,
    results: Annotated[
        int | None,
        typer.Option("--results", "-n", help="Number of ranked solutions to show"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for reproducible results"),
    ] = None,
    spacing: Annotated[
        float | None,
        typer.Option("--spacing", help="Allowance added to both dimensions of every cut"),
    ] = None,
    fit: Annotated[
        str | None,
        typer.Option("--fit", help="Boundary policy: inclusive or strict"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, diagram, svg, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (required for svg format)"),
    ] = None,
    width: Annotated[
        int,
        typer.Option(
            "--width",
            "-w",
            help="Diagram width in characters",
            min=MIN_ASCII_WIDTH,
        ),
    ] = 80,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log search progress"),
    ] = False,
) -> None:
    """Find the least wasteful way to cut the list from stock boards.

    Boards and cuts come from a JSON configuration file or from repeated
    --board/--cut options. CLI options override config file values.

    Examples:
        cutlist plan --config shelf-plan.json
        cutlist plan -b 96x8:A --cut 2@18x3:Apron --cut 4@28x1.5:Leg
        cutlist plan -c shelf-plan.json -a 5000 -n 3 --seed 7 -f svg -o plan.svg
    """
    _configure_logging(verbose)

    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Error: unknown format '{output_format}'", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    config = _load_plan_config(config_file, boards, cuts)
    try:
        config = merge_config_with_cli(
            config,
            attempts=attempts,
            results=results,
            seed=seed,
            spacing=spacing,
            fit=fit,
        )
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    command = PlanCutlistCommand(config_to_search_config(config))
    result = command.execute(config_to_plan_input(config))

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    _render(result, output_format, output_file, width)


if __name__ == "__main__":
    app()
