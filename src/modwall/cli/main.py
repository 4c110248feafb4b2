"""Typer CLI for modular wall layouts."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from modwall.application import LayoutOutput, WallInput
from modwall.application.config import (
    ConfigError,
    config_to_wall_input,
    load_config,
    merge_config_with_cli,
)
from modwall.application.factory import get_factory
from modwall.cli.commands import validate_command
from modwall.domain import UnknownAccessoryError

app = typer.Typer(
    name="modwall",
    help="Lay out modular wall panels and place accessories.",
)

app.command(name="validate")(validate_command)

OUTPUT_FORMATS = ("all", "modules", "diagram", "placements", "json")

WidthOption = Annotated[
    int, typer.Option("--width", "-w", help="Total wall width in mm")
]
HeightOption = Annotated[
    int, typer.Option("--height", "-h", help="Total wall height in mm")
]
SpecialOption = Annotated[
    str, typer.Option("--special", "-s", help="Centered module: none, tv, fire, gaming")
]


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _special_from_flags(tv: bool, fire: bool, gaming: bool) -> str | None:
    """Map the mutually exclusive special flags to a special request value."""
    chosen = [name for name, on in (("tv", tv), ("fire", fire), ("gaming", gaming)) if on]
    if len(chosen) > 1:
        typer.echo(
            f"Error: only one of --tv, --fire, --gaming may be given, got: "
            f"{', '.join('--' + c for c in chosen)}",
            err=True,
        )
        raise typer.Exit(code=1)
    return chosen[0] if chosen else None


def _run(wall_input: WallInput) -> LayoutOutput:
    """Generate a layout, exiting with code 1 on errors."""
    result = get_factory().create_generate_command().execute(wall_input)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return result


@app.command()
def generate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        int | None,
        typer.Option("--width", "-w", help="Total wall width in mm"),
    ] = None,
    height: Annotated[
        int | None,
        typer.Option("--height", "-h", help="Total wall height in mm"),
    ] = None,
    tv: Annotated[bool, typer.Option("--tv", help="Add a centered TV module")] = False,
    fire: Annotated[
        bool, typer.Option("--fire", help="Add a centered fireplace module")
    ] = False,
    gaming: Annotated[
        bool, typer.Option("--gaming", help="Add a centered gaming module")
    ] = False,
    speakers: Annotated[
        bool, typer.Option("--speakers", help="Attach speakers to an edge module")
    ] = False,
    led: Annotated[
        bool, typer.Option("--led", help="Attach LED lighting to an edge module")
    ] = False,
    smart_control: Annotated[
        bool,
        typer.Option("--smart-control", help="Attach a control panel to the last module"),
    ] = False,
    shelves: Annotated[
        int | None, typer.Option("--shelves", help="Number of shelves, one per module")
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option(
            "--format", "-f", help="Output format: all, modules, diagram, placements, json"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log layout decisions")
    ] = False,
) -> None:
    """Generate a module layout from wall dimensions.

    You can provide dimensions via CLI options or via a JSON configuration file.
    When using --config, CLI options override config file values.

    Examples:
        modwall generate --width 3200 --height 2400 --tv --speakers
        modwall generate --config living-room.json
        modwall generate --config living-room.json --width 4000 --format json
    """
    _configure_logging(verbose)
    special = _special_from_flags(tv, fire, gaming)

    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

        try:
            config = merge_config_with_cli(
                config,
                width=width,
                height=height,
                special=special,
                speakers=speakers or None,
                shelves=shelves,
                led_lighting=led or None,
                smart_control=smart_control or None,
                output_format=output_format,
            )
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

        wall_input = config_to_wall_input(config)
        output_format = config.output.format
    else:
        if width is None or height is None:
            typer.echo(
                "Error: --width and --height are required when --config is not provided",
                err=True,
            )
            raise typer.Exit(code=1)

        wall_input = WallInput(
            width=width,
            height=height,
            special=special or "none",
            speakers=speakers,
            shelves=shelves if shelves is not None else 0,
            led_lighting=led,
            smart_control=smart_control,
        )
        output_format = output_format or "all"

    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: unknown format '{output_format}'. "
            f"Choose from: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    result = _run(wall_input)
    _echo_output(result, output_format)


def _echo_output(result: LayoutOutput, output_format: str) -> None:
    factory = get_factory()
    layout = result.layout
    configuration = result.configuration

    if output_format == "json":
        typer.echo(factory.get_json_formatter().export(result))
        return

    if output_format in ("all", "diagram"):
        typer.echo(
            factory.get_layout_diagram_formatter().format(
                layout, configuration.total_width
            )
        )
        typer.echo()
    if output_format in ("all", "modules"):
        typer.echo(factory.get_module_table_formatter().format(layout))
        typer.echo()
    if output_format in ("all", "placements"):
        typer.echo(factory.get_placement_formatter().format(result.placements))
        typer.echo()

    warnings = factory.get_warning_formatter().format(result.warnings)
    if warnings:
        typer.echo(warnings)


@app.command()
def modules(
    width: WidthOption,
    height: HeightOption,
    special: SpecialOption = "none",
) -> None:
    """Display the module table for a wall."""
    result = _run(WallInput(width=width, height=height, special=special))
    typer.echo(get_factory().get_module_table_formatter().format(result.layout))


@app.command()
def snap(
    accessory: Annotated[
        str,
        typer.Argument(
            help="Accessory: tv, fire, gaming, speakers, ledLighting, smartControl, shelves"
        ),
    ],
    width: WidthOption,
    height: HeightOption,
    special: SpecialOption = "none",
) -> None:
    """List snap points for an accessory on every eligible module."""
    result = _run(WallInput(width=width, height=height, special=special))
    factory = get_factory()
    compatibility = factory.create_compatibility(result.layout)
    try:
        points = compatibility.snap_points(accessory)
    except UnknownAccessoryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(factory.get_placement_formatter().format_snap_points(accessory, points))


@app.command()
def check(
    module_id: Annotated[str, typer.Argument(help="Module id, e.g. module-0")],
    accessory: Annotated[str, typer.Argument(help="Accessory id")],
    width: WidthOption,
    height: HeightOption,
    special: SpecialOption = "none",
) -> None:
    """Check whether an accessory can attach to a module.

    Exits with code 1 when the attachment is rejected.
    """
    result = _run(WallInput(width=width, height=height, special=special))
    factory = get_factory()
    compatibility = factory.create_compatibility(result.layout)
    try:
        outcome = compatibility.can_attach(module_id, accessory)
    except UnknownAccessoryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        factory.get_placement_formatter().format_check(module_id, accessory, outcome)
    )
    if not outcome.valid:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
