"""Typer CLI for door overlay cut lists."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from doorpanels.application import DoorRegistry
from doorpanels.application.config import (
    ConfigError,
    DoorProjectConfiguration,
    config_to_door,
    config_to_doors,
    load_config,
)
from doorpanels.domain import (
    CutResult,
    DiagnosticGuide,
    DoorConfig,
    HandleSide,
    compute_cut_result,
)
from doorpanels.infrastructure import (
    AllDoorsSummaryFormatter,
    CompactFormatter,
    CutListFormatter,
    DoorDiagramRenderer,
    DoorExport,
    InvalidResultError,
    JsonExporter,
    SummaryFormatter,
    guide_for_field,
)
from doorpanels.infrastructure.exporters import (
    ExportConflictError,
    ExporterRegistry,
    ExportManager,
)
from doorpanels.cli.commands import validate_command, templates_app


OUTPUT_FORMATS = ("summary", "compact", "cutlist", "json")

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON project file"),
]
DoorOption = Annotated[
    str | None,
    typer.Option("--door", help="Door name within the project (default: active door)"),
]
WidthOption = Annotated[
    float | None, typer.Option("--width", "-w", help="Door width in mm")
]
HeightOption = Annotated[
    float | None, typer.Option("--height", "-h", help="Door height in mm")
]
TopMarginOption = Annotated[
    float | None, typer.Option("--top-margin", help="Top margin in mm")
]
BottomMarginOption = Annotated[
    float | None, typer.Option("--bottom-margin", help="Bottom margin in mm")
]
LeftMarginOption = Annotated[
    float | None, typer.Option("--left-margin", help="Left margin in mm")
]
RightMarginOption = Annotated[
    float | None, typer.Option("--right-margin", help="Right margin in mm")
]
HorizontalGapOption = Annotated[
    float | None,
    typer.Option("--horizontal-gap", help="Gap between the two columns in mm"),
]
VerticalGapOption = Annotated[
    float | None,
    typer.Option("--vertical-gap", help="Gap between the two rows in mm"),
]
BeadingWidthOption = Annotated[
    float | None, typer.Option("--beading-width", help="Beading strip width in mm")
]
PanelWidthOption = Annotated[
    float | None, typer.Option("--panel-width", help="MDF panel width in mm")
]
RatioOption = Annotated[
    float | None,
    typer.Option("--ratio", help="Percentage of available height for the top row"),
]
HandleSideOption = Annotated[
    HandleSide | None, typer.Option("--handle-side", help="Door edge carrying the handle")
]
HandleHeightOption = Annotated[
    float | None,
    typer.Option("--handle-height", help="Handle centre from the door top in mm"),
]
HandleIndentOption = Annotated[
    float | None,
    typer.Option("--handle-indent", help="Handle centre from the door edge in mm"),
]
HandleSpreadOption = Annotated[
    float | None,
    typer.Option("--handle-spread", help="Handle hardware reach from the door edge in mm"),
]


app = typer.Typer(
    name="doorpanels",
    help="Calculate MDF panel and beading cut lists for four-panel door overlays.",
)

# Register validate command
app.command(name="validate")(validate_command)

# Register templates subcommand group
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Door overlay cut list calculator."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def _load_project(config_file: Path) -> DoorProjectConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _resolve_door(
    config_file: Path | None,
    door_name: str | None,
    overrides: dict[str, object],
) -> tuple[str, DoorConfig]:
    """Pick the door to work on and apply command-line overrides.

    Options left unset keep the value from the project file, or the
    standard UK door when no project file is given.
    """
    if config_file is not None:
        project = _load_project(config_file)
        try:
            name, door = config_to_door(project, door_name)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
    else:
        if door_name is not None:
            typer.echo("Error: --door requires --config", err=True)
            raise typer.Exit(code=1)
        name, door = "Door 1", DoorConfig()

    changes = {key: value for key, value in overrides.items() if value is not None}
    if changes:
        door = door.with_changes(**changes)
    return name, door


def _exit_if_invalid(result: CutResult) -> None:
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)


def _echo_warnings(result: CutResult) -> None:
    for warning in result.handle_warnings:
        typer.echo(f"Warning: {warning}", err=True)


@app.command()
def calculate(
    config_file: ConfigOption = None,
    door_name: DoorOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    top_margin: TopMarginOption = None,
    bottom_margin: BottomMarginOption = None,
    left_margin: LeftMarginOption = None,
    right_margin: RightMarginOption = None,
    horizontal_gap: HorizontalGapOption = None,
    vertical_gap: VerticalGapOption = None,
    beading_width: BeadingWidthOption = None,
    panel_width: PanelWidthOption = None,
    ratio: RatioOption = None,
    handle_side: HandleSideOption = None,
    handle_height: HandleHeightOption = None,
    handle_indent: HandleIndentOption = None,
    handle_spread: HandleSpreadOption = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format", "-f", help="Output format: summary, compact, cutlist, json"
        ),
    ] = "summary",
) -> None:
    """Calculate the cut list for one door.

    Measurements come from a project file, from options, or both (options
    override the file).

    Examples:
        doorpanels calculate
        doorpanels calculate --width 826 --panel-width 250
        doorpanels calculate -c house.json --door "Landing" --format compact
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    name, door = _resolve_door(
        config_file,
        door_name,
        {
            "door_width": width,
            "door_height": height,
            "top_margin": top_margin,
            "bottom_margin": bottom_margin,
            "left_margin": left_margin,
            "right_margin": right_margin,
            "horizontal_gap": horizontal_gap,
            "vertical_gap": vertical_gap,
            "beading_width": beading_width,
            "mdf_panel_width": panel_width,
            "top_panel_ratio": ratio,
            "handle_side": handle_side,
            "handle_height": handle_height,
            "handle_indent": handle_indent,
            "handle_spread": handle_spread,
        },
    )
    result = compute_cut_result(door)
    _exit_if_invalid(result)
    _echo_warnings(result)

    if output_format == "summary":
        typer.echo(SummaryFormatter().format(name, door, result))
    elif output_format == "compact":
        typer.echo(CompactFormatter().format(name, door, result))
    elif output_format == "cutlist":
        typer.echo(CutListFormatter().format(result))
    else:
        typer.echo(JsonExporter().export_string(DoorExport(name, door, result)))


@app.command()
def diagram(
    config_file: ConfigOption = None,
    door_name: DoorOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    top_margin: TopMarginOption = None,
    bottom_margin: BottomMarginOption = None,
    left_margin: LeftMarginOption = None,
    right_margin: RightMarginOption = None,
    horizontal_gap: HorizontalGapOption = None,
    vertical_gap: VerticalGapOption = None,
    beading_width: BeadingWidthOption = None,
    panel_width: PanelWidthOption = None,
    ratio: RatioOption = None,
    handle_side: HandleSideOption = None,
    handle_height: HandleHeightOption = None,
    handle_indent: HandleIndentOption = None,
    handle_spread: HandleSpreadOption = None,
    guide: Annotated[
        DiagnosticGuide | None,
        typer.Option("--guide", "-g", help="Diagnostic guide to overlay"),
    ] = None,
    field: Annotated[
        str | None,
        typer.Option(
            "--field", help="Overlay the guide for a field (e.g. leftMargin)"
        ),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="SVG output path (default: stdout)"),
    ] = None,
) -> None:
    """Render the door schematic as SVG.

    Examples:
        doorpanels diagram --guide overlay -o door.svg
        doorpanels diagram -c house.json --field handleSpread
    """
    if guide is None and field is not None:
        guide = guide_for_field(field)
        if guide is None:
            typer.echo(f"Error: No guide for field: {field}", err=True)
            raise typer.Exit(code=1)

    name, door = _resolve_door(
        config_file,
        door_name,
        {
            "door_width": width,
            "door_height": height,
            "top_margin": top_margin,
            "bottom_margin": bottom_margin,
            "left_margin": left_margin,
            "right_margin": right_margin,
            "horizontal_gap": horizontal_gap,
            "vertical_gap": vertical_gap,
            "beading_width": beading_width,
            "mdf_panel_width": panel_width,
            "top_panel_ratio": ratio,
            "handle_side": handle_side,
            "handle_height": handle_height,
            "handle_indent": handle_indent,
            "handle_spread": handle_spread,
        },
    )
    result = compute_cut_result(door)
    _exit_if_invalid(result)
    _echo_warnings(result)

    svg = DoorDiagramRenderer().render_svg(door, result, guide=guide, name=name)
    if output_file is None:
        typer.echo(svg)
        return

    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(svg, encoding="utf-8")
    typer.echo(f"Diagram written to: {output_file}")


@app.command()
def export(
    config_file: ConfigOption = None,
    formats: Annotated[
        str,
        typer.Option(
            "--formats", help="Comma-separated formats (txt, json, svg, dxf) or 'all'"
        ),
    ] = "all",
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-d", help="Directory for exported files"),
    ] = Path("."),
    project_name: Annotated[
        str | None,
        typer.Option(
            "--project-name", "-n", help="Base file name (default: project file name)"
        ),
    ] = None,
) -> None:
    """Export every door of a project to one or more formats.

    Nothing is written unless every door has a valid cut list.

    Examples:
        doorpanels export -c house.json --formats svg,dxf -d out/
        doorpanels export --formats all
    """
    if formats.lower() == "all":
        format_list = ExporterRegistry.available_formats()
    else:
        format_list = [f.strip().lower() for f in formats.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in format_list if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not format_list:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    if config_file is not None:
        registry = DoorRegistry(config_to_doors(_load_project(config_file)))
        base_name = project_name or config_file.stem
    else:
        registry = DoorRegistry()
        base_name = project_name or "door"

    outputs: list[DoorExport] = []
    failed = False
    for door, result in registry.results():
        if not result.is_valid:
            failed = True
            for error in result.errors:
                typer.echo(f"Error: {door.name}: {error}", err=True)
        outputs.append(DoorExport(door.name, door.config, result))
    if failed:
        raise typer.Exit(code=1)

    try:
        exported = ExportManager(output_dir).export_project(
            format_list, outputs, base_name
        )
    except ExportConflictError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except (InvalidResultError, OSError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    for output in outputs:
        _echo_warnings(output.result)
    typer.echo("Exported files:")
    for path in exported:
        typer.echo(f"  {path}")


@app.command()
def summary(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
) -> None:
    """Print the summary of every door in a project.

    Example:
        doorpanels summary house.json
    """
    registry = DoorRegistry(config_to_doors(_load_project(config_file)))
    doors = [(door.name, door.config, result) for door, result in registry.results()]
    typer.echo(AllDoorsSummaryFormatter().format(doors))


if __name__ == "__main__":
    app()
