"""Templates commands for starting door projects from bundled templates."""

from pathlib import Path
from typing import Annotated

import typer

from doorpanels.application.templates import TemplateManager, TemplateNotFoundError

templates_app = typer.Typer(
    name="templates",
    help="Start door projects from bundled templates.",
)


@templates_app.command(name="list")
def list_templates() -> None:
    """List the bundled templates and the door each one describes.

    Example:
        doorpanels templates list
    """
    templates = TemplateManager().list_templates()

    typer.echo("Available templates:")
    typer.echo()
    name_width = max(len(info.name) for info in templates)
    outline_width = max(len(info.outline) for info in templates)
    for info in templates:
        typer.echo(
            f"  {info.name:<{name_width}}  {info.outline:<{outline_width}}"
            f"  {info.description}"
        )
    typer.echo()
    typer.echo("Use 'doorpanels templates init <name>' to start a project file.")


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Name of the template to start from"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    door_name: Annotated[
        str | None,
        typer.Option("--door-name", "-n", help="Name for the door in the new project"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Create a new project file from a template.

    Examples:
        doorpanels templates init uk-interior
        doorpanels templates init tall-top-row -o landing.json -n Landing
    """
    if output is None:
        output = Path(f"{name}.json")
    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    try:
        project = TemplateManager().init_template(name, output, door_name=door_name)
    except TemplateNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"Available templates: {', '.join(e.available)}", err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Created: {output} (door '{project.doors[0].name}')")
