"""Show command for summarizing a data model."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from mdmodels.datamodel import DataModel
from mdmodels.exceptions import MDModelsError
from mdmodels.markdown.parser import parse_markdown

console = Console()


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the data model as JSON")
@click.option("--validate/--no-validate", default=True, help="Validate the model after parsing")
def show(path: Path, as_json: bool, validate: bool) -> None:
    """Parse a Markdown data model and display it.

    PATH is the Markdown file to parse.
    """
    try:
        model = parse_markdown(path, validate=validate)
    except (FileNotFoundError, MDModelsError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if as_json:
        click.echo(model.to_json())
        return

    _print_summary(model)


def _print_summary(model: DataModel) -> None:
    """Print tables of objects and enumerations."""
    console.print(f"\n[bold]{model.name or 'Unnamed model'}[/bold]")

    if model.config:
        console.print(f"Repository: {model.config.repo} (prefix: {model.config.prefix})")

    if model.objects:
        table = Table(show_header=True, title="Objects")
        table.add_column("Name")
        table.add_column("Term")
        table.add_column("Attributes")
        table.add_column("Required")

        for obj in model.objects:
            required = [a.name for a in obj.attributes if a.required]
            table.add_row(
                obj.name,
                obj.term or "-",
                str(len(obj.attributes)),
                ", ".join(required) or "-",
            )
        console.print(table)
    else:
        console.print("[yellow]No objects found[/yellow]")

    if model.enums:
        table = Table(show_header=True, title="Enumerations")
        table.add_column("Name")
        table.add_column("Values")

        for enum in model.enums:
            table.add_row(enum.name, ", ".join(enum.mappings))
        console.print(table)
