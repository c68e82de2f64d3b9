"""Validate command for checking data models."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from mdmodels.exceptions import MDModelsError, ValidationError
from mdmodels.markdown.parser import parse_markdown

console = Console()


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
def validate(path: Path) -> None:
    """Validate a Markdown data model.

    PATH is the Markdown file to validate.
    """
    try:
        model = parse_markdown(path, validate=True)
    except ValidationError as e:
        console.print(f"[yellow]Validation issues for '{path}':[/yellow]")
        table = Table(show_header=True)
        table.add_column("Kind")
        table.add_column("Location")
        table.add_column("Message")

        for issue in e.issues:
            table.add_row(issue.kind.value, issue.location, issue.message)

        console.print(table)
        console.print(f"\n[red]Found {len(e.issues)} issue(s). Model is not valid.[/red]")
        raise SystemExit(1)
    except (FileNotFoundError, MDModelsError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(
        f"[green]Model '{model.name or path.stem}' is valid[/green] "
        f"({len(model.objects)} object(s), {len(model.enums)} enumeration(s))"
    )
