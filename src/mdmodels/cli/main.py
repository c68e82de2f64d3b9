"""Main CLI entry point for mdmodels."""

import logging

import click
from rich.logging import RichHandler

from mdmodels import __version__
from mdmodels.cli.commands.show import show
from mdmodels.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def cli(verbose: bool) -> None:
    """MD-Models - data models written as Markdown.

    \b
    COMMANDS:
      mdmodels show model.md             Summarize objects and enumerations
      mdmodels show model.md --json      Print the data model as JSON
      mdmodels validate model.md         Check types and names
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


cli.add_command(show)
cli.add_command(validate)


if __name__ == "__main__":
    cli()
