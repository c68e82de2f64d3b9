"""CLI commands for mdmodels."""

from mdmodels.cli.commands.show import show
from mdmodels.cli.commands.validate import validate

__all__ = [
    "show",
    "validate",
]
