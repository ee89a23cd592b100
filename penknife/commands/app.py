"""
Defines the main Click command group for Penknife.

This module provides:
- The root `cli` command group for the application.
- Integration with Rich-enhanced Click classes (`RichGroup`).
- Registration of subcommands from other modules.

Usage:
Import `cli` to initialize and run the command-line interface.
"""

import click
from penknife.commands.base import RichGroup
from penknife.commands.render import render, tokens


@click.group(
    cls=RichGroup,
    help="""
    Penknife Templates

    Expand small nested templates from the shell.
    """,
)
@click.version_option(package_name="penknife", prog_name="penknife")
def cli() -> None:
    """
    The root Click command group for Penknife.
    """
    pass


# Explicitly annotate `cli` as `click.Group` for static type checking
cli: click.Group = cli

# Register subcommands
cli.add_command(render)
cli.add_command(tokens)
