"""
Template Commands

This module provides CLI commands for expanding templates from the shell.

Commands:
- render <template>: Expand a template file against JSON data.
- tokens: Show the effective marker configuration.
"""

import json
from pathlib import Path
from typing import Any, Optional, TextIO
from rich.console import Console
from rich.markup import escape
from rich.table import Table
import click
from penknife.commands.base import RichCommand, rich_help
from penknife.config.settings import appsettings, tokens_build, tokens_load
from penknife.lib.errors import PenknifeError
from penknife.lib.log import LOG
from penknife.lib.parser import MappingResolver, Penknife
from penknife.models.dataModel import RenderResult, TokenConfig

console: Console = Console()


def pairs_parse(items: tuple[str, ...], what: str) -> dict[str, str]:
    """
    Split ``NAME=VALUE`` option values into a dictionary.

    :param items: Raw option values.
    :param what: Option name used in error messages.
    :return: Mapping of name to value.
    :raises click.BadParameter: If an item has no ``=``.
    """
    parsed: dict[str, str] = {}
    for item in items:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got {item!r}", param_hint=what)
        parsed[name.strip()] = value
    return parsed


def data_load(path: Optional[Path], assignments: dict[str, str]) -> dict[str, Any]:
    """
    Load template data from a JSON object file and apply ``--set`` values.

    :param path: JSON file, or None for no file.
    :param assignments: Top-level values that override the file.
    :return: The data mapping.
    :raises PenknifeError: If the file is not a JSON object.
    """
    data: dict[str, Any] = {}
    if path is not None:
        try:
            loaded: Any = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise PenknifeError(f"Data file {path} is not valid JSON: {e}") from e
        if not isinstance(loaded, dict):
            raise PenknifeError(f"Data file {path} must hold a JSON object")
        data.update(loaded)
    data.update(assignments)
    return data


def render_run(
    template: str,
    data: dict[str, Any],
    config: TokenConfig,
    strict: bool = False,
) -> RenderResult:
    """
    Expand a template against data, capturing Penknife errors.

    :param template: Template text.
    :param data: Data for the mapping resolver.
    :param config: Marker configuration.
    :param strict: Fail on values missing from ``data``.
    :return: RenderResult with the text or the error.
    """
    engine = Penknife(config.as_dict())
    resolver = MappingResolver(
        data, scope=config.scope, args=config.args, strict=strict
    )
    try:
        return RenderResult(text=engine.format(template, resolver))
    except PenknifeError as e:
        LOG(f"Render failed: {e}")
        return RenderResult(text="", error=str(e), success=False)


@click.command(
    cls=RichCommand,
    short_help="Expand a template",
    help=rich_help(
        description="Expand a template file against JSON data.",
        usage="penknife render TEMPLATE [--data FILE] [--set KEY=VALUE]...",
        args={
            "TEMPLATE": "Template file, or - for stdin.",
            "--data, -d": "JSON object file supplying values.",
            "--set, -s": "Top-level KEY=VALUE, overrides --data. Repeatable.",
            "--token, -t": "Marker override NAME=VALUE. Repeatable.",
            "--tokens": "JSON file of marker overrides.",
            "--strict": "Fail on values missing from the data.",
            "--output, -o": "Output file (default stdout).",
        },
    ),
)
@click.argument("template", type=click.File("r"))
@click.option("--data", "-d", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--set", "-s", "assignments", multiple=True)
@click.option("--token", "-t", "markers", multiple=True)
@click.option("--tokens", "tokens_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--strict/--lenient", default=None)
@click.option("--output", "-o", type=click.File("w"), default="-")
def render(
    template: TextIO,
    data: Optional[Path],
    assignments: tuple[str, ...],
    markers: tuple[str, ...],
    tokens_file: Optional[Path],
    strict: Optional[bool],
    output: TextIO,
) -> None:
    """
    Render a template and write the result.

    Exits with status 1 on template, marker or data errors.
    """
    try:
        config: TokenConfig = tokens_build(
            pairs_parse(markers, "--token"), tokens_load(tokens_file)
        )
        values: dict[str, Any] = data_load(data, pairs_parse(assignments, "--set"))
    except PenknifeError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise SystemExit(1)

    result: RenderResult = render_run(
        template.read(),
        values,
        config,
        appsettings.strict if strict is None else strict,
    )
    if not result.success:
        console.print(f"[bold red]Error:[/bold red] {escape(result.error or '')}")
        raise SystemExit(1)
    click.echo(result.text, file=output, nl=False)


@click.command(
    cls=RichCommand,
    short_help="Show marker configuration",
    help=rich_help(
        description="Show the effective marker literals.",
        usage="penknife tokens [--tokens FILE]",
        args={"--tokens": "JSON file of marker overrides."},
    ),
)
@click.option("--tokens", "tokens_file", type=click.Path(dir_okay=False, path_type=Path))
def tokens(tokens_file: Optional[Path]) -> None:
    """
    Print the marker table.
    """
    try:
        config: TokenConfig = tokens_load(tokens_file)
    except PenknifeError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise SystemExit(1)

    table = Table(title="Penknife markers")
    table.add_column("Name", style="cyan")
    table.add_column("Literal", style="green")
    for name, literal in config.as_dict().items():
        table.add_row(name, escape(literal))
    console.print(table)
