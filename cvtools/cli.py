"""
The convert command line tool.

    convert -f <from_unit> -t <to_unit> <value>
"""

from __future__ import annotations

import logging
from typing import IO, Any, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .common import format_value
from .conversion import convert
from .errors import ArgumentError, CvToolsError
from .request import ConvertRequest, parse_value
from .units import CATEGORIES, LinearUnit, UnitCategory, units_by_category

logger = logging.getLogger(__name__)

_BASE_UNITS = {
    UnitCategory.LENGTH: "m",
    UnitCategory.MASS: "kg",
    UnitCategory.VOLUME: "L",
    UnitCategory.TEMPERATURE: "C",
}


class ConvertUsageError(click.UsageError):
    """
    Any failure of a convert invocation. Shows a red error line and the usage
    summary on stderr, then exits with status 1.
    """

    exit_code = 1

    def show(self, file: Optional[IO[Any]] = None) -> None:
        err_console = Console(stderr=True, highlight=False, emoji=False)
        err_console.print(
            f"[bold red]Error:[/bold red] [red]{escape(self.format_message())}[/red]",
            soft_wrap=True,
        )
        if self.ctx is not None:
            click.echo(self.ctx.get_usage(), err=True)


def _check_dashed_numbers(args: list[str]) -> None:
    """
    Validates arguments like '-inf' before click splits them into short flags,
    since their letters can collide with -f, -t, -h, -l or -v.

    Raises:
    * ArgumentError -- A dashed argument is a float but not a finite one.
    """
    for arg in args:
        if not arg.startswith("-"):
            continue
        try:
            float(arg)
        except ValueError:
            continue
        parse_value(arg)


class ConvertCommand(click.Command):
    """Command that reports click's own usage errors as ConvertUsageError."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            _check_dashed_numbers(args)
        except ArgumentError as ex:
            raise ConvertUsageError(str(ex), ctx) from ex
        try:
            return super().parse_args(ctx, args)
        except ConvertUsageError:
            raise
        except click.UsageError as ex:
            raise ConvertUsageError(ex.format_message(), ctx) from ex


def _print_units(console: Console) -> None:
    console.print("Supported units:")
    for category in CATEGORIES:
        base = _BASE_UNITS[category]
        table = Table(title=str(category).capitalize(), title_justify="left")
        table.add_column("Symbol")
        table.add_column("Name")
        table.add_column(f"In {base}", justify="right")
        for unit in units_by_category(category):
            if isinstance(unit, LinearUnit):
                factor = format_value(unit.conv_factor)
            else:
                factor = "affine"
            table.add_row(escape(unit.symbol), escape(unit.label), factor)
        console.print()
        console.print(table)


@click.command(
    "convert",
    cls=ConvertCommand,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
@click.option("-h", "--help", "show_help", is_flag=True, help="Show this help message.")
@click.option(
    "-l", "--list", "--units", "list_units", is_flag=True, help="List supported units."
)
@click.option("-v", "--version", "show_version", is_flag=True, help="Show the version.")
@click.option("-f", "--from", "from_unit", metavar="UNIT", help="Unit to convert from.")
@click.option("-t", "--to", "to_unit", metavar="UNIT", help="Unit to convert to.")
@click.option("--debug", is_flag=True, help="Log debug information to stderr.")
@click.argument("value", required=False)
@click.pass_context
def cli(
    ctx: click.Context,
    show_help: bool,
    list_units: bool,
    show_version: bool,
    from_unit: Optional[str],
    to_unit: Optional[str],
    debug: bool,
    value: Optional[str],
) -> None:
    """
    Converts VALUE between units of length, mass, volume or temperature.
    Unit names are case insensitive aliases (ie. 'miles', 'Celsius') or
    canonical symbols (ie. 'mi', 'C').
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    console = Console(highlight=False, emoji=False)
    try:
        request = ConvertRequest.from_options(
            from_unit,
            to_unit,
            value,
            show_help=show_help,
            list_units=list_units,
            show_version=show_version,
        )
        if request.show_help:
            click.echo(ctx.get_help())
            click.echo("\nFor a list of units, use the -l or --list flag.")
            return
        if request.list_units:
            _print_units(console)
            return
        if request.show_version:
            console.print(f"Current Version:\t[bold green]{__version__}[/bold green]")
            return

        result = convert(request.from_unit, request.to_unit, request.value)
    except CvToolsError as ex:
        logger.debug("Conversion failed: %r", ex)
        raise ConvertUsageError(str(ex), ctx) from ex

    to_symbol = escape(request.to_unit)
    console.print(f"From: {escape(request.from_unit)}", soft_wrap=True)
    console.print(f"To: {to_symbol}", soft_wrap=True)
    console.print(
        f"Value: [bold green]{format_value(result)}{to_symbol}[/bold green]",
        soft_wrap=True,
    )
