from __future__ import annotations

import typer

from hostos import __version__
from hostos.cli.commands.classify import classify
from hostos.cli.commands.info import info
from hostos.cli.commands.names import names
from hostos.cli.commands.which import which


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(info)
app.command()(names)
app.command()(which)
app.command()(classify)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """Platform naming conventions and executable lookup."""


def main() -> None:
    app()
