# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from timetable.terminal import configuration, view
from timetable.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Timetable - Day and week timetables in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="show, s")(view.show)
app.command(name="layout, l")(view.layout)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Show debug diagnostics from the layout engine"),
    ] = False,
) -> None:
    """
    Timetable - Day and week timetables in the CLI

    Global options that apply to all commands.
    """
    configure_logging(debug)


def run() -> None:
    app()
