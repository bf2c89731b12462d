# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from timetable import configuration
from timetable.repository.configuration import CONFIGURATION_REPO
from timetable.terminal.custom_typer import AliasedTyperGroup
from timetable.terminal.parse import validate_hour_window

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    for setting, value in config.items():
        if isinstance(value, bool):
            table.add_row(setting, "✓ Enabled" if value else "✗ Disabled")
        elif value is None:
            table.add_row(setting, "auto")
        else:
            table.add_row(setting, str(value))

    console.print(table)
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    width: Annotated[
        Optional[float],
        typer.Option("--width", help="Overall pixel width (default: terminal width)"),
    ] = None,
    time_width: Annotated[
        Optional[float],
        typer.Option("--time-width", help="Width of the hour-label gutter"),
    ] = None,
    hour_height: Annotated[
        Optional[float],
        typer.Option("--hour-height", help="Pixels per hour"),
    ] = None,
    column_width: Annotated[
        Optional[float],
        typer.Option("--column-width", help="Pixel width of one day column"),
    ] = None,
    column_header_height: Annotated[
        Optional[float],
        typer.Option("--column-header-height", help="Height of the column headers"),
    ] = None,
    lines_top_offset: Annotated[
        Optional[float],
        typer.Option("--lines-top-offset", help="Vertical start of the grid"),
    ] = None,
    lines_left_inset: Annotated[
        Optional[float],
        typer.Option("--lines-left-inset", help="How far lines reach into the gutter"),
    ] = None,
    column_horizontal_padding: Annotated[
        Optional[float],
        typer.Option(
            "--column-horizontal-padding", help="Inset of cards within a column"
        ),
    ] = None,
    time_font_size: Annotated[
        Optional[float],
        typer.Option("--time-font-size", help="Font size of hour labels"),
    ] = None,
    from_hour: Annotated[
        Optional[int],
        typer.Option("--from-hour", min=0, max=24, help="First visible hour"),
    ] = None,
    to_hour: Annotated[
        Optional[int],
        typer.Option("--to-hour", min=0, max=24, help="Hour closing the grid"),
    ] = None,
    start_property: Annotated[
        Optional[str],
        typer.Option("--start-property", help="Item field holding the start"),
    ] = None,
    end_property: Annotated[
        Optional[str],
        typer.Option("--end-property", help="Item field holding the end"),
    ] = None,
    title_property: Annotated[
        Optional[str],
        typer.Option("--title-property", help="Item field shown on cards"),
    ] = None,
    color_property: Annotated[
        Optional[str],
        typer.Option("--color-property", help="Item field holding the card color"),
    ] = None,
    pixels_per_column_char: Annotated[
        Optional[float],
        typer.Option(
            "--pixels-per-column-char",
            min=1,
            help="Horizontal pixels per terminal column",
        ),
    ] = None,
    pixels_per_row_line: Annotated[
        Optional[float],
        typer.Option(
            "--pixels-per-row-line", min=1, help="Vertical pixels per terminal line"
        ),
    ] = None,
    show_now_line: Annotated[
        Optional[bool],
        typer.Option(
            "--show-now-line/--no-show-now-line",
            help="Draw the current time line by default",
        ),
    ] = None,
    auto_width: Annotated[
        bool,
        typer.Option("--auto-width", help="Follow the terminal width again"),
    ] = False,
    auto_column_width: Annotated[
        bool,
        typer.Option("--auto-column-width", help="Derive column width from width"),
    ] = False,
    auto_column_header_height: Annotated[
        bool,
        typer.Option(
            "--auto-column-header-height", help="Derive header height from hour height"
        ),
    ] = False,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        width=width,
        time_width=time_width,
        hour_height=hour_height,
        column_width=column_width,
        column_header_height=column_header_height,
        lines_top_offset=lines_top_offset,
        lines_left_inset=lines_left_inset,
        column_horizontal_padding=column_horizontal_padding,
        time_font_size=time_font_size,
        from_hour=from_hour,
        to_hour=to_hour,
        start_property=start_property,
        end_property=end_property,
        title_property=title_property,
        color_property=color_property,
        pixels_per_column_char=pixels_per_column_char,
        pixels_per_row_line=pixels_per_row_line,
        show_now_line=show_now_line,
    )

    if auto_width:
        CONFIGURATION_REPO.clear_settings("width")
    if auto_column_width:
        CONFIGURATION_REPO.clear_settings("column_width")
    if auto_column_header_height:
        CONFIGURATION_REPO.clear_settings("column_header_height")

    config = CONFIGURATION_REPO.get_config()
    try:
        validate_hour_window(config["from_hour"], config["to_hour"])
    except typer.BadParameter:
        CONFIGURATION_REPO.reset()
        raise

    view()
