# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Any, Optional

import pendulum
import typer
from rich.console import Console

from timetable.configuration import Configuration
from timetable.layout.config import resolve_layout_config
from timetable.layout.pipeline import TimetableLayout
from timetable.model.layout_config import LayoutConfig
from timetable.repository.configuration import CONFIGURATION_REPO
from timetable.terminal.items import load_items
from timetable.terminal.parse import (
    parse_date,
    validate_hour_window,
    validate_positive,
)
from timetable.time import datetime_to_display_date_str
from timetable.view.export import layout_to_yaml
from timetable.view.grid import TerminalGridRenderer
from timetable.view.renderer import render_layout

LAYOUT_SETTINGS = (
    "width",
    "time_width",
    "hour_height",
    "column_width",
    "column_header_height",
    "lines_top_offset",
    "lines_left_inset",
    "column_horizontal_padding",
    "time_font_size",
    "from_hour",
    "to_hour",
    "start_property",
    "end_property",
)

# Surface width assumed when exporting without a terminal to measure
DEFAULT_SURFACE_WIDTH = 800

DATE_HELP = (
    "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
)

ItemsOption = Annotated[
    Optional[Path],
    typer.Option(
        "--items",
        "-i",
        exists=True,
        dir_okay=False,
        readable=True,
        help="YAML or JSON file holding a list of items",
    ),
]
DateOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option(
        "--date", "-d", parser=parse_date, help=f"Single day to show, {DATE_HELP}"
    ),
]
FromOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option("--from", "-f", parser=parse_date, help=f"First day, {DATE_HELP}"),
]
TillOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option("--till", "-t", parser=parse_date, help=f"Last day, {DATE_HELP}"),
]
FromHourOption = Annotated[
    Optional[int], typer.Option("--from-hour", min=0, max=24, help="First hour")
]
ToHourOption = Annotated[
    Optional[int], typer.Option("--to-hour", min=0, max=24, help="Closing hour")
]
WidthOption = Annotated[
    Optional[float], typer.Option("--width", "-w", help="Overall pixel width")
]
HourHeightOption = Annotated[
    Optional[float], typer.Option("--hour-height", help="Pixels per hour")
]
ColumnWidthOption = Annotated[
    Optional[float], typer.Option("--column-width", help="Pixel width of a day")
]
StartPropertyOption = Annotated[
    Optional[str], typer.Option("--start-property", help="Item start field")
]
EndPropertyOption = Annotated[
    Optional[str], typer.Option("--end-property", help="Item end field")
]


def build_layout_config(
    config: Configuration, surface_width: float, **overrides: Any
) -> LayoutConfig:
    """Layer command line overrides over configured defaults."""
    settings: dict[str, Any] = {
        key: config[key]  # type: ignore[literal-required]
        for key in LAYOUT_SETTINGS
    }
    for key, value in overrides.items():
        if value is not None:
            settings[key] = value

    validate_hour_window(settings["from_hour"], settings["to_hour"])
    return resolve_layout_config(surface_width, **settings)


def build_timetable(
    items_path: Optional[Path],
    date: Optional[pendulum.DateTime],
    from_date: Optional[pendulum.DateTime],
    till_date: Optional[pendulum.DateTime],
    layout_config: LayoutConfig,
) -> TimetableLayout:
    items: list[Any] = []
    if items_path is not None:
        try:
            items = load_items(items_path)
        except ValueError as e:
            Console(stderr=True).print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

    if date is None and from_date is None and till_date is None:
        date = pendulum.today().naive()

    return TimetableLayout(
        layout_config,
        items,
        date=date,
        start=from_date if from_date is not None else till_date,
        till=till_date if till_date is not None else from_date,
    )


def show(
    items_path: ItemsOption = None,
    date: DateOption = None,
    from_date: FromOption = None,
    till_date: TillOption = None,
    from_hour: FromHourOption = None,
    to_hour: ToHourOption = None,
    width: WidthOption = None,
    hour_height: HourHeightOption = None,
    column_width: ColumnWidthOption = None,
    start_property: StartPropertyOption = None,
    end_property: EndPropertyOption = None,
    show_now_line: Annotated[
        Optional[bool],
        typer.Option(
            "--now-line/--no-now-line", help="Draw the current time indicator"
        ),
    ] = None,
) -> None:
    """Draw the timetable grid in the terminal."""
    config = CONFIGURATION_REPO.get_config()
    console = Console()
    pixels_per_column_char = validate_positive(
        "pixels_per_column_char", config["pixels_per_column_char"]
    )
    pixels_per_row_line = validate_positive(
        "pixels_per_row_line", config["pixels_per_row_line"]
    )

    layout_config = build_layout_config(
        config,
        # Leave the last terminal column free for the right border
        (console.width - 1) * pixels_per_column_char,
        width=width,
        hour_height=hour_height,
        column_width=column_width,
        from_hour=from_hour,
        to_hour=to_hour,
        start_property=start_property,
        end_property=end_property,
    )
    timetable = build_timetable(items_path, date, from_date, till_date, layout_config)
    layout = timetable.compute()

    if show_now_line is None:
        show_now_line = config["show_now_line"]
    now_line = timetable.now_line() if show_now_line else None

    renderer = TerminalGridRenderer(
        layout,
        pixels_per_column_char=pixels_per_column_char,
        pixels_per_row_line=pixels_per_row_line,
        title_property=config["title_property"],
        color_property=config["color_property"],
    )
    render_layout(layout, renderer, now_line)

    if layout.columns:
        first = datetime_to_display_date_str(layout.columns[0].start)
        last = datetime_to_display_date_str(layout.columns[-1].start)
        title = first if first == last else f"{first} - {last}"
        console.print(f"\n[bold]{title}[/bold]\n")
    console.print(renderer)


def layout(
    items_path: ItemsOption = None,
    date: DateOption = None,
    from_date: FromOption = None,
    till_date: TillOption = None,
    from_hour: FromHourOption = None,
    to_hour: ToHourOption = None,
    width: WidthOption = None,
    hour_height: HourHeightOption = None,
    column_width: ColumnWidthOption = None,
    start_property: StartPropertyOption = None,
    end_property: EndPropertyOption = None,
    include_now_line: Annotated[
        bool,
        typer.Option("--now-line", help="Include the current time indicator"),
    ] = False,
) -> None:
    """Print the computed layout as YAML."""
    config = CONFIGURATION_REPO.get_config()

    layout_config = build_layout_config(
        config,
        DEFAULT_SURFACE_WIDTH,
        width=width,
        hour_height=hour_height,
        column_width=column_width,
        from_hour=from_hour,
        to_hour=to_hour,
        start_property=start_property,
        end_property=end_property,
    )
    timetable = build_timetable(items_path, date, from_date, till_date, layout_config)
    now_line = timetable.now_line() if include_now_line else None

    typer.echo(
        layout_to_yaml(timetable.compute(), config["title_property"], now_line),
        nl=False,
    )
