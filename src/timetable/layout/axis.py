# SPDX-License-Identifier: MIT

from typing import Sequence

from timetable.model.axis import AxisLine, AxisRow
from timetable.model.column_day import ColumnDay
from timetable.model.layout_config import LayoutConfig
from timetable.time import hour_to_label


def build_time_axis(
    columns: Sequence[ColumnDay], config: LayoutConfig
) -> list[AxisRow]:
    """
    Build one row per hour from from_hour to to_hour inclusive.

    The row at to_hour only closes the grid: it is shorter than an hour and
    draws neither a left nor a right border.
    """
    if not config.hour_window.is_valid():
        return []

    last_column_index = len(columns) - 1
    rows: list[AxisRow] = []
    for hour in range(config.from_hour, config.to_hour + 1):
        is_cap = hour == config.to_hour
        height = (
            config.lines_top_offset + config.time_font_size / 2
            if is_cap
            else config.hour_height
        )
        lines = tuple(
            AxisLine(
                column_index=column_index,
                left=config.lines_left_offset + column_index * config.column_width,
                width=config.column_width,
                border_left=not is_cap,
                border_right=column_index == last_column_index and not is_cap,
            )
            for column_index in range(len(columns))
        )
        rows.append(
            AxisRow(
                hour=hour,
                label=hour_to_label(hour),
                top=(hour - config.from_hour) * config.hour_height
                + config.lines_top_offset,
                height=height,
                is_cap=is_cap,
                lines=lines,
            )
        )
    return rows
