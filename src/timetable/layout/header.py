# SPDX-License-Identifier: MIT

from typing import Callable, Optional, Sequence

from timetable.model.column_day import ColumnDay
from timetable.model.column_header import ColumnHeader
from timetable.model.layout_config import LayoutConfig
from timetable.time import date_to_header_str

HeaderRenderer = Callable[[ColumnDay], str]


def default_header_label(day: ColumnDay) -> str:
    return date_to_header_str(day.date)


def build_column_headers(
    columns: Sequence[ColumnDay],
    config: LayoutConfig,
    render_header: Optional[HeaderRenderer] = None,
) -> list[ColumnHeader]:
    """Headers are only shown when more than one day is visible."""
    if len(columns) <= 1:
        return []

    label_for = render_header or default_header_label
    return [
        ColumnHeader(
            column_index=column_index,
            label=label_for(column),
            left=config.lines_left_offset + column_index * config.column_width,
            width=config.column_width,
            height=config.column_header_height,
        )
        for column_index, column in enumerate(columns)
    ]
