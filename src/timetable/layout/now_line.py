# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, Sequence

from timetable.model.column_day import ColumnDay
from timetable.model.layout_config import LayoutConfig
from timetable.model.now_line import NowLine


def calculate_top_offset(instant: datetime.datetime, config: LayoutConfig) -> float:
    """
    Map a time of day to its vertical pixel offset in the grid.

    Times before from_hour clamp to the top of the grid.
    """
    if instant.hour < config.from_hour:
        minutes = 0
    else:
        minutes = (instant.hour - config.from_hour) * 60 + instant.minute
    return minutes * config.minute_height + config.lines_top_offset


def now_line(
    columns: Sequence[ColumnDay],
    config: LayoutConfig,
    now: datetime.datetime,
) -> NowLine:
    column_index: Optional[int] = None
    for index, column in enumerate(columns):
        if column.date == now.date():
            column_index = index
            break

    return NowLine(
        top=calculate_top_offset(now, config),
        left=config.lines_left_offset,
        width=config.column_width * len(columns),
        column_index=column_index,
    )
