# SPDX-License-Identifier: MIT

from dataclasses import dataclass

from timetable.model.axis import AxisRow
from timetable.model.column_day import ColumnDay
from timetable.model.column_header import ColumnHeader
from timetable.model.layout_config import LayoutConfig
from timetable.model.positioned_item import PositionedItem


@dataclass(frozen=True)
class Layout:
    config: LayoutConfig
    columns: tuple[ColumnDay, ...]
    headers: tuple[ColumnHeader, ...]
    items: tuple[PositionedItem, ...]
    axis: tuple[AxisRow, ...]

    @property
    def grid_width(self) -> float:
        return self.config.column_width * len(self.columns)
