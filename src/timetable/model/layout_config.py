# SPDX-License-Identifier: MIT

from dataclasses import dataclass

from timetable.model.date_range import HourWindow


@dataclass(frozen=True)
class LayoutConfig:
    """Resolved pixel measurements for one layout pass."""

    width: float
    time_width: float
    column_width: float
    column_header_height: float
    hour_height: float
    lines_top_offset: float
    lines_left_inset: float
    column_horizontal_padding: float
    time_font_size: float = 14
    from_hour: int = 0
    to_hour: int = 24
    start_property: str = "startDate"
    end_property: str = "endDate"

    @property
    def minute_height(self) -> float:
        return self.hour_height / 60

    @property
    def lines_left_offset(self) -> float:
        return self.time_width - self.lines_left_inset

    @property
    def hour_window(self) -> HourWindow:
        return HourWindow(self.from_hour, self.to_hour)
