# SPDX-License-Identifier: MIT

from typing import Any, Optional

from rich.text import Text

from timetable.color import (
    CARD_TEXT_COLOR,
    GRID_COLOR,
    HEADER_COLOR,
    NOW_LINE_COLOR,
    TIME_LABEL_COLOR,
    color_for_index,
)
from timetable.layout.geometry import read_item_property
from timetable.model.axis import AxisRow
from timetable.model.column_header import ColumnHeader
from timetable.model.layout import Layout
from timetable.model.now_line import NowLine
from timetable.model.positioned_item import PositionedItem

Cell = tuple[str, str]


class TerminalGridRenderer:
    """
    Rasterize a pixel layout onto a character grid for the terminal.

    Every pixel coordinate is scaled to a character column and a line, so the
    picture keeps the proportions of the layout it was given.
    """

    def __init__(
        self,
        layout: Layout,
        pixels_per_column_char: float = 8,
        pixels_per_row_line: float = 30,
        title_property: str = "title",
        color_property: str = "color",
    ) -> None:
        self.layout = layout
        self.pixels_per_column_char = pixels_per_column_char
        self.pixels_per_row_line = pixels_per_row_line
        self.title_property = title_property
        self.color_property = color_property

        config = layout.config
        pixel_width = max(
            config.time_width, config.lines_left_offset + layout.grid_width
        )
        pixel_height = max(
            (row.top + row.height for row in layout.axis), default=0.0
        )
        self.width = self._x(pixel_width) + 1
        self.height = self._y(pixel_height) + 1

        self._header: list[Cell] = [(" ", "")] * self.width
        self._cells: list[list[Cell]] = [
            [(" ", "")] * self.width for _ in range(self.height)
        ]
        self._item_colors: dict[int, str] = {}

    def _x(self, pixels: float) -> int:
        return int(round(pixels / self.pixels_per_column_char))

    def _y(self, pixels: float) -> int:
        return int(round(pixels / self.pixels_per_row_line))

    def _put(self, x: int, y: int, char: str, style: str) -> None:
        if 0 <= y < self.height and 0 <= x < self.width:
            self._cells[y][x] = (char, style)

    def _write(self, x: int, y: int, text: str, style: str) -> None:
        for offset, char in enumerate(text):
            self._put(x + offset, y, char, style)

    def draw_header(self, header: ColumnHeader) -> None:
        x0 = self._x(header.left)
        available = max(self._x(header.left + header.width) - x0, 1)
        label = header.label[:available].center(available)
        for offset, char in enumerate(label):
            if 0 <= x0 + offset < self.width:
                self._header[x0 + offset] = (char, HEADER_COLOR)

    def draw_axis_row(self, row: AxisRow) -> None:
        y = self._y(row.top)
        y_end = self._y(row.top + row.height)

        for line in row.lines:
            x0 = self._x(line.left)
            x1 = self._x(line.left + line.width)
            for x in range(x0, x1):
                self._put(x, y, "─", GRID_COLOR)
            for line_y in range(y + 1, y_end):
                if line.border_left:
                    self._put(x0, line_y, "│", GRID_COLOR)
                if line.border_right:
                    self._put(x1, line_y, "│", GRID_COLOR)

        self._write(0, y, row.label, TIME_LABEL_COLOR)

    def draw_now_line(self, now_line: NowLine) -> None:
        y = self._y(now_line.top)
        x0 = self._x(now_line.left)
        for x in range(x0, self._x(now_line.left + now_line.width)):
            self._put(x, y, "╌", NOW_LINE_COLOR)
        if now_line.column_index is not None:
            column_width = self.layout.config.column_width
            dot_left = now_line.left + now_line.column_index * column_width
            self._put(self._x(dot_left), y, "●", NOW_LINE_COLOR)

    def draw_item(self, positioned: PositionedItem) -> None:
        rect = positioned.rect
        x0 = self._x(rect.left)
        x1 = max(self._x(rect.right), x0 + 1)
        y0 = self._y(rect.top)
        y1 = max(self._y(rect.bottom), y0 + 1)
        style = f"{CARD_TEXT_COLOR} on {self._color_for(positioned.item)}"

        for y in range(y0, y1):
            for x in range(x0, x1):
                self._put(x, y, " ", style)

        title = self._title_for(positioned)
        self._write(x0, y0, title[: x1 - x0], style)

    def _color_for(self, item: Any) -> str:
        color = read_item_property(item, self.color_property)
        if isinstance(color, str) and color:
            return color
        if id(item) not in self._item_colors:
            self._item_colors[id(item)] = color_for_index(len(self._item_colors))
        return self._item_colors[id(item)]

    def _title_for(self, positioned: PositionedItem) -> str:
        title: Optional[Any] = read_item_property(positioned.item, self.title_property)
        if title is None or title == "":
            title = "[no title]"
        if positioned.days_total > 1:
            return f"{title} ({positioned.day_index}/{positioned.days_total})"
        return str(title)

    def to_text(self) -> Text:
        text = Text(no_wrap=True, overflow="crop")
        if self.layout.headers:
            self._append_cells(text, self._header)
            text.append("\n")
        for line_index, line in enumerate(self._cells):
            self._append_cells(text, line)
            if line_index < len(self._cells) - 1:
                text.append("\n")
        return text

    def _append_cells(self, text: Text, cells: list[Cell]) -> None:
        for char, style in cells:
            text.append(char, style=style or None)

    def __rich__(self) -> Text:
        return self.to_text()

