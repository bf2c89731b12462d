# SPDX-License-Identifier: MIT

from typing import Optional, Protocol

from timetable.model.axis import AxisRow
from timetable.model.column_header import ColumnHeader
from timetable.model.layout import Layout
from timetable.model.now_line import NowLine
from timetable.model.positioned_item import PositionedItem


class Renderer(Protocol):
    """Anything that can paint a computed layout."""

    def draw_header(self, header: ColumnHeader) -> None: ...

    def draw_axis_row(self, row: AxisRow) -> None: ...

    def draw_now_line(self, now_line: NowLine) -> None: ...

    def draw_item(self, positioned: PositionedItem) -> None: ...


def render_layout(
    layout: Layout,
    renderer: Renderer,
    now_line: Optional[NowLine] = None,
) -> None:
    """Paint headers, then the hour grid, then the now line, then the cards on top."""
    for header in layout.headers:
        renderer.draw_header(header)
    for row in layout.axis:
        renderer.draw_axis_row(row)
    if now_line is not None:
        renderer.draw_now_line(now_line)
    for positioned in layout.items:
        renderer.draw_item(positioned)
