# SPDX-License-Identifier: MIT

import datetime
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from timetable.layout.axis import build_time_axis
from timetable.layout.geometry import position_items
from timetable.layout.header import HeaderRenderer, build_column_headers
from timetable.layout.memo import Memo
from timetable.layout.now_line import calculate_top_offset, now_line
from timetable.layout.range import column_days, normalize_range
from timetable.model.axis import AxisRow
from timetable.model.column_day import ColumnDay
from timetable.model.column_header import ColumnHeader
from timetable.model.layout import Layout
from timetable.model.layout_config import LayoutConfig
from timetable.model.now_line import NowLine
from timetable.model.positioned_item import PositionedItem
from timetable.time import now_local

logger = logging.getLogger(__name__)


def compute_layout(
    config: LayoutConfig,
    items: Optional[Iterable[Any]] = None,
    date: Any = None,
    start: Any = None,
    till: Any = None,
    render_header: Optional[HeaderRenderer] = None,
) -> Layout:
    """Run every layout stage once, without caching."""
    columns = tuple(
        column_days(normalize_range(date, start, till), config.hour_window)
    )
    return Layout(
        config=config,
        columns=columns,
        headers=tuple(build_column_headers(columns, config, render_header)),
        items=tuple(position_items(items, columns, config)),
        axis=tuple(build_time_axis(columns, config)),
    )


def _geometry_key(config: LayoutConfig) -> tuple[Any, ...]:
    return (
        config.start_property,
        config.end_property,
        config.column_width,
        config.column_horizontal_padding,
        config.lines_left_offset,
        config.lines_left_inset,
        config.minute_height,
        config.from_hour,
        config.lines_top_offset,
    )


def _snapshot(items: Optional[Iterable[Any]]) -> Any:
    # Copy iterables so the cache key is a snapshot and generators survive
    # recomputation; invalid inputs pass through to be reported downstream
    if not isinstance(items, Iterable) or isinstance(items, (Mapping, str, bytes)):
        return items
    return tuple(items)


class TimetableLayout:
    """
    Memoizing driver around the layout stages.

    Each stage is recomputed only when the inputs it depends on change:
    columns on the range and hour window, items on the columns, the item list
    and the geometry settings, the axis and headers on the columns and config.
    Items are treated as read-only; mutate a copy and pass it to update().
    """

    def __init__(
        self,
        config: LayoutConfig,
        items: Optional[Iterable[Any]] = None,
        date: Any = None,
        start: Any = None,
        till: Any = None,
        render_header: Optional[HeaderRenderer] = None,
    ) -> None:
        self.config = config
        self._items = _snapshot(items)
        self._date = date
        self._start = start
        self._till = till
        self._render_header = render_header

        self._columns_memo: Memo[tuple[ColumnDay, ...]] = Memo()
        self._items_memo: Memo[tuple[PositionedItem, ...]] = Memo()
        self._axis_memo: Memo[tuple[AxisRow, ...]] = Memo()
        self._headers_memo: Memo[tuple[ColumnHeader, ...]] = Memo()

    def update(
        self,
        config: Optional[LayoutConfig] = None,
        items: Optional[Iterable[Any]] = None,
        date: Any = None,
        start: Any = None,
        till: Any = None,
    ) -> None:
        """Replace the given inputs; anything left as None keeps its value."""
        if config is not None:
            self.config = config
        if items is not None:
            self._items = _snapshot(items)
        if date is not None:
            self._date, self._start, self._till = date, None, None
        elif start is not None or till is not None:
            self._date = None
            if start is not None:
                self._start = start
            if till is not None:
                self._till = till

    def columns(self) -> tuple[ColumnDay, ...]:
        key = (
            self._date,
            self._start,
            self._till,
            self.config.from_hour,
            self.config.to_hour,
        )
        return self._columns_memo.get(
            key,
            lambda: tuple(
                column_days(
                    normalize_range(self._date, self._start, self._till),
                    self.config.hour_window,
                )
            ),
        )

    def items(self) -> tuple[PositionedItem, ...]:
        columns = self.columns()
        key = (columns, self._items, _geometry_key(self.config))
        return self._items_memo.get(
            key, lambda: tuple(position_items(self._items, columns, self.config))
        )

    def axis(self) -> tuple[AxisRow, ...]:
        columns = self.columns()
        return self._axis_memo.get(
            (columns, self.config),
            lambda: tuple(build_time_axis(columns, self.config)),
        )

    def headers(self) -> tuple[ColumnHeader, ...]:
        columns = self.columns()
        return self._headers_memo.get(
            (columns, self.config, self._render_header),
            lambda: tuple(
                build_column_headers(columns, self.config, self._render_header)
            ),
        )

    def calculate_top_offset(self, instant: datetime.datetime) -> float:
        return calculate_top_offset(instant, self.config)

    def now_line(self, now: Optional[datetime.datetime] = None) -> NowLine:
        return now_line(
            self.columns(), self.config, now_local() if now is None else now
        )

    def compute(self) -> Layout:
        layout = Layout(
            config=self.config,
            columns=self.columns(),
            headers=self.headers(),
            items=self.items(),
            axis=self.axis(),
        )
        logger.debug(
            "Layout has %d columns and %d positioned items",
            len(layout.columns),
            len(layout.items),
        )
        return layout
