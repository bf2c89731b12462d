# SPDX-License-Identifier: MIT

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Sequence

import pendulum

from timetable.layout.now_line import calculate_top_offset
from timetable.layout.overlap import date_ranges_overlap
from timetable.model.column_day import ColumnDay
from timetable.model.layout_config import LayoutConfig
from timetable.model.positioned_item import PositionedItem, Rect
from timetable.time import (
    ONE_MILLISECOND,
    InstantParseError,
    datetime_to_iso_str,
    days_between,
    minutes_between,
    parse_instant,
)

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (str, bytes, int, float, bool)


def read_item_property(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def is_record(item: Any) -> bool:
    return item is not None and not isinstance(item, _SCALAR_TYPES)


def resolve_item_bounds(
    item: Any, config: LayoutConfig
) -> Optional[tuple[pendulum.DateTime, pendulum.DateTime]]:
    """
    Read and validate an item's start and end.

    Returns None, after logging why, when the item cannot be placed.
    """
    if not is_record(item):
        logger.warning(
            "Invalid item of type [%s] supplied to timetable, expected a record",
            type(item).__name__,
        )
        return None

    bounds: list[pendulum.DateTime] = []
    for name, property_name in (
        ("start", config.start_property),
        ("end", config.end_property),
    ):
        value = read_item_property(item, property_name)
        try:
            bounds.append(parse_instant(value))
        except InstantParseError:
            logger.warning(
                "Invalid %s date of item %r, expected ISO string or datetime, got %r",
                name,
                item,
                value,
            )
            return None

    start, end = bounds
    if end < start:
        logger.warning("Item %r ends (%s) before it starts (%s)", item, end, start)
        return None
    return start, end


def position_item(
    item_index: int,
    item: Any,
    columns: Sequence[ColumnDay],
    config: LayoutConfig,
) -> list[PositionedItem]:
    """Place one item in every visible column it intersects."""
    bounds = resolve_item_bounds(item, config)
    if bounds is None:
        return []
    item_start, item_end = bounds

    days_total = days_between(item_start, item_end) + 1
    positioned: list[PositionedItem] = []

    for column_index, column in enumerate(columns):
        if not date_ranges_overlap(column.start, column.end, item_start, item_end):
            continue

        # Column end is inclusive for the overlap test but exclusive for duration
        start = max(column.start, item_start)
        end = min(column.end + ONE_MILLISECOND, item_end)

        height = minutes_between(start, end) * config.minute_height
        top = calculate_top_offset(start, config)
        width = config.column_width - config.column_horizontal_padding * 2
        left = (
            config.lines_left_offset
            + column_index * config.column_width
            + config.column_horizontal_padding
        )

        # The time gutter overlaps the first column
        if column_index == 0:
            width = width - config.lines_left_inset
            left = left + config.lines_left_inset

        day_index = days_between(item_start, column.date) + 1
        key = "-".join(
            (
                str(item_index),
                str(column_index),
                str(day_index),
                datetime_to_iso_str(item_start),
                datetime_to_iso_str(item_end),
            )
        )

        positioned.append(
            PositionedItem(
                key=key,
                item=item,
                rect=Rect(top=top, left=left, width=width, height=height),
                day_index=day_index,
                days_total=days_total,
                column_index=column_index,
            )
        )

    return positioned


def position_items(
    items: Optional[Iterable[Any]],
    columns: Sequence[ColumnDay],
    config: LayoutConfig,
) -> list[PositionedItem]:
    if items is None:
        return []
    if not isinstance(items, Iterable) or isinstance(items, (Mapping, str, bytes)):
        logger.warning(
            "Invalid items of type [%s] supplied to timetable, expected a list",
            type(items).__name__,
        )
        return []

    positioned: list[PositionedItem] = []
    for item_index, item in enumerate(items):
        positioned.extend(position_item(item_index, item, columns, config))
    return positioned
