# SPDX-License-Identifier: MIT

from typing import Optional

from timetable.model.layout_config import LayoutConfig

DEFAULT_TIME_WIDTH = 50
DEFAULT_HOUR_HEIGHT = 60
DEFAULT_LINES_TOP_OFFSET = 18
DEFAULT_LINES_LEFT_INSET = 15
DEFAULT_COLUMN_HORIZONTAL_PADDING = 10
DEFAULT_TIME_FONT_SIZE = 14
DEFAULT_FROM_HOUR = 0
DEFAULT_TO_HOUR = 24
DEFAULT_START_PROPERTY = "startDate"
DEFAULT_END_PROPERTY = "endDate"


def resolve_layout_config(
    surface_width: float,
    width: Optional[float] = None,
    time_width: Optional[float] = None,
    hour_height: Optional[float] = None,
    column_width: Optional[float] = None,
    column_header_height: Optional[float] = None,
    lines_top_offset: Optional[float] = None,
    lines_left_inset: Optional[float] = None,
    column_horizontal_padding: Optional[float] = None,
    time_font_size: Optional[float] = None,
    from_hour: Optional[int] = None,
    to_hour: Optional[int] = None,
    start_property: Optional[str] = None,
    end_property: Optional[str] = None,
) -> LayoutConfig:
    """
    Fill every unset layout option with its default.

    Options left as None fall back to their defaults; explicit values, zero
    included, are kept as given. Derived defaults are computed from the
    resolved values they depend on.

    Args:
        surface_width: Width of the host surface, used when width is not set
        width: Overall pixel width
        time_width: Width of the hour-label gutter
        hour_height: Pixels per hour
        column_width: Pixel width of one day column
        column_header_height: Height of the column header row
        lines_top_offset: Vertical start of the grid lines
        lines_left_inset: How far lines reach left into the time gutter
        column_horizontal_padding: Inset of cards within their column
        time_font_size: Font size of hour labels, sizes the closing row
        from_hour: First visible hour
        to_hour: Hour closing the visible window
        start_property: Item field holding the start
        end_property: Item field holding the end

    Returns:
        The resolved LayoutConfig
    """
    width = surface_width if width is None else width
    time_width = DEFAULT_TIME_WIDTH if time_width is None else time_width
    hour_height = DEFAULT_HOUR_HEIGHT if hour_height is None else hour_height
    lines_left_inset = (
        DEFAULT_LINES_LEFT_INSET if lines_left_inset is None else lines_left_inset
    )

    if column_width is None:
        column_width = width - (time_width - lines_left_inset)
    if column_header_height is None:
        column_header_height = hour_height / 2

    return LayoutConfig(
        width=width,
        time_width=time_width,
        column_width=column_width,
        column_header_height=column_header_height,
        hour_height=hour_height,
        lines_top_offset=(
            DEFAULT_LINES_TOP_OFFSET if lines_top_offset is None else lines_top_offset
        ),
        lines_left_inset=lines_left_inset,
        column_horizontal_padding=(
            DEFAULT_COLUMN_HORIZONTAL_PADDING
            if column_horizontal_padding is None
            else column_horizontal_padding
        ),
        time_font_size=(
            DEFAULT_TIME_FONT_SIZE if time_font_size is None else time_font_size
        ),
        from_hour=DEFAULT_FROM_HOUR if from_hour is None else from_hour,
        to_hour=DEFAULT_TO_HOUR if to_hour is None else to_hour,
        start_property=start_property or DEFAULT_START_PROPERTY,
        end_property=end_property or DEFAULT_END_PROPERTY,
    )
