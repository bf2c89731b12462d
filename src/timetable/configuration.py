# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import platformdirs

APP_NAME = "timetable"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    width: Optional[float]
    time_width: float
    hour_height: float
    column_width: Optional[float]
    column_header_height: Optional[float]
    lines_top_offset: float
    lines_left_inset: float
    column_horizontal_padding: float
    time_font_size: float
    from_hour: int
    to_hour: int
    start_property: str
    end_property: str
    title_property: str
    color_property: str
    pixels_per_column_char: float
    pixels_per_row_line: float
    show_now_line: bool


def get_default_configuration() -> Configuration:
    return {
        "width": None,
        "time_width": 50,
        "hour_height": 60,
        "column_width": None,
        "column_header_height": None,
        "lines_top_offset": 18,
        "lines_left_inset": 15,
        "column_horizontal_padding": 10,
        "time_font_size": 14,
        "from_hour": 0,
        "to_hour": 24,
        "start_property": "startDate",
        "end_property": "endDate",
        "title_property": "title",
        "color_property": "color",
        "pixels_per_column_char": 8,
        "pixels_per_row_line": 30,
        "show_now_line": True,
    }
