# SPDX-License-Identifier: MIT

# Color constants for the terminal grid
GRID_COLOR = "bright_black"
TIME_LABEL_COLOR = "dim"
HEADER_COLOR = "bold"
NOW_LINE_COLOR = "bright_red"
CARD_TEXT_COLOR = "black"

CARD_COLORS = [
    "cyan",
    "green",
    "yellow",
    "magenta",
    "blue",
    "bright_cyan",
    "bright_green",
    "bright_yellow",
    "bright_magenta",
    "dark_orange",
    "spring_green",
    "gold",
]


def color_for_index(index: int) -> str:
    """Return a card color from the Rich palette, cycling by item position.

    These colors are chosen for good visibility behind black card text.
    """
    return CARD_COLORS[index % len(CARD_COLORS)]
