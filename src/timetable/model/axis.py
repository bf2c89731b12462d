# SPDX-License-Identifier: MIT

from dataclasses import dataclass


@dataclass(frozen=True)
class AxisLine:
    column_index: int
    left: float
    width: float
    border_left: bool
    border_right: bool


@dataclass(frozen=True)
class AxisRow:
    hour: int
    label: str
    top: float
    height: float
    is_cap: bool
    lines: tuple[AxisLine, ...]
