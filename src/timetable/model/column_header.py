# SPDX-License-Identifier: MIT

from dataclasses import dataclass


@dataclass(frozen=True)
class ColumnHeader:
    column_index: int
    label: str
    left: float
    width: float
    height: float
