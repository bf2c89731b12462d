# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class NowLine:
    top: float
    left: float
    width: float
    # Visible column holding the current day, None when today is not visible
    column_index: Optional[int]
