# SPDX-License-Identifier: MIT

from dataclasses import dataclass

import pendulum


@dataclass(frozen=True)
class DateRange:
    start: pendulum.DateTime
    till: pendulum.DateTime


@dataclass(frozen=True)
class HourWindow:
    from_hour: int = 0
    to_hour: int = 24

    def is_valid(self) -> bool:
        return 0 <= self.from_hour < self.to_hour <= 24
