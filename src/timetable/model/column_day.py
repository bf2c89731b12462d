# SPDX-License-Identifier: MIT

from dataclasses import dataclass

import pendulum


@dataclass(frozen=True)
class ColumnDay:
    """One visible calendar day, clipped to the hour window."""

    date: pendulum.Date
    start: pendulum.DateTime
    end: pendulum.DateTime
