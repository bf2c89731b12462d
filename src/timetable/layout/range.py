# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from timetable.model.column_day import ColumnDay
from timetable.model.date_range import DateRange, HourWindow
from timetable.time import InstantParseError, days_between, parse_instant

logger = logging.getLogger(__name__)


def normalize_range(
    date: Any = None,
    start: Any = None,
    till: Any = None,
) -> Optional[DateRange]:
    """
    Build the visible DateRange from either a single date or a start/till pair.

    A single date is shorthand for a range starting and ending on it. Missing,
    unparseable or reversed bounds are reported and yield None.
    """
    if date is not None:
        start = till = date

    if start is None or till is None:
        logger.warning(
            "Timetable range is incomplete (from=%r, till=%r), rendering no columns",
            start,
            till,
        )
        return None

    try:
        start_instant = parse_instant(start)
        till_instant = parse_instant(till)
    except InstantParseError as e:
        logger.warning("Invalid timetable range bound: %s", e)
        return None

    if start_instant > till_instant:
        logger.warning(
            "Timetable range is reversed (from=%s, till=%s), rendering no columns",
            start_instant,
            till_instant,
        )
        return None

    return DateRange(start_instant, till_instant)


def column_days(
    date_range: Optional[DateRange], hour_window: HourWindow
) -> list[ColumnDay]:
    """One ColumnDay per calendar day of the range, clipped to the hour window."""
    if date_range is None:
        return []

    if not hour_window.is_valid():
        logger.warning(
            "Invalid hour window %s-%s, expected 0 <= from_hour < to_hour <= 24",
            hour_window.from_hour,
            hour_window.to_hour,
        )
        return []

    first_day = date_range.start.start_of("day")
    amount_of_days = days_between(date_range.start, date_range.till) + 1

    days: list[ColumnDay] = []
    for offset in range(amount_of_days):
        day = first_day.add(days=offset)
        days.append(
            ColumnDay(
                date=day.date(),
                start=day.set(hour=hour_window.from_hour),
                end=day.set(
                    hour=hour_window.to_hour - 1,
                    minute=59,
                    second=59,
                    microsecond=999000,
                ),
            )
        )
    return days
