# SPDX-License-Identifier: MIT

import datetime
from typing import Any

import pendulum

ONE_MILLISECOND = pendulum.duration(microseconds=1000)


class InstantParseError(ValueError):
    """Raised when a value cannot be interpreted as an instant."""

    def __init__(self, value: Any, reason: str = "") -> None:
        self.value = value
        message = f"Expected ISO string, date or datetime, got {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


def now_local() -> pendulum.DateTime:
    return pendulum.now("local").naive()


def parse_instant(value: Any) -> pendulum.DateTime:
    """
    Convert a loosely typed time bound into a naive wall-clock DateTime.

    Accepts pendulum/stdlib datetimes, dates (midnight) and ISO-8601 strings.
    Offsets carried by the input are dropped; every instant is treated as
    already-local.

    Raises:
        InstantParseError: If the value is not date-like
    """
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value).naive()
    if isinstance(value, datetime.date):
        return pendulum.naive(value.year, value.month, value.day)
    if not isinstance(value, str) or value.strip() == "":
        raise InstantParseError(value)

    try:
        parsed = pendulum.parse(value.strip())
    except ValueError as e:
        raise InstantParseError(value, str(e)) from e

    if isinstance(parsed, datetime.datetime):
        return pendulum.instance(parsed).naive()
    if isinstance(parsed, datetime.date):
        return pendulum.naive(parsed.year, parsed.month, parsed.day)
    raise InstantParseError(value, f"parsed as {type(parsed).__name__}")


def days_between(a: datetime.date, b: datetime.date) -> int:
    """Calendar-day distance between two dates or datetimes, ignoring time of day."""
    return abs(b.toordinal() - a.toordinal())


def minutes_between(a: pendulum.DateTime, b: pendulum.DateTime) -> int:
    """Whole minutes between two instants, floored."""
    return a.diff(b).in_minutes()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def date_to_header_str(date: datetime.date) -> str:
    return date.strftime("%d.%m")


def datetime_to_display_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD ddd")


def hour_to_label(hour: int) -> str:
    """Format an axis hour as HH:00, showing hour 24 as 00:00."""
    return f"{hour % 24:02d}:00"
