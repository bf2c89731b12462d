# SPDX-License-Identifier: MIT

import re
from typing import Any, Optional

import pendulum
import typer

from timetable.time import InstantParseError, parse_instant


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if date_param is None:
        return None

    date = str(date_param).strip()

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", date):
        try:
            return parse_instant(date)
        except InstantParseError as e:
            raise typer.BadParameter(str(e))

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return pendulum.today().add(days=int(date)).naive()

    if date == "today" or date == "t":
        return pendulum.today().naive()
    if date == "yesterday" or date == "y":
        return pendulum.yesterday().naive()
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow().naive()
    raise typer.BadParameter("Incorrect date format")


def validate_hour_window(from_hour: Any, to_hour: Any) -> None:
    """
    Raises:
        typer.BadParameter: If an hour is not 0-24 or the window is empty or
            reversed
    """
    for name, hour in (("from_hour", from_hour), ("to_hour", to_hour)):
        if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 24:
            raise typer.BadParameter(
                f"{name} must be an hour from 0 to 24, got {hour!r}"
            )
    if from_hour >= to_hour:
        raise typer.BadParameter(
            f"From hour must be before to hour, got {from_hour} and {to_hour}"
        )


def validate_positive(name: str, value: Any) -> float:
    """
    Raises:
        typer.BadParameter: If the setting is not a number above zero
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise typer.BadParameter(f"{name} must be a number above 0, got {value!r}")
    return value
