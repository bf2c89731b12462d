# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]


def load_items(path: Path) -> list[Any]:
    """
    Read timetable items from a YAML or JSON file.

    The file holds either a list of items or a mapping with an "items" list.

    Raises:
        ValueError: If the file cannot be parsed or holds no item list
    """
    try:
        data = load(path.read_text(), Loader=Loader)
    except YAMLError as e:
        raise ValueError(f"Could not parse {path}: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("items")
        if data is None:
            return []
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of items in {path}")
    return data
