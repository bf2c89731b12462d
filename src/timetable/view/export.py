# SPDX-License-Identifier: MIT

from dataclasses import asdict
from typing import Any, Optional

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from timetable.layout.geometry import read_item_property
from timetable.model.layout import Layout
from timetable.model.now_line import NowLine
from timetable.time import datetime_to_iso_str


def _plain_title(title: Any) -> Optional[str]:
    return None if title is None else str(title)


def layout_to_dict(
    layout: Layout,
    title_property: str = "title",
    now_line: Optional[NowLine] = None,
) -> dict[str, Any]:
    """Flatten a layout into plain YAML/JSON friendly values."""
    data: dict[str, Any] = {
        "columns": [
            {
                "date": column.date.isoformat(),
                "start": datetime_to_iso_str(column.start),
                "end": datetime_to_iso_str(column.end),
            }
            for column in layout.columns
        ],
        "headers": [asdict(header) for header in layout.headers],
        "items": [
            {
                "key": positioned.key,
                "title": _plain_title(
                    read_item_property(positioned.item, title_property)
                ),
                "column_index": positioned.column_index,
                "day_index": positioned.day_index,
                "days_total": positioned.days_total,
                "rect": asdict(positioned.rect),
            }
            for positioned in layout.items
        ],
        "axis": [
            {
                "hour": row.hour,
                "label": row.label,
                "top": row.top,
                "height": row.height,
                "is_cap": row.is_cap,
            }
            for row in layout.axis
        ],
    }
    if now_line is not None:
        data["now_line"] = asdict(now_line)
    return data


def layout_to_yaml(
    layout: Layout,
    title_property: str = "title",
    now_line: Optional[NowLine] = None,
) -> str:
    return dump(
        layout_to_dict(layout, title_property, now_line),
        Dumper=Dumper,
        sort_keys=False,
    )
