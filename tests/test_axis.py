from conftest import at

from timetable.layout.axis import build_time_axis
from timetable.layout.config import resolve_layout_config
from timetable.layout.range import column_days, normalize_range


def test_full_day_axis_has_closing_row(config):
    columns = column_days(normalize_range(date=at(1)), config.hour_window)
    rows = build_time_axis(columns, config)

    assert [row.hour for row in rows] == list(range(25))
    assert rows[0].label == "00:00"
    assert rows[9].label == "09:00"
    assert rows[-1].label == "00:00"
    assert [row.is_cap for row in rows] == [False] * 24 + [True]


def test_row_heights_and_offsets(config):
    columns = column_days(normalize_range(date=at(1)), config.hour_window)
    rows = build_time_axis(columns, config)

    assert all(row.height == 60 for row in rows[:-1])
    assert rows[-1].height == 18 + 14 / 2
    assert rows[9].top == 9 * 60 + 18


def test_partial_window():
    config = resolve_layout_config(400, from_hour=8, to_hour=18, time_font_size=20)
    columns = column_days(normalize_range(date=at(1)), config.hour_window)
    rows = build_time_axis(columns, config)

    assert [row.hour for row in rows] == list(range(8, 19))
    assert rows[0].top == 18
    assert rows[-1].label == "18:00"
    assert rows[-1].height == 18 + 10


def test_borders_per_column(config):
    columns = column_days(
        normalize_range(start=at(1), till=at(3)), config.hour_window
    )
    rows = build_time_axis(columns, config)
    regular, cap = rows[0], rows[-1]

    assert [line.left for line in regular.lines] == [35, 35 + 365, 35 + 2 * 365]
    assert all(line.width == 365 for line in regular.lines)
    assert [line.border_left for line in regular.lines] == [True, True, True]
    assert [line.border_right for line in regular.lines] == [False, False, True]
    assert not any(line.border_left or line.border_right for line in cap.lines)


def test_axis_without_columns_still_labels_hours(config):
    rows = build_time_axis([], config)

    assert len(rows) == 25
    assert all(row.lines == () for row in rows)
