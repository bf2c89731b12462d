from conftest import at

from timetable.layout.config import resolve_layout_config
from timetable.layout.now_line import calculate_top_offset, now_line
from timetable.layout.range import column_days, normalize_range


def test_top_offset_maps_minutes_to_pixels(config):
    assert calculate_top_offset(at(1, 9), config) == 558
    assert calculate_top_offset(at(1, 0), config) == 18
    assert calculate_top_offset(at(1, 23, 59), config) == 23 * 60 + 59 + 18


def test_top_offset_clamps_before_from_hour():
    config = resolve_layout_config(400, from_hour=8, to_hour=18)

    assert calculate_top_offset(at(1, 0), config) == 18
    assert calculate_top_offset(at(1, 7, 30), config) == 18
    assert calculate_top_offset(at(1, 8), config) == 18
    assert calculate_top_offset(at(1, 8, 30), config) == 48


def test_top_offset_is_monotonic_within_a_day():
    config = resolve_layout_config(400, from_hour=6, to_hour=22, hour_height=45)
    times = [at(1, hour, minute) for hour in range(24) for minute in (0, 17, 45)]
    offsets = [calculate_top_offset(time, config) for time in times]

    assert offsets == sorted(offsets)


def test_now_line_spans_all_columns(config):
    columns = column_days(normalize_range(start=at(1), till=at(3)), config.hour_window)
    line = now_line(columns, config, at(2, 10, 15))

    assert line.top == 10 * 60 + 15 + 18
    assert line.left == 35
    assert line.width == 365 * 3
    assert line.column_index == 1


def test_now_line_outside_visible_days(config):
    columns = column_days(normalize_range(date=at(1)), config.hour_window)
    line = now_line(columns, config, at(5, 10))

    assert line.column_index is None
    assert line.width == 365
