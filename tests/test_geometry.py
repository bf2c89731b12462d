import logging
from dataclasses import dataclass

import pendulum

from conftest import at, make_item

from timetable.layout.config import resolve_layout_config
from timetable.layout.geometry import position_items
from timetable.layout.now_line import calculate_top_offset
from timetable.layout.range import column_days, normalize_range
from timetable.model.layout_config import LayoutConfig


def columns_for(config: LayoutConfig, start, till=None):
    date_range = normalize_range(start=start, till=till if till is not None else start)
    return column_days(date_range, config.hour_window)


def test_single_day_item(config):
    columns = columns_for(config, at(1))
    items = [make_item("2024-05-01T09:00", "2024-05-01T10:30")]
    positioned = position_items(items, columns, config)

    assert len(positioned) == 1
    rect = positioned[0].rect
    assert rect.top == 9 * 60 + 18
    assert rect.height == 90
    assert positioned[0].day_index == 1
    assert positioned[0].days_total == 1
    assert positioned[0].column_index == 0


def test_first_column_is_shifted_past_the_time_gutter(config):
    columns = columns_for(config, at(1), at(2))
    items = [
        make_item(at(1, 9), at(1, 10)),
        make_item(at(2, 9), at(2, 10)),
    ]
    first, second = position_items(items, columns, config)

    # lines_left_offset 35, padding 10, inset 15, column width 365
    assert (first.rect.left, first.rect.width) == (35 + 10 + 15, 365 - 20 - 15)
    assert (second.rect.left, second.rect.width) == (35 + 365 + 10, 365 - 20)


def test_item_spanning_midnight_is_split_per_day(config):
    columns = columns_for(config, at(1), at(2))
    positioned = position_items([make_item(at(1, 23), at(2, 1))], columns, config)

    assert len(positioned) == 2
    day1, day2 = positioned
    assert day1.rect.top == 23 * 60 + 18
    assert day1.rect.height == 60 * config.minute_height
    assert day2.rect.top == 18
    assert day2.rect.height == 60 * config.minute_height
    assert (day1.day_index, day2.day_index) == (1, 2)
    assert day1.days_total == day2.days_total == 2
    assert (day1.column_index, day2.column_index) == (0, 1)


def test_full_day_item_fills_the_column(config):
    columns = columns_for(config, at(1))
    positioned = position_items([make_item(at(1), at(2))], columns, config)

    assert positioned[0].rect.top == 18
    assert positioned[0].rect.height == 24 * 60


def test_item_ending_at_midnight_leaves_empty_card_on_next_day(config):
    columns = columns_for(config, at(1), at(2))
    positioned = position_items([make_item(at(1, 22), at(2))], columns, config)

    assert [p.rect.height for p in positioned] == [120, 0]
    assert positioned[1].rect.top == 18


def test_item_outside_hour_window_is_not_positioned():
    config = resolve_layout_config(400, from_hour=8, to_hour=18)
    columns = columns_for(config, at(1), at(3))
    items = [make_item(at(day, 6), at(day, 7, 30)) for day in (1, 2, 3)]

    assert position_items(items, columns, config) == []


def test_item_is_clipped_to_hour_window():
    config = resolve_layout_config(400, from_hour=8, to_hour=18)
    columns = columns_for(config, at(1))
    early, late = position_items(
        [make_item(at(1, 7), at(1, 9)), make_item(at(1, 17), at(1, 20))],
        columns,
        config,
    )

    assert early.rect.top == 18
    assert early.rect.height == 60
    assert late.rect.top == 9 * 60 + 18
    assert late.rect.height == 60


def test_span_metadata_counts_days_outside_the_visible_range(config):
    columns = columns_for(config, at(1))
    items = [make_item(at(29, 10, month=4), at(3, 10))]
    positioned = position_items(items, columns, config)

    assert len(positioned) == 1
    assert positioned[0].day_index == 3
    assert positioned[0].days_total == 5


def test_heights_scale_with_hour_height():
    config = resolve_layout_config(400, hour_height=30)
    columns = columns_for(config, at(1))
    positioned = position_items([make_item(at(1, 9), at(1, 10, 30))], columns, config)

    assert positioned[0].rect.top == 9 * 30 + 18
    assert positioned[0].rect.height == 45


def test_malformed_items_are_skipped(config, caplog):
    columns = columns_for(config, at(1))
    items = [
        "not a record",
        42,
        None,
        make_item(at(1, 9), None),
        make_item("garbage", at(1, 10)),
        make_item(at(1, 11), at(1, 10)),
        make_item(at(1, 9), at(1, 10), title="valid"),
    ]
    with caplog.at_level(logging.WARNING):
        positioned = position_items(items, columns, config)

    assert [p.item["title"] for p in positioned] == ["valid"]
    assert len(caplog.records) == 6


def test_non_list_items_render_nothing(config, caplog):
    columns = columns_for(config, at(1))
    assert position_items(None, columns, config) == []
    with caplog.at_level(logging.WARNING):
        assert position_items({"startDate": at(1, 9)}, columns, config) == []
    assert caplog.records


def test_custom_property_names():
    config = resolve_layout_config(400, start_property="from", end_property="to")
    columns = columns_for(config, at(1))
    positioned = position_items([{"from": at(1, 9), "to": at(1, 10)}], columns, config)

    assert len(positioned) == 1


def test_attribute_records_are_supported(config):
    @dataclass
    class Appointment:
        startDate: pendulum.DateTime
        endDate: pendulum.DateTime

    columns = columns_for(config, at(1))
    appointment = Appointment(at(1, 9), at(1, 10))
    positioned = position_items([appointment], columns, config)

    assert positioned[0].item is appointment


def test_items_are_not_mutated(config):
    columns = columns_for(config, at(1))
    item = make_item("2024-05-01T09:00", "2024-05-01T10:00")
    snapshot = dict(item)
    position_items([item], columns, config)

    assert item == snapshot


def test_keys_are_unique_for_identical_items(config):
    columns = columns_for(config, at(1), at(2))
    items = [make_item(at(1, 23), at(2, 1)), make_item(at(1, 23), at(2, 1))]
    keys = [p.key for p in position_items(items, columns, config)]

    assert len(keys) == 4
    assert len(set(keys)) == 4


def test_positioning_is_deterministic(config):
    columns = columns_for(config, at(1), at(3))
    items = [make_item(at(1, 9), at(3, 9)), make_item(at(2, 12), at(2, 13))]

    first = position_items(items, columns, config)
    assert first == position_items(items, columns, config)


def test_rectangles_stay_inside_their_column():
    config = resolve_layout_config(600, from_hour=6, to_hour=20)
    columns = columns_for(config, at(1), at(3))
    items = [
        make_item(at(1, 5), at(1, 7)),
        make_item(at(1, 19), at(2, 7)),
        make_item(at(2, 12), at(2, 12, 15)),
        make_item(at(30, 0, month=4), at(4)),
    ]
    hours = config.to_hour - config.from_hour
    grid_bottom = config.lines_top_offset + hours * config.hour_height

    for positioned in position_items(items, columns, config):
        column = columns[positioned.column_index]
        column_left = (
            config.lines_left_offset + positioned.column_index * config.column_width
        )
        rect = positioned.rect

        assert rect.top >= calculate_top_offset(column.start, config)
        assert rect.bottom <= grid_bottom
        assert column_left <= rect.left
        assert rect.right <= column_left + config.column_width
        assert positioned.days_total >= 1
