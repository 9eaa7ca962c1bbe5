from datetime import datetime

from smarttransit.services.time_utils import (
    add_minutes_to_current_time,
    format_time,
    format_time_24,
    generate_bus_arrival_times,
    minutes_to_actual_time,
    time_difference_in_minutes,
)

NOW = datetime(2024, 1, 28, 15, 5)


def test_format_time_12h():
    assert format_time(NOW) == "3:05 PM"
    assert format_time(datetime(2024, 1, 1, 0, 0)) == "12:00 AM"
    assert format_time(datetime(2024, 1, 1, 12, 30)) == "12:30 PM"


def test_format_time_24h():
    assert format_time_24(NOW) == "15:05"
    assert format_time_24(datetime(2024, 1, 1, 7, 9)) == "07:09"


def test_add_minutes_crosses_midnight():
    assert add_minutes_to_current_time(10, datetime(2024, 1, 1, 23, 55)) == "12:05 AM"
    assert minutes_to_actual_time(11.25, NOW) == "3:16 PM"


def test_generate_arrival_times():
    assert generate_bus_arrival_times([0, 8, 18], NOW) == ["3:05 PM", "3:13 PM", "3:23 PM"]


def test_time_difference_is_absolute():
    assert time_difference_in_minutes("10:30", "11:15") == 45
    assert time_difference_in_minutes("11:15", "10:30") == 45
