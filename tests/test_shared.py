"""Tests for time formatting."""

import pytest

from stopwatch_tui.shared import TimeParts, splitTime, formatTime, formatDelta


@pytest.mark.parametrize(
    "ms, expected",
    [
        (0, "00:00:00.00"),
        (9, "00:00:00.00"),
        (10, "00:00:00.01"),
        (1500, "00:00:01.50"),
        (59_999, "00:00:59.99"),
        (60_000, "00:01:00.00"),
        (3_723_456, "01:02:03.45"),
        (100 * 3600 * 1000, "100:00:00.00"),
    ],
)
def test_format_time(ms, expected):
    assert formatTime(ms) == expected


def test_split_time():
    assert splitTime(3_723_456) == TimeParts(h="01", m="02", s="03", cs="45")


def test_format_delta():
    assert formatDelta(2200) == "+00:00:02.20"
