"""Tests for elapsed time formatting."""

import pytest

from sims_util.core.elapsed import PER_DAY, PER_HOUR, ElapsedTime, format_elapsed
from sims_util.core.errors import InvalidValueError


@pytest.mark.parametrize(
    "millis, expected",
    [
        (0, "0:00:00.000"),
        (1, "0:00:00.001"),
        (10, "0:00:00.010"),
        (100, "0:00:00.100"),
        (1000, "0:00:01.000"),
        (10000, "0:00:10.000"),
        (60000, "0:01:00.000"),
        (600000, "0:10:00.000"),
        (3600000, "1:00:00.000"),
        (36000000, "10:00:00.000"),
        (45296789, "12:34:56.789"),
    ],
)
def test_format_elapsed(millis, expected):
    assert format_elapsed(millis) == expected


def test_hours_do_not_wrap_at_a_day():
    assert format_elapsed(PER_DAY + PER_HOUR) == "25:00:00.000"


def test_components():
    elapsed = ElapsedTime.from_millis(45296789)
    assert (elapsed.hours, elapsed.minutes, elapsed.seconds, elapsed.milliseconds) == (
        12, 34, 56, 789,
    )


def test_negative_interval_rejected():
    with pytest.raises(InvalidValueError, match="negative"):
        format_elapsed(-1)
