import time

import pytest

from ens_pricing.domain.time.duration import Duration
from ens_pricing.domain.time.timestamp import (
    Timestamp,
    TimestampMs,
    add_seconds,
    build_timestamp,
    build_timestamp_ms,
    ms_to_seconds,
    now,
    now_ms,
    seconds_between,
    seconds_to_ms,
    subtract_seconds,
)
from ens_pricing.errors import InvalidNumber


def test_ms_to_seconds_returns_zero_below_one_second():
    for test_ms in [0, 1, 100, 200, 300, 400, 500, 700, 800, 900, 999]:
        assert ms_to_seconds(build_timestamp_ms(test_ms)).time == 0


def test_ms_to_seconds_returns_one_between_1000_and_1999():
    for test_ms in [1000, 1001, 1100, 1900, 1999]:
        assert ms_to_seconds(build_timestamp_ms(test_ms)).time == 1


def test_ms_to_seconds_truncates_toward_zero_before_epoch():
    assert ms_to_seconds(TimestampMs(-1)).time == 0
    assert ms_to_seconds(TimestampMs(-999)).time == 0
    assert ms_to_seconds(TimestampMs(-1000)).time == -1
    assert ms_to_seconds(TimestampMs(-1999)).time == -1


def test_seconds_to_ms_is_exact():
    assert seconds_to_ms(Timestamp(0)) == TimestampMs(0)
    assert seconds_to_ms(Timestamp(-5)) == TimestampMs(-5000)
    assert seconds_to_ms(Timestamp(32503680000)) == TimestampMs(32503680000000)


def test_build_timestamp_normalizes_inputs():
    assert build_timestamp("-5") == Timestamp(-5)
    assert build_timestamp(1_700_000_000) == Timestamp(1_700_000_000)
    assert build_timestamp_ms("1500") == TimestampMs(1500)


@pytest.mark.parametrize("value", ["1.2", "soon", 0.5])
def test_build_timestamp_rejects_malformed_input(value):
    with pytest.raises(InvalidNumber):
        build_timestamp(value)


def test_add_and_subtract_seconds():
    timestamp = Timestamp(1000)
    assert add_seconds(timestamp, Duration(500)) == Timestamp(1500)
    assert subtract_seconds(timestamp, Duration(1500)) == Timestamp(-500)
    assert subtract_seconds(add_seconds(timestamp, Duration(42)), Duration(42)) == timestamp


def test_seconds_between_is_signed():
    assert seconds_between(Timestamp(10), Timestamp(25)) == 15
    assert seconds_between(Timestamp(25), Timestamp(10)) == -15


def test_timestamps_are_ordered():
    assert Timestamp(1) < Timestamp(2)
    assert Timestamp(2) >= Timestamp(2)
    assert sorted([Timestamp(3), Timestamp(-1), Timestamp(2)]) == [Timestamp(-1), Timestamp(2), Timestamp(3)]


def test_now_reads_system_clock():
    before = int(time.time())
    current = now()
    after = int(time.time())

    assert before <= current.time <= after
    assert abs(now_ms().time_ms - current.time * 1000) < 5_000
