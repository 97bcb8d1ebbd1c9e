import time

from loghier.timestamp import TimeStamp, start_stamp


def test_explicit_values_are_kept():
    stamp = TimeStamp(42, 7)
    assert (stamp.seconds, stamp.micro_seconds) == (42, 7)


def test_milliseconds():
    assert TimeStamp(5, 123456).milliseconds() == 123
    assert TimeStamp(5, 999).milliseconds() == 0


def test_now_is_close_to_clock():
    before = int(time.time())
    stamp = TimeStamp.now()
    after = int(time.time())
    assert before <= stamp.seconds <= after
    assert 0 <= stamp.micro_seconds < 1_000_000


def test_now_is_monotonic_enough():
    first = TimeStamp.now()
    second = TimeStamp.now()
    assert first <= second


def test_ordering():
    assert TimeStamp(1, 999_999) < TimeStamp(2, 0)
    assert TimeStamp(3, 1) > TimeStamp(3, 0)


def test_start_stamp_is_fixed_and_in_past():
    assert start_stamp() is start_stamp()
    assert start_stamp() <= TimeStamp.now()