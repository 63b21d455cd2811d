import time
from datetime import timedelta

from zxtestkit.stopwatch import InstantStopwatch


def test_measure_is_non_negative():
    watch = InstantStopwatch()
    assert watch.measure() >= timedelta(0)


def test_measure_is_monotonic():
    watch = InstantStopwatch()
    first = watch.measure()
    second = watch.measure()
    assert second >= first


def test_measure_reflects_sleep():
    watch = InstantStopwatch()
    time.sleep(0.02)
    assert watch.measure() >= timedelta(milliseconds=15)


def test_independent_stopwatches():
    older = InstantStopwatch()
    time.sleep(0.01)
    newer = InstantStopwatch()
    assert older.measure() > newer.measure()