import math

from chain_client.progress import SYNC_BUFFER_SECONDS, calc_progress

START = 1_500_000_000.0


def _clock(value):
    return lambda: value


def test_buffer_is_forty_minutes():
    assert SYNC_BUFFER_SECONDS == 2400


def test_halfway():
    now = START + SYNC_BUFFER_SECONDS + 1000
    assert calc_progress(START, START + 500, now=_clock(now)) == 0.5


def test_capped_at_one():
    now = START + SYNC_BUFFER_SECONDS + 1000
    assert calc_progress(START, now, now=_clock(now)) == 1.0


def test_negative_when_tip_precedes_start():
    now = START + SYNC_BUFFER_SECONDS + 1000
    assert calc_progress(START, START - 100, now=_clock(now)) == -0.1


def test_zero_over_zero_is_nan():
    now = START + SYNC_BUFFER_SECONDS
    assert math.isnan(calc_progress(START, START, now=_clock(now)))


def test_positive_over_zero_clamps_to_one():
    now = START + SYNC_BUFFER_SECONDS
    assert calc_progress(START, START + 10, now=_clock(now)) == 1.0


def test_negative_over_zero_is_negative_infinity():
    now = START + SYNC_BUFFER_SECONDS
    assert calc_progress(START, START - 10, now=_clock(now)) == -math.inf


def test_recent_start_gives_negative_ratio():
    now = START + 1400
    assert calc_progress(START, START + 100, now=_clock(now)) == -0.1


def test_uses_wall_clock_by_default(monkeypatch):
    monkeypatch.setattr("chain_client.clock.time.time", lambda: START + SYNC_BUFFER_SECONDS + 200)
    assert calc_progress(START, START + 50) == 0.25
