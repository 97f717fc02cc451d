import pytest

from daisysynth.filters.comb import Comb

SR = 1024.0
SIZE = 128


def impulse_response(comb, length):
    return [comb.process(1.0)] + [comb.process(0.0) for _ in range(length - 1)]


def test_default_rev_time():
    assert Comb(SR, SIZE).rev_time == 3.5


def test_period_round_trip_and_limit():
    comb = Comb(SR, SIZE)
    longest = comb.period
    comb.period = 0.0625
    assert comb.period == 0.0625
    comb.period = 100.0
    assert comb.period == longest


def test_nonpositive_period_and_freq_ignored():
    comb = Comb(SR, SIZE)
    comb.period = 0.0625
    comb.period = -1.0
    comb.freq = 0.0
    assert comb.period == 0.0625


def test_freq_sets_period():
    comb = Comb(SR, SIZE)
    comb.freq = 16.0
    assert comb.period == 0.0625
    assert comb.freq == 16.0


def test_buffer_too_short_raises():
    with pytest.raises(ValueError):
        Comb(SR, 4)


def test_first_echo_arrives_after_period():
    comb = Comb(SR, SIZE)
    comb.period = 0.0625
    outputs = impulse_response(comb, 200)
    assert all(v == 0.0 for v in outputs[:64])
    assert outputs[64] == 1.0


def test_later_echo_is_attenuated():
    comb = Comb(SR, SIZE)
    comb.period = 0.0625
    outputs = impulse_response(comb, 200)
    assert 0.0 < outputs[128] < 1.0


def test_zero_rev_time_removes_feedback():
    comb = Comb(SR, SIZE)
    comb.period = 0.0625
    comb.rev_time = 0.0
    outputs = impulse_response(comb, 200)
    assert outputs[64] == 1.0
    assert outputs[128] == 0.0