import math

import pytest

from daisysynth.filters.nlfilt import NlFilt


def _configured():
    filt = NlFilt()
    filt.set_coefficients(0.4, 0.2, 0.7, 0.05, 20.0)
    return filt


def test_zero_coefficients_pass_half_the_input():
    filt = NlFilt()
    signal = [0.2, -0.4, 1.0, 0.0]
    assert filt.process_block(signal) == pytest.approx([x * 0.5 for x in signal])


def test_large_input_is_clipped():
    filt = NlFilt()
    out = filt.process_block([100.0, -100.0])
    assert out == pytest.approx([1.935125 * 0.5, -1.935125 * 0.5])


def test_set_coefficients_assigns_attributes():
    filt = NlFilt()
    filt.set_coefficients(1.0, 2.0, 3.0, 4.0, 5.0)
    assert (filt.a, filt.b, filt.d, filt.c, filt.l) == (1.0, 2.0, 3.0, 4.0, 5.0)


def test_split_blocks_match_single_block():
    signal = [math.sin(i * 0.1) for i in range(200)]
    whole = _configured().process_block(signal)
    split_filter = _configured()
    split = split_filter.process_block(signal[:73]) + split_filter.process_block(
        signal[73:]
    )
    assert split == pytest.approx(whole)


def test_reset_restores_initial_behaviour():
    signal = [math.cos(i * 0.3) for i in range(100)]
    filt = _configured()
    first = filt.process_block(signal)
    filt.reset()
    assert filt.process_block(signal) == pytest.approx(first)


def test_feedback_changes_later_output():
    filt = NlFilt()
    filt.set_coefficients(0.9, 0.0, 0.0, 0.0, 1.0)
    out = filt.process_block([1.0, 0.0, 0.0])
    assert out[0] == pytest.approx(0.5)
    assert out[1] > 0.0
    assert out[2] > 0.0


def test_extreme_lag_values_are_accepted():
    signal = [0.5] * 2000
    for lag in (-5.0, 5000.0):
        filt = NlFilt()
        filt.set_coefficients(0.3, 0.1, 0.5, 0.0, lag)
        out = filt.process_block(signal)
        assert len(out) == len(signal)
        assert all(abs(y) <= 1.935125 for y in out)