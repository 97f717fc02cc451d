import random

import pytest

from daisysynth.filters.biquad import Biquad


def test_defaults():
    biquad = Biquad(48000.0)
    assert biquad.cutoff == 500.0
    assert biquad.res == 0.7


def test_setters_round_trip():
    biquad = Biquad(48000.0)
    biquad.cutoff = 1200.0
    biquad.res = 0.4
    assert (biquad.cutoff, biquad.res) == (1200.0, 0.4)


def test_silence_stays_silent():
    biquad = Biquad(48000.0)
    assert all(biquad.process(0.0) == 0.0 for _ in range(50))


def test_linearity():
    rng = random.Random(3)
    a, b = Biquad(48000.0), Biquad(48000.0)
    for _ in range(300):
        x = rng.uniform(-1.0, 1.0)
        assert b.process(2.0 * x) == pytest.approx(2.0 * a.process(x), abs=1e-9)


def test_impulse_response_decays():
    biquad = Biquad(48000.0)
    first = biquad.process(1.0)
    assert first != 0.0
    tail = [biquad.process(0.0) for _ in range(20000)]
    assert abs(tail[-1]) < 1e-6


def test_cutoff_changes_response():
    a, b = Biquad(48000.0), Biquad(48000.0)
    b.cutoff = 5000.0
    assert a.process(1.0) != pytest.approx(b.process(1.0))