import pytest

from daisysynth.filters.tone import Tone


def test_default_freq():
    assert Tone(48000.0).freq == 100.0


def test_freq_round_trip():
    tone = Tone(48000.0)
    tone.freq = 2500.0
    assert tone.freq == 2500.0


def test_initial_coefficients_halve_first_sample():
    tone = Tone(48000.0)
    assert tone.process(1.0) == pytest.approx(0.5)


def test_silence_stays_silent():
    tone = Tone(48000.0)
    tone.freq = 1000.0
    assert all(tone.process(0.0) == 0.0 for _ in range(50))


def test_dc_passes_through():
    tone = Tone(48000.0)
    tone.freq = 1000.0
    out = 0.0
    for _ in range(5000):
        out = tone.process(0.5)
    assert out == pytest.approx(0.5, abs=1e-6)


def test_step_response_rises_monotonically():
    tone = Tone(48000.0)
    tone.freq = 500.0
    outputs = [tone.process(1.0) for _ in range(200)]
    assert all(a < b for a, b in zip(outputs, outputs[1:]))
    assert outputs[-1] < 1.0


def test_higher_cutoff_rises_faster():
    slow, fast = Tone(48000.0), Tone(48000.0)
    slow.freq = 100.0
    fast.freq = 5000.0
    assert fast.process(1.0) > slow.process(1.0)