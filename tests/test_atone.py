import pytest

from daisysynth.filters.atone import ATone


def test_default_freq():
    assert ATone(48000.0).freq == 1000.0


def test_freq_round_trip():
    atone = ATone(48000.0)
    atone.freq = 300.0
    assert atone.freq == 300.0


def test_initial_coefficient_halves_first_sample():
    atone = ATone(48000.0)
    assert atone.process(1.0) == pytest.approx(0.5)


def test_dc_is_blocked():
    atone = ATone(48000.0)
    atone.freq = 1000.0
    out = 1.0
    for _ in range(5000):
        out = atone.process(1.0)
    assert out == pytest.approx(0.0, abs=1e-6)


def test_silence_stays_silent():
    atone = ATone(48000.0)
    atone.freq = 200.0
    assert all(atone.process(0.0) == 0.0 for _ in range(50))


def test_step_response_decays():
    atone = ATone(48000.0)
    atone.freq = 500.0
    outputs = [atone.process(1.0) for _ in range(200)]
    assert all(a > b for a, b in zip(outputs, outputs[1:]))
    assert outputs[0] < 1.0