import math

import pytest

from daisysynth.synthesis.oscillator import Oscillator, Waveform

SR = 48000.0


def test_defaults():
    osc = Oscillator(SR)
    assert osc.freq == 100.0
    assert osc.amp == 0.5
    assert osc.waveform is Waveform.SIN


def test_sine_starts_at_zero_and_is_bounded():
    osc = Oscillator(SR)
    assert osc.process() == 0.0
    out = [osc.process() for _ in range(1000)]
    assert max(abs(v) for v in out) <= osc.amp + 1e-12


def test_phase_add_quarter_turn_gives_peak():
    osc = Oscillator(SR)
    osc.phase_add(0.25)
    assert osc.process() == pytest.approx(osc.amp)


def test_reset_restores_start():
    osc = Oscillator(SR)
    first = [osc.process() for _ in range(10)]
    osc.reset()
    assert [osc.process() for _ in range(10)] == first


def test_saw_is_inverted_ramp():
    saw = Oscillator(SR)
    ramp = Oscillator(SR)
    saw.waveform = Waveform.SAW
    ramp.waveform = Waveform.RAMP
    for _ in range(200):
        assert saw.process() == pytest.approx(-ramp.process())


def test_square_levels():
    osc = Oscillator(SR)
    osc.waveform = Waveform.SQUARE
    values = {round(osc.process(), 9) for _ in range(1000)}
    assert values == {osc.amp, -osc.amp}


def test_invalid_waveform_falls_back_to_sine():
    osc = Oscillator(SR)
    osc.waveform = Waveform.TRI
    osc.waveform = 42
    assert osc.waveform is Waveform.SIN


@pytest.mark.parametrize(
    "wf", [Waveform.POLYBLEP_TRI, Waveform.POLYBLEP_SAW, Waveform.POLYBLEP_SQUARE]
)
def test_polyblep_waveforms_bounded(wf):
    osc = Oscillator(SR)
    osc.waveform = wf
    osc.freq = 440.0
    osc.amp = 1.0
    out = [osc.process() for _ in range(2000)]
    assert max(abs(v) for v in out) < 1.5
    assert max(out) > min(out)


def test_rising_and_falling():
    osc = Oscillator(SR)
    assert osc.is_rising and not osc.is_falling
    osc.reset(math.pi)
    assert osc.is_falling and not osc.is_rising


def test_zero_frequency_holds_value():
    osc = Oscillator(SR)
    osc.freq = 0.0
    osc.reset(1.0)
    out = {osc.process() for _ in range(50)}
    assert len(out) == 1