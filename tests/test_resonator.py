import math

import pytest

from daisysynth.physical.resonator import FilterMode, Resonator, ResonatorSvf


def _impulse_response(resonator, amplitude, length=64):
    out = [resonator.process(amplitude)]
    out.extend(resonator.process(0.0) for _ in range(length - 1))
    return out


@pytest.mark.parametrize(
    "mode", [FilterMode.BAND_PASS_NORMALIZED, FilterMode.HIGH_PASS]
)
def test_non_low_pass_modes_use_band_output(mode):
    band = ResonatorSvf(1).process([0.1], [1.0], [1.0], 1.0, FilterMode.BAND_PASS)
    other = ResonatorSvf(1).process([0.1], [1.0], [1.0], 1.0, mode)
    assert other == pytest.approx(band)


def test_svf_silence_gives_silence():
    svf = ResonatorSvf(4)
    outputs = [svf.process([0.1] * 4, [2.0] * 4, [1.0] * 4, 0.0) for _ in range(10)]
    assert outputs == [0.0] * 10


def test_svf_zero_gain_gives_zero():
    svf = ResonatorSvf(2)
    assert svf.process([0.1, 0.2], [1.0, 1.0], [0.0, 0.0], 1.0) == 0.0


def test_svf_wrong_length_raises():
    svf = ResonatorSvf(4)
    with pytest.raises(ValueError):
        svf.process([0.1], [1.0], [1.0], 1.0)


def test_svf_invalid_batch_size():
    with pytest.raises(ValueError):
        ResonatorSvf(0)


def test_svf_reset_restores_initial_response():
    svf = ResonatorSvf(1)
    first = [svf.process([0.05], [3.0], [1.0], x) for x in (1.0, 0.0, 0.0)]
    svf.reset()
    second = [svf.process([0.05], [3.0], [1.0], x) for x in (1.0, 0.0, 0.0)]
    assert first == second


def test_svf_low_and_band_differ():
    low = ResonatorSvf(1).process([0.1], [1.0], [1.0], 1.0, FilterMode.LOW_PASS)
    band = ResonatorSvf(1).process([0.1], [1.0], [1.0], 1.0, FilterMode.BAND_PASS)
    assert low != pytest.approx(band)


def test_resonator_silence():
    res = Resonator(0.015, 24, 48000.0)
    assert [res.process(0.0) for _ in range(20)] == [0.0] * 20


def test_resonator_is_linear():
    a = _impulse_response(Resonator(0.015, 24, 48000.0), 1.0)
    b = _impulse_response(Resonator(0.015, 24, 48000.0), 2.0)
    assert any(x != 0.0 for x in a)
    assert b == pytest.approx([2.0 * x for x in a])


def test_resonator_output_is_finite():
    out = _impulse_response(Resonator(0.0, 24, 48000.0), 1.0, 500)
    assert [x for x in out if not math.isfinite(x)] == []
    assert max(abs(x) for x in out) > 0.0


def test_position_quarter_cancels_amplitudes():
    near_zero = _impulse_response(Resonator(0.25, 24, 48000.0), 1.0)
    full = _impulse_response(Resonator(0.0, 24, 48000.0), 1.0)
    assert max(abs(x) for x in near_zero) < 1e-12 * max(abs(x) for x in full) + 1e-12


def test_partial_batch_is_silent():
    res = Resonator(0.0, 3, 48000.0)
    assert _impulse_response(res, 1.0, 10) == [0.0] * 10


def test_parameters_clamp():
    res = Resonator(0.0, 24, 48000.0)
    res.structure = 2.0
    res.brightness = -1.0
    res.damping = 5.0
    assert (res.structure, res.brightness, res.damping) == (1.0, 0.0, 1.0)


def test_freq_round_trip():
    res = Resonator(0.0, 24, 48000.0)
    res.freq = 220.0
    assert res.freq == pytest.approx(220.0)