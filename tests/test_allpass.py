import pytest

from daisysynth.filters.allpass import Allpass


def make():
    return Allpass(1000.0, 100)


def test_default_rev_time():
    assert make().rev_time == 3.5


def test_freq_is_limited_above_by_buffer():
    allpass = make()
    longest = allpass.freq
    allpass.freq = 10.0
    assert allpass.freq == longest
    allpass.freq = longest / 2
    assert allpass.freq == longest / 2


def test_freq_has_lower_limit():
    allpass = Allpass(48000.0, 4800)
    allpass.freq = 0.0
    assert allpass.freq == 0.0001


def test_buffer_too_short_raises():
    with pytest.raises(ValueError):
        Allpass(1000.0, 5)


def test_silence_stays_silent():
    allpass = make()
    assert all(allpass.process(0.0) == 0.0 for _ in range(300))


def test_impulse_energy_is_preserved():
    allpass = make()
    allpass.rev_time = 0.5
    outputs = [allpass.process(1.0)] + [allpass.process(0.0) for _ in range(3000)]
    energy = sum(v * v for v in outputs)
    assert energy == pytest.approx(1.0, rel=1e-6)


def test_zero_rev_time_passes_delayed_signal():
    allpass = make()
    allpass.rev_time = 0.0
    outputs = [allpass.process(1.0)] + [allpass.process(0.0) for _ in range(200)]
    assert outputs[0] == 0.0
    assert sum(v * v for v in outputs) == pytest.approx(1.0)