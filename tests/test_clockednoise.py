import random

import pytest

from daisysynth.noise.clockednoise import ClockedNoise

SR = 48000.0


def test_freq_round_trip():
    noise = ClockedNoise(SR, random.Random(1))
    noise.freq = 1000.0
    assert noise.freq == pytest.approx(1000.0)


def test_freq_is_clamped():
    noise = ClockedNoise(SR, random.Random(1))
    noise.freq = 1.0e9
    assert noise.freq == pytest.approx(SR)
    noise.freq = -5.0
    assert noise.freq == 0.0


def test_zero_frequency_is_silent():
    noise = ClockedNoise(SR, random.Random(3))
    noise.freq = 0.0
    assert all(noise.process() == 0.0 for _ in range(100))


def test_full_rate_passes_raw_noise():
    noise = ClockedNoise(SR, random.Random(7))
    noise.freq = SR
    reference = random.Random(7)
    for _ in range(20):
        expected = reference.random() * 2.0 - 1.0
        assert noise.process() == pytest.approx(expected)


def test_sync_forces_new_value():
    noise = ClockedNoise(SR, random.Random(5))
    noise.freq = 1.0
    assert noise.process() == 0.0
    noise.sync()
    outputs = [noise.process() for _ in range(5)]
    assert outputs[-1] != 0.0
    assert outputs[-1] == pytest.approx(outputs[-2])
    assert -1.0 <= outputs[-1] <= 1.0


def test_same_seed_reproduces():
    a = ClockedNoise(SR, random.Random(11))
    b = ClockedNoise(SR, random.Random(11))
    a.freq = b.freq = 3000.0
    assert [a.process() for _ in range(200)] == [b.process() for _ in range(200)]


def test_output_stays_near_unit_range():
    noise = ClockedNoise(SR, random.Random(2))
    noise.freq = 5000.0
    assert all(abs(noise.process()) < 1.5 for _ in range(2000))