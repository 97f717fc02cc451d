import random

import pytest

from daisysynth.noise.dust import Dust


class _FixedRng:
    def __init__(self, values):
        self._values = iter(values)

    def random(self):
        return next(self._values)


def test_default_density():
    dust = Dust(random.Random(1))
    assert dust.density == pytest.approx(0.5)


def test_density_is_clamped():
    dust = Dust(random.Random(1))
    dust.density = 5.0
    assert dust.density == pytest.approx(1.0)
    dust.density = -2.0
    assert dust.density == 0.0


def test_impulse_scaled_by_density():
    dust = Dust(_FixedRng([0.1, 0.2]))
    assert dust.process() == pytest.approx(0.1 / (0.5 * 0.3))
    assert dust.process() == 0.0


def test_zero_density_never_fires():
    dust = Dust(random.Random(3))
    dust.density = 0.0
    assert [dust.process() for _ in range(500)] == [0.0] * 500


def test_output_range_and_sparsity():
    dust = Dust(random.Random(7))
    dust.density = 1.0
    out = [dust.process() for _ in range(10000)]
    assert all(0.0 <= s < 1.0 for s in out)
    fired = sum(1 for s in out if s > 0.0)
    assert 0.2 < fired / len(out) < 0.4


def test_seeded_rng_is_reproducible():
    a = Dust(random.Random(42))
    b = Dust(random.Random(42))
    assert [a.process() for _ in range(100)] == [b.process() for _ in range(100)]