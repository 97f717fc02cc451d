"""Randomly clocked impulses."""

import random

from daisysynth.dspmath import clamp

_DENSITY_SCALE = 0.3


class Dust:
    """Random impulses whose height and likelihood depend on the density.

    ``rng`` is any object with a ``random()`` method returning values in
    [0, 1); a fresh :class:`random.Random` is used when none is given.
    """

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self._density = 0.0
        self.density = 0.5

    def process(self):
        """Return the next sample: an impulse in [0, 1) or zero."""
        u = self._rng.random()
        if u < self._density:
            return u / self._density
        return 0.0

    @property
    def density(self):
        """Impulse density between 0 and 1."""
        return self._density / _DENSITY_SCALE

    @density.setter
    def density(self, value):
        self._density = clamp(value, 0.0, 1.0) * _DENSITY_SCALE