"""Random impulse train through a resonant band-pass filter."""

import math
import random

from daisysynth.dspmath import clamp
from daisysynth.filters.svf import Svf

_RATIO_FRAC = 1.0 / 12.0
_DENSITY_SCALE = 0.3


class Particle:
    """Random impulses exciting a band-pass filter whose pitch wanders.

    ``rng`` is any object with a ``random()`` method returning values in
    [0, 1); a fresh :class:`random.Random` is used when none is given.
    """

    def __init__(self, sample_rate, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self._sample_rate = sample_rate
        self._sync = False
        self._aux = 0.0
        self._frequency = 0.0
        self.freq = 440.0
        self._resonance = 0.9
        self._density = 0.5
        self._gain = 1.0
        self._spread = 1.0
        self._rand_freq = 0.0
        self.random_freq = sample_rate / 48.0
        self._rand_phase = 0.0
        self._pre_gain = 0.0
        self._filter = Svf(sample_rate)
        self._filter.drive = 0.7

    def process(self):
        """Return the next filtered sample."""
        u = self._rng.random()
        s = 0.0

        if u <= self._density or self._sync:
            if u <= self._density:
                s = u * self._gain
            self._rand_phase += self._rand_freq

            if self._rand_phase >= 1.0 or self._sync:
                if self._rand_phase >= 1.0:
                    self._rand_phase -= 1.0
                spread_u = 2.0 * self._rng.random() - 1.0
                f = min(
                    2.0 ** (_RATIO_FRAC * self._spread * spread_u) * self._frequency,
                    0.25,
                )
                denom = math.sqrt(self._resonance * f * math.sqrt(self._density))
                self._pre_gain = 0.5 / denom if denom > 0.0 else math.inf
                self._filter.freq = f * self._sample_rate
                self._filter.res = self._resonance

        self._aux = s
        self._filter.process(self._pre_gain * s)
        return self._filter.band

    @property
    def noise(self):
        """Raw impulse value of the last call to :meth:`process`."""
        return self._aux

    @property
    def freq(self):
        """Filter centre frequency in Hz, limited to 0..sample_rate."""
        return self._frequency * self._sample_rate

    @freq.setter
    def freq(self, value):
        self._frequency = clamp(value / self._sample_rate, 0.0, 1.0)

    @property
    def resonance(self):
        """Filter resonance between 0 and 1."""
        return self._resonance

    @resonance.setter
    def resonance(self, value):
        self._resonance = clamp(value, 0.0, 1.0)

    @property
    def random_freq(self):
        """How often, in Hz, the filter frequency is randomized."""
        return self._rand_freq * self._sample_rate

    @random_freq.setter
    def random_freq(self, value):
        self._rand_freq = clamp(value / self._sample_rate, 0.0, 1.0)

    @property
    def density(self):
        """Impulse density between 0 and 1."""
        return self._density / _DENSITY_SCALE

    @density.setter
    def density(self, value):
        self._density = clamp(value * _DENSITY_SCALE, 0.0, 1.0)

    @property
    def gain(self):
        """Impulse gain between 0 and 1."""
        return self._gain

    @gain.setter
    def gain(self, value):
        self._gain = clamp(value, 0.0, 1.0)

    @property
    def spread(self):
        """Range, in octaves, of the random filter frequency; not negative."""
        return self._spread

    @spread.setter
    def spread(self, value):
        self._spread = 0.0 if value < 0.0 else value

    @property
    def sync(self):
        """When true, every sample randomizes the filter frequency."""
        return self._sync

    @sync.setter
    def sync(self, value):
        self._sync = bool(value)