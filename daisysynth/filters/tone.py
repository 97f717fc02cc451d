"""First-order recursive low-pass filter."""

import math

from daisysynth.dspmath import TWO_PI


class Tone:
    """One-pole low-pass filter with a variable cutoff frequency."""

    def __init__(self, sample_rate):
        self._sample_rate = sample_rate
        self._prevout = 0.0
        self._freq = 100.0
        self._c1 = 0.5
        self._c2 = 0.5

    def process(self, sample):
        """Filter one sample and return the result."""
        out = self._c1 * sample + self._c2 * self._prevout
        self._prevout = out
        return out

    @property
    def freq(self):
        """Cutoff (half-way) frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, value):
        self._freq = value
        b = 2.0 - math.cos(TWO_PI * self._freq / self._sample_rate)
        self._c2 = b - math.sqrt(b * b - 1.0)
        self._c1 = 1.0 - self._c2