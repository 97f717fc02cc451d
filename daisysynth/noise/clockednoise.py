"""Noise passed through a band-limited sample and hold."""

import random

from daisysynth.dspmath import clamp, next_blep_sample, this_blep_sample


class ClockedNoise:
    """Random values held for one clock period and then replaced.

    The jumps are band-limited. Above a quarter of the sample rate the
    output crossfades towards raw noise.
    ``rng`` is any object with a ``random()`` method returning values in
    [0, 1); a fresh :class:`random.Random` is used when none is given.
    """

    def __init__(self, sample_rate, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self._sample_rate = sample_rate
        self._phase = 0.0
        self._sample = 0.0
        self._next_sample = 0.0
        self._frequency = 0.001

    def process(self):
        """Return the next sample."""
        this_sample = self._next_sample
        next_sample = 0.0
        sample = self._sample

        raw_sample = self._rng.random() * 2.0 - 1.0
        raw_amount = clamp(4.0 * (self._frequency - 0.25), 0.0, 1.0)

        self._phase += self._frequency
        if self._phase >= 1.0:
            self._phase -= 1.0
            t = self._phase / self._frequency if self._frequency else 0.0
            discontinuity = raw_sample - sample
            this_sample += discontinuity * this_blep_sample(t)
            next_sample += discontinuity * next_blep_sample(t)
            sample = raw_sample

        next_sample += sample
        self._next_sample = next_sample
        self._sample = sample
        return this_sample + raw_amount * (raw_sample - this_sample)

    @property
    def freq(self):
        """Clock frequency in Hz, limited to 0..sample_rate."""
        return self._frequency * self._sample_rate

    @freq.setter
    def freq(self, value):
        self._frequency = clamp(value / self._sample_rate, 0.0, 1.0)

    def sync(self):
        """Force a new random value on the next call to :meth:`process`."""
        self._phase = 1.0