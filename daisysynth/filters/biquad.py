"""Two-pole recursive resonant filter."""

import math

from daisysynth.dspmath import TWO_PI


class Biquad:
    """Two-pole resonant low-pass filter."""

    def __init__(self, sample_rate):
        self._sample_rate = sample_rate
        self._two_pi_d_sr = TWO_PI / sample_rate
        self._cutoff = 500.0
        self._res = 0.7
        self._xnm1 = self._xnm2 = self._ynm1 = self._ynm2 = 0.0
        self._reset()

    def _reset(self):
        con = self._cutoff * self._two_pi_d_sr
        res = self._res
        cos_con = math.cos(con)
        sin_con = math.sin(con)
        alpha = 1.0 - 2.0 * res * cos_con * cos_con + res * res * math.cos(2 * con)
        beta = 1.0 + cos_con
        gamma = 1.0 + cos_con
        m1 = alpha * gamma + beta * sin_con
        m2 = alpha * gamma - beta * sin_con
        den = math.sqrt(m1 * m1 + m2 * m2)

        self._b0 = 1.5 * (alpha * alpha + beta * beta) / den
        self._b1 = self._b0
        self._b2 = 0.0
        self._a0 = 1.0
        self._a1 = -2.0 * res * cos_con
        self._a2 = res * res

    def process(self, sample):
        """Filter one sample and return the result."""
        yn = (
            self._b0 * sample
            + self._b1 * self._xnm1
            + self._b2 * self._xnm2
            - self._a1 * self._ynm1
            - self._a2 * self._ynm2
        ) / self._a0
        self._xnm2 = self._xnm1
        self._xnm1 = sample
        self._ynm2 = self._ynm1
        self._ynm1 = yn
        return yn

    @property
    def res(self):
        """Resonance amount."""
        return self._res

    @res.setter
    def res(self, value):
        self._res = value
        self._reset()

    @property
    def cutoff(self):
        """Cutoff frequency in Hz."""
        return self._cutoff

    @cutoff.setter
    def cutoff(self, value):
        self._cutoff = value
        self._reset()