"""Resonant modal filter."""

import math


class Mode:
    """Resonant modal filter tuned by frequency and quality factor."""

    def __init__(self, sample_rate):
        self._sr = sample_rate
        self._freq = 500.0
        self._q = 50.0
        self.clear()

    def clear(self):
        """Reset the filter state so the output returns to zero."""
        self._xnm1 = self._ynm1 = self._ynm2 = 0.0
        self._a0 = self._a1 = self._a2 = 0.0
        self._d = 0.0
        self._lfq = -1.0
        self._lq = -1.0

    def process(self, sample):
        """Filter one sample and return the result."""
        kfq = self._freq
        kq = self._q
        if self._lfq != kfq or self._lq != kq:
            kfreq = kfq * 2.0 * math.pi
            kalpha = self._sr / kfreq
            kbeta = kalpha * kalpha
            self._d = 0.5 * kalpha
            self._lq = kq
            self._lfq = kfq
            self._a0 = 1.0 / (kbeta + self._d / kfreq)
            self._a1 = self._a0 * (1.0 - 2.0 * kbeta)
            self._a2 = self._a0 * (kbeta - self._d / kq)

        yn = self._a0 * self._xnm1 - self._a1 * self._ynm1 - self._a2 * self._ynm2
        self._xnm1 = sample
        self._ynm2 = self._ynm1
        self._ynm1 = yn
        return yn * self._d

    @property
    def freq(self):
        """Resonant frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, value):
        self._freq = value

    @property
    def q(self):
        """Quality factor."""
        return self._q

    @q.setter
    def q(self, value):
        self._q = value