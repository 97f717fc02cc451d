"""Schroeder allpass filter built on a circular delay buffer."""

import math

_LOG_001 = -6.9078


class Allpass:
    """Allpass filter whose delay is set as a loop time in seconds.

    ``size`` is the number of samples in the delay buffer; the longest loop
    time available is ``size / sample_rate - 0.01`` seconds.
    """

    def __init__(self, sample_rate, size):
        self._sample_rate = sample_rate
        self._rev_time = 3.5
        self._max_loop_time = size / sample_rate - 0.01
        self._loop_time = self._max_loop_time
        self._mod = int(self._loop_time * sample_rate)
        if self._mod <= 0:
            raise ValueError("delay buffer too short for the sample rate")
        self._buf = [0.0] * size
        self._prvt = 0.0
        self._coef = 0.0
        self._buf_pos = 0

    def process(self, sample):
        """Filter one sample and return the result."""
        if self._prvt != self._rev_time:
            self._prvt = self._rev_time
            if self._prvt == 0.0:
                self._coef = 0.0
            else:
                self._coef = math.exp(_LOG_001 * self._loop_time / self._prvt)

        y = self._buf[self._buf_pos]
        z = self._coef * y + sample
        self._buf[self._buf_pos] = z
        out = y - self._coef * z

        self._buf_pos = (self._buf_pos + 1) % self._mod
        return out

    @property
    def freq(self):
        """Loop time in seconds, between 0.0001 and the buffer's maximum."""
        return self._loop_time

    @freq.setter
    def freq(self, value):
        self._loop_time = max(min(value, self._max_loop_time), 0.0001)
        self._mod = int(max(self._loop_time * self._sample_rate, 0.0))
        if self._mod <= 0:
            raise ValueError("loop time shorter than one sample")

    @property
    def rev_time(self):
        """Reverb (decay) time in seconds."""
        return self._rev_time

    @rev_time.setter
    def rev_time(self, value):
        self._rev_time = value