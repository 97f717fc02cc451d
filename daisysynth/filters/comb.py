"""Feedback comb filter built on a circular delay buffer."""

import math

_LOG_001 = -6.9078


class Comb:
    """Comb filter whose delay is set as a period in seconds.

    ``size`` is the number of samples in the delay buffer; the longest period
    available is ``size / sample_rate - 0.01`` seconds.
    """

    def __init__(self, sample_rate, size):
        self._sample_rate = sample_rate
        self._rev_time = 3.5
        self._max_size = size
        self._max_loop_time = size / sample_rate - 0.01
        if self._max_loop_time <= 0.0:
            raise ValueError("delay buffer too short for the sample rate")
        self._loop_time = self._max_loop_time
        self._mod = int(sample_rate * self._loop_time)
        self._buf = [0.0] * size
        self._prvt = 0.0
        self._coef = 0.0
        self._buf_pos = 0

    def process(self, sample):
        """Filter one sample and return the result."""
        if self._prvt != self._rev_time:
            self._prvt = self._rev_time
            if self._prvt == 0.0:
                exp_arg = -math.inf
            else:
                exp_arg = _LOG_001 * self._loop_time / self._prvt
            self._coef = 0.0 if exp_arg < -36.8413615 else math.exp(exp_arg)

        outsamp = self._buf[(self._buf_pos + self._mod) % self._max_size]
        self._buf[self._buf_pos] = outsamp * self._coef + sample
        self._buf_pos = (self._buf_pos - 1 + self._max_size) % self._max_size
        return outsamp

    @property
    def period(self):
        """Delay period in seconds; non-positive values are ignored."""
        return self._loop_time

    @period.setter
    def period(self, value):
        if value > 0:
            self._loop_time = min(value, self._max_loop_time)
            self._mod = int(self._loop_time * self._sample_rate)
            if self._mod > self._max_size:
                self._mod = self._max_size - 1

    @property
    def freq(self):
        """Comb frequency in Hz; non-positive values are ignored."""
        return 1.0 / self._loop_time

    @freq.setter
    def freq(self, value):
        if value > 0:
            self.period = 1.0 / value

    @property
    def rev_time(self):
        """Decay time in seconds."""
        return self._rev_time

    @rev_time.setter
    def rev_time(self, value):
        self._rev_time = value