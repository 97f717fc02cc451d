"""Double-sampled, stable state variable filter."""

import math

from daisysynth.dspmath import clamp


class Svf:
    """State variable filter with low, high, band, notch and peak outputs.

    Each call to :meth:`process` runs the filter twice per sample and
    averages the two passes.
    """

    def __init__(self, sample_rate):
        self._sr = sample_rate
        self._fc = 200.0
        self._res = 0.5
        self._drive = 0.5
        self._pre_drive = 0.5
        self._freq = 0.25
        self._damp = 0.0
        self._notch = 0.0
        self._low = 0.0
        self._high = 0.0
        self._band = 0.0
        self._out_low = 0.0
        self._out_high = 0.0
        self._out_band = 0.0
        self._out_peak = 0.0
        self._out_notch = 0.0
        self._fc_max = sample_rate / 3.0

    def _pass(self, sample):
        self._notch = sample - self._damp * self._band
        self._low = self._low + self._freq * self._band
        self._high = self._notch - self._low
        self._band = (
            self._freq * self._high
            + self._band
            - self._drive * self._band * self._band * self._band
        )

    def process(self, sample):
        """Run one input sample through the filter, updating every output."""
        self._pass(sample)
        self._out_low = 0.5 * self._low
        self._out_high = 0.5 * self._high
        self._out_band = 0.5 * self._band
        self._out_peak = 0.5 * (self._low - self._high)
        self._out_notch = 0.5 * self._notch

        self._pass(sample)
        self._out_low += 0.5 * self._low
        self._out_high += 0.5 * self._high
        self._out_band += 0.5 * self._band
        self._out_peak += 0.5 * (self._low - self._high)
        self._out_notch += 0.5 * self._notch

    def _update_damp(self):
        self._damp = min(
            2.0 * (1.0 - self._res**0.25),
            min(2.0, 2.0 / self._freq - self._freq * 0.5),
        )

    @property
    def freq(self):
        """Cutoff frequency in Hz, limited to one third of the sample rate."""
        return self._fc

    @freq.setter
    def freq(self, value):
        self._fc = clamp(value, 1.0e-6, self._fc_max)
        # The filter runs at twice the sample rate.
        self._freq = 2.0 * math.sin(math.pi * min(0.25, self._fc / (self._sr * 2.0)))
        self._update_damp()

    @property
    def res(self):
        """Resonance between 0 and 1."""
        return self._res

    @res.setter
    def res(self, value):
        self._res = clamp(value, 0.0, 1.0)
        self._update_damp()
        self._drive = self._pre_drive * self._res

    @property
    def drive(self):
        """Drive amount; stored internally scaled by 0.1 and limited to 0..1."""
        return self._pre_drive * 10.0

    @drive.setter
    def drive(self, value):
        self._pre_drive = clamp(value * 0.1, 0.0, 1.0)
        self._drive = self._pre_drive * self._res

    @property
    def low(self):
        """Low-pass output."""
        return self._out_low

    @property
    def high(self):
        """High-pass output."""
        return self._out_high

    @property
    def band(self):
        """Band-pass output."""
        return self._out_band

    @property
    def notch(self):
        """Notch output."""
        return self._out_notch

    @property
    def peak(self):
        """Peak output."""
        return self._out_peak