"""Additive oscillator built on the Chebyshev recurrence."""

import math

from daisysynth.dspmath import TWO_PI

_TOLERANCE = 0.000001


def _differs(a, b):
    return abs(a - b) > _TOLERANCE


class HarmonicOscillator:
    """Sum of ``num_harmonics`` consecutive harmonics with set amplitudes.

    Harmonics near or above Nyquist are attenuated. By default only the
    fundamental sounds, at 440 Hz.
    """

    def __init__(self, sample_rate, num_harmonics=16):
        if num_harmonics < 1:
            raise ValueError("num_harmonics must be at least 1")
        self._sample_rate = sample_rate
        self._num_harmonics = num_harmonics
        self._phase = 0.0
        self._frequency = 0.0
        self._first_harmonic_index = 0
        self._amplitude = [0.0] * num_harmonics
        self._new_amplitude = [0.0] * num_harmonics
        self._amplitude[0] = 1.0
        self._new_amplitude[0] = 1.0
        self._recalc = False
        self.first_harmonic_index = 1
        self.freq = 440.0
        self._recalc = False

    def process(self):
        """Return the next sample."""
        if self._recalc:
            self._recalc = False
            for i, new_amp in enumerate(self._new_amplitude):
                f = min(self._frequency * (self._first_harmonic_index + i), 0.5)
                self._amplitude[i] = new_amp * (1.0 - f * 2.0)

        self._phase += self._frequency
        if self._phase >= 1.0:
            self._phase -= 1.0
        phase = self._phase
        two_x = 2.0 * math.sin(phase * TWO_PI)
        if self._first_harmonic_index == 1:
            previous = 1.0
            current = two_x * 0.5
        else:
            k = float(self._first_harmonic_index)
            previous = math.sin((phase * (k - 1.0) + 0.25) * TWO_PI)
            current = math.sin(phase * k * TWO_PI)

        total = 0.0
        for amp in self._amplitude:
            total += amp * current
            previous, current = current, two_x * current - previous
        return total

    @property
    def freq(self):
        """Fundamental frequency in Hz, within half the sample rate."""
        return self._frequency * self._sample_rate

    @freq.setter
    def freq(self, value):
        f = max(-0.5, min(0.5, value / self._sample_rate))
        self._recalc = _differs(f, self._frequency) or self._recalc
        self._frequency = f

    @property
    def first_harmonic_index(self):
        """Harmonic number of the first partial; values below 1 become 1."""
        return self._first_harmonic_index

    @first_harmonic_index.setter
    def first_harmonic_index(self, value):
        idx = max(int(value), 1)
        self._recalc = _differs(idx, self._first_harmonic_index) or self._recalc
        self._first_harmonic_index = idx

    def set_amplitudes(self, amplitudes):
        """Set every harmonic's amplitude from the first ``num_harmonics`` values."""
        values = list(amplitudes)
        if len(values) < self._num_harmonics:
            raise ValueError(
                f"expected at least {self._num_harmonics} amplitudes, got {len(values)}"
            )
        for i, amp in enumerate(values[: self._num_harmonics]):
            self._recalc = _differs(self._new_amplitude[i], amp) or self._recalc
            self._new_amplitude[i] = amp

    def set_single_amp(self, amp, idx):
        """Set one harmonic's amplitude; an index out of range is ignored."""
        if not 0 <= idx < self._num_harmonics:
            return
        self._recalc = _differs(self._amplitude[idx], amp) or self._recalc
        self._new_amplitude[idx] = amp