"""Band-limited triangle, sawtooth and square oscillator."""

import enum
import math

_DELAY_SIZE = 4096
_DELAY_MASK = _DELAY_SIZE - 1


class BlWaveform(enum.IntEnum):
    """Waveforms of :class:`BlOsc`."""

    TRIANGLE = 0
    SAW = 1
    SQUARE = 2
    OFF = 3


class BlOsc:
    """Band-limited oscillator; defaults to a 440 Hz triangle at 0.5."""

    def __init__(self, sample_rate):
        self._sampling_freq = sample_rate
        self._half_sr = 0.5 * sample_rate
        self._quarter_sr = 0.25 * sample_rate
        self._sec_per_sample = 1.0 / sample_rate
        self._two_over_sr = 2.0 / sample_rate
        self._four_over_sr = 4.0 / sample_rate
        self._freq = 440.0
        self._amp = 0.5
        self._pw = 0.5
        self._waveform = BlWaveform.TRIANGLE
        self.reset()

    def reset(self):
        """Clear the oscillator state, restarting the waveform."""
        self._iota = 0
        self._rec0 = [0.0, 0.0]
        self._rec1 = [0.0, 0.0]
        self._vec0 = [0.0, 0.0]
        self._vec1 = [0.0, 0.0]
        self._vec2 = [0.0] * _DELAY_SIZE

    def _advance(self):
        self._iota = (self._iota + 1) & _DELAY_MASK

    def _process_square(self):
        slow2 = min(2047.0, self._sampling_freq * (self._pw / self._freq))
        delay = int(slow2)
        slow5 = (delay + 1) - slow2
        slow6 = self._quarter_sr / self._freq
        slow7 = self._sec_per_sample * self._freq
        slow8 = slow2 - delay

        rec0, vec1, vec2, iota = self._rec0, self._vec1, self._vec2, self._iota
        rec0[0] = math.fmod(rec0[1] + slow7, 1.0)
        temp0 = (2.0 * rec0[0] - 1.0) ** 2
        vec1[0] = temp0
        temp1 = slow6 * (temp0 - vec1[1])
        vec2[iota & _DELAY_MASK] = temp1

        delayed = (
            slow5 * vec2[(iota - delay) & _DELAY_MASK]
            + slow8 * vec2[(iota - (delay + 1)) & _DELAY_MASK]
        )
        out = self._amp * (0.0 - (delayed - temp1))
        rec0[1] = rec0[0]
        vec1[1] = vec1[0]
        self._advance()
        return out

    def _process_triangle(self):
        slow1 = self._four_over_sr * (self._amp * self._freq)
        slow3 = self._half_sr / self._freq
        delay = int(slow3)
        delay_next = delay + 1
        slow6 = delay_next - slow3
        slow7 = self._quarter_sr / self._freq
        slow8 = self._sec_per_sample * self._freq
        slow9 = slow3 - delay

        rec0, rec1 = self._rec0, self._rec1
        vec1, vec2, iota = self._vec1, self._vec2, self._iota
        rec1[0] = math.fmod(slow8 + rec1[1], 1.0)
        temp0 = (2.0 * rec1[0] - 1.0) ** 2
        vec1[0] = temp0
        temp1 = slow7 * (temp0 - vec1[1])
        vec2[iota & _DELAY_MASK] = temp1
        delayed = (
            slow6 * vec2[(iota - delay) & _DELAY_MASK]
            + slow9 * vec2[(iota - delay_next) & _DELAY_MASK]
        )
        rec0[0] = 0.0 - (delayed - (0.999 * rec0[1] + temp1))

        out = slow1 * rec0[0]
        rec1[1] = rec1[0]
        rec0[1] = rec0[0]
        vec1[1] = vec1[0]
        self._advance()
        return out

    def _process_saw(self):
        slow1 = self._sampling_freq * (self._amp / self._freq)
        slow2 = self._two_over_sr * self._freq
        slow3 = self._sampling_freq / self._freq

        rec0, vec0, vec1 = self._rec0, self._vec0, self._vec1
        rec0[0] = math.fmod(1.0 + rec0[1], slow3)
        temp0 = (slow2 * rec0[0] - 1.0) ** 2
        vec0[0] = temp0
        vec1[0] = 0.25
        out = slow1 * ((temp0 - vec0[1]) * vec1[1])
        rec0[1] = rec0[0]
        vec0[1] = vec0[0]
        vec1[1] = vec1[0]
        return out

    def process(self):
        """Return the next sample; the OFF waveform gives silence."""
        if self._waveform is BlWaveform.TRIANGLE:
            return self._process_triangle()
        if self._waveform is BlWaveform.SAW:
            return self._process_saw()
        if self._waveform is BlWaveform.SQUARE:
            return self._process_square()
        return 0.0

    @property
    def freq(self):
        """Frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, value):
        self._freq = value

    @property
    def amp(self):
        """Output amplitude, 0 to 1."""
        return self._amp

    @amp.setter
    def amp(self, value):
        self._amp = value

    @property
    def pw(self):
        """Square pulse width, 0 to 1."""
        return 1.0 - self._pw

    @pw.setter
    def pw(self, value):
        self._pw = 1.0 - value

    @property
    def waveform(self):
        """Current :class:`BlWaveform`; unknown values select OFF."""
        return self._waveform

    @waveform.setter
    def waveform(self, value):
        try:
            self._waveform = BlWaveform(value)
        except ValueError:
            self._waveform = BlWaveform.OFF