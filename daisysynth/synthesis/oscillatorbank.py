"""Divide-down organ style bank of seven saw and square waves."""

from daisysynth.dspmath import next_blep_sample, this_blep_sample

_NUM_VOICES = 7
_TOLERANCE = 0.0000001


def _differs(a, b):
    return abs(a - b) > _TOLERANCE


class OscillatorBank:
    """Mix of Saw 8', Square 8', Saw 4', Square 4', Saw 2', Square 2' and
    Saw 1' waveforms, built from four band-limited saws."""

    def __init__(self, sample_rate):
        self._sample_rate = sample_rate
        self._phase = 0.0
        self._next_sample = 0.0
        self._segment = 0
        self._frequency = 0.0
        self._freq_hz = 0.0
        self._saw_gains = (0.0, 0.0, 0.0, 0.0)
        self._gain = 0.0
        self._recalc = True
        self.gain = 1.0
        self._registration = [0.0] * _NUM_VOICES
        self._unshifted_registration = [0.0] * _NUM_VOICES
        self.set_single_amp(1.0, 0)
        self.freq = 440.0

    def _update_registration(self):
        self._frequency *= 8.0
        # Very high notes play a higher harmonic of a lower wave instead.
        shift = 0
        while self._frequency > 0.5:
            shift += 2
            self._frequency *= 0.5
        reg = [0.0] * _NUM_VOICES
        for i, amp in enumerate(self._unshifted_registration[: max(_NUM_VOICES - shift, 0)]):
            reg[i + shift] = amp
        self._registration = reg

    def process(self):
        """Return the next sample."""
        if self._recalc:
            self._recalc = False
            self._update_registration()

        r = self._registration
        g = self._gain
        saw_8 = (r[0] + 2.0 * r[1]) * g
        saw_4 = (r[2] - r[1] + 2.0 * r[3]) * g
        saw_2 = (r[4] - r[3] + 2.0 * r[5]) * g
        saw_1 = (r[6] - r[5]) * g
        self._saw_gains = (saw_8, saw_4, saw_2, saw_1)

        this_sample = self._next_sample
        next_sample = 0.0

        self._phase += self._frequency
        next_segment = int(self._phase)
        if next_segment != self._segment:
            discontinuity = 0.0
            if next_segment == 8:
                self._phase -= 8.0
                next_segment -= 8
                discontinuity -= saw_8
            if next_segment & 3 == 0:
                discontinuity -= saw_4
            if next_segment & 1 == 0:
                discontinuity -= saw_2
            discontinuity -= saw_1
            if discontinuity != 0.0:
                fraction = self._phase - next_segment
                t = fraction / self._frequency
                this_sample += this_blep_sample(t) * discontinuity
                next_sample += next_blep_sample(t) * discontinuity
        self._segment = next_segment

        phase = self._phase
        segment = self._segment
        next_sample += (phase - 4.0) * saw_8 * 0.125
        next_sample += (phase - (segment & 4) - 2.0) * saw_4 * 0.25
        next_sample += (phase - (segment & 6) - 1.0) * saw_2 * 0.5
        next_sample += (phase - (segment & 7) - 0.5) * saw_1
        self._next_sample = next_sample
        return 2.0 * this_sample

    @property
    def freq(self):
        """Frequency of the 8' voice in Hz, at most half the sample rate."""
        return self._freq_hz

    @freq.setter
    def freq(self, value):
        f = min(value / self._sample_rate, 0.5)
        self._recalc = _differs(f, self._frequency) or self._recalc
        self._frequency = f
        self._freq_hz = f * self._sample_rate

    @property
    def gain(self):
        """Overall gain between 0 and 1."""
        return self._gain

    @gain.setter
    def gain(self, value):
        self._gain = max(0.0, min(1.0, value))

    def set_amplitudes(self, amplitudes):
        """Set the seven voice amplitudes, in the order listed on the class."""
        values = list(amplitudes)
        if len(values) < _NUM_VOICES:
            raise ValueError(f"expected {_NUM_VOICES} amplitudes, got {len(values)}")
        for i, amp in enumerate(values[:_NUM_VOICES]):
            self._recalc = _differs(self._unshifted_registration[i], amp) or self._recalc
            self._unshifted_registration[i] = amp

    def set_single_amp(self, amp, idx):
        """Set one voice's amplitude; an index outside 0..6 is ignored."""
        if not 0 <= idx < _NUM_VOICES:
            return
        self._recalc = _differs(self._unshifted_registration[idx], amp) or self._recalc
        self._unshifted_registration[idx] = amp