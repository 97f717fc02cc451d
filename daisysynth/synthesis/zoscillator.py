"""Z oscillator: a formant sine multiplied by and synced to a carrier."""

from daisysynth.dspmath import next_blep_sample, sine, this_blep_sample

_LIMIT = 0.25


def _z(c, d, f, shape, mode):
    ramp_down = 0.5 * (1.0 + sine(0.5 * d + 0.25))

    if mode < 0.333:
        offset = 1.0
        phase_shift = 0.25 + mode * 1.50
    elif mode < 0.666:
        phase_shift = 0.7495 - (mode - 0.33) * 0.75
        offset = -sine(phase_shift)
    else:
        phase_shift = 0.7495 - (mode - 0.33) * 0.75
        offset = 0.001

    discontinuity = sine(f + phase_shift)
    if shape < 0.5:
        shape *= 2.0
        if c >= 0.5:
            ramp_down *= shape
        contour = 1.0 + (sine(c + 0.25) - 1.0) * shape
    else:
        contour = sine(c + shape * 0.5)
    return (ramp_down * (offset + discontinuity) - offset) * contour


class ZOscillator:
    """Formant sine multiplied by, and reset twice per cycle of, a carrier."""

    def __init__(self, sample_rate):
        self._sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._discontinuity_phase = 0.0
        self._formant_phase = 0.0
        self._next_sample = 0.0
        self._carrier_frequency = 0.0
        self._formant_frequency = 0.0
        self.freq = 220.0
        self.formant_freq = 550.0
        self._mode_new = 0.0
        self._shape_new = 1.0
        self._mode = self._mode_new
        self._carrier_shape = self._shape_new

    def process(self):
        """Return the next sample."""
        this_sample = self._next_sample
        next_sample = 0.0

        self._discontinuity_phase += 2.0 * self._carrier_frequency
        self._carrier_phase += self._carrier_frequency

        if self._discontinuity_phase >= 1.0:
            self._discontinuity_phase -= 1.0
            reset_time = self._discontinuity_phase / (2.0 * self._carrier_frequency)
            wrapped = self._carrier_phase >= 1.0
            carrier_phase_before = 1.0 if wrapped else 0.5
            carrier_phase_after = 0.0 if wrapped else 0.5

            remaining = 1.0 - reset_time
            mode_sub = self._mode + remaining * (self._mode - self._mode_new)
            shape_sub = self._carrier_shape + remaining * (
                self._carrier_shape - self._shape_new
            )
            before = _z(
                carrier_phase_before,
                1.0,
                self._formant_phase + remaining * self._formant_frequency,
                shape_sub,
                mode_sub,
            )
            after = _z(carrier_phase_after, 0.0, 0.0, self._shape_new, self._mode_new)

            discontinuity = after - before
            this_sample += discontinuity * this_blep_sample(reset_time)
            next_sample += discontinuity * next_blep_sample(reset_time)
            self._formant_phase = reset_time * self._formant_frequency

            if self._carrier_phase > 1.0:
                self._carrier_phase = self._discontinuity_phase * 0.5
        else:
            self._formant_phase += self._formant_frequency
            if self._formant_phase >= 1.0:
                self._formant_phase -= 1.0

        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0

        self._carrier_shape = self._shape_new
        self._mode = self._mode_new
        next_sample += _z(
            self._carrier_phase,
            self._discontinuity_phase,
            self._formant_phase,
            self._carrier_shape,
            self._mode,
        )
        self._next_sample = next_sample
        return this_sample

    @property
    def freq(self):
        """Carrier frequency in Hz, at most a quarter of the sample rate."""
        return self._carrier_frequency * self._sample_rate

    @freq.setter
    def freq(self, value):
        self._carrier_frequency = min(value / self._sample_rate, _LIMIT)

    @property
    def formant_freq(self):
        """Formant frequency in Hz, at most a quarter of the sample rate."""
        return self._formant_frequency * self._sample_rate

    @formant_freq.setter
    def formant_freq(self, value):
        self._formant_frequency = min(value / self._sample_rate, _LIMIT)

    @property
    def shape(self):
        """Contour of the waveform; works best 0-1."""
        return self._shape_new

    @shape.setter
    def shape(self, value):
        self._shape_new = value

    @property
    def mode(self):
        """Below 1/3 only phase shift, above 2/3 only offset, between both."""
        return self._mode_new

    @mode.setter
    def mode(self, value):
        self._mode_new = value