"""Granular oscillator: a shaped carrier times a formant sine, hard-synced."""

from daisysynth.dspmath import next_blep_sample, sine, this_blep_sample


def _carrier(phase, shape):
    shape *= 3.0
    shape_integral = int(shape)
    t = 1.0 - (shape - shape_integral)

    if shape_integral == 0:
        phase = min(phase * (1.0 + t * t * t * 15.0), 1.0)
        phase += 0.75
    elif shape_integral == 1:
        breakpoint_ = 0.001 + 0.499 * t * t * t
        if phase < breakpoint_:
            phase *= 0.5 / breakpoint_
        else:
            phase = 0.5 + (phase - breakpoint_) * 0.5 / (1.0 - breakpoint_)
        phase += 0.75
    else:
        t = 1.0 - t
        phase = min(0.25 + phase * (0.5 + t * t * t * 14.5), 0.75)
    return (sine(phase) + 1.0) * 0.25


def _grainlet(carrier_phase, formant_phase, shape, bleed):
    carrier = _carrier(carrier_phase, shape)
    formant = sine(formant_phase)
    return carrier * (formant + bleed) / (1.0 + bleed)


class GrainletOscillator:
    """Phase-distorted single-cycle sine multiplied by a running formant sine."""

    def __init__(self, sample_rate):
        self._sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._formant_phase = 0.0
        self._next_sample = 0.0
        self._carrier_shape = 0.0
        self._carrier_bleed = 0.0
        self._carrier_frequency = 0.0
        self._formant_frequency = 0.0
        self._new_carrier_shape = 0.0
        self._new_carrier_bleed = 0.0
        self.freq = 440.0
        self.formant_freq = 220.0
        self.shape = 0.5
        self.bleed = 0.5

    def process(self):
        """Return the next sample."""
        this_sample = self._next_sample
        next_sample = 0.0

        self._carrier_phase += self._carrier_frequency
        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0
            reset_time = self._carrier_phase / self._carrier_frequency
            shape_inc = self._new_carrier_shape - self._carrier_shape
            bleed_inc = self._new_carrier_bleed - self._carrier_bleed
            before = _grainlet(
                1.0,
                self._formant_phase + (1.0 - reset_time) * self._formant_frequency,
                self._new_carrier_shape + shape_inc * (1.0 - reset_time),
                self._new_carrier_bleed + bleed_inc * (1.0 - reset_time),
            )
            after = _grainlet(0.0, 0.0, self._new_carrier_shape, self._new_carrier_bleed)
            discontinuity = after - before
            this_sample += discontinuity * this_blep_sample(reset_time)
            next_sample += discontinuity * next_blep_sample(reset_time)
            self._formant_phase = reset_time * self._formant_frequency
        else:
            self._formant_phase += self._formant_frequency
            if self._formant_phase >= 1.0:
                self._formant_phase -= 1.0

        self._carrier_bleed = self._new_carrier_bleed
        self._carrier_shape = self._new_carrier_shape
        next_sample += _grainlet(
            self._carrier_phase,
            self._formant_phase,
            self._carrier_shape,
            self._carrier_bleed,
        )
        self._next_sample = next_sample
        return this_sample

    @property
    def freq(self):
        """Carrier frequency in Hz, at most half the sample rate."""
        return self._carrier_frequency * self._sample_rate

    @freq.setter
    def freq(self, value):
        self._carrier_frequency = min(value / self._sample_rate, 0.5)

    @property
    def formant_freq(self):
        """Formant frequency in Hz, at most half the sample rate."""
        return self._formant_frequency * self._sample_rate

    @formant_freq.setter
    def formant_freq(self, value):
        self._formant_frequency = min(value / self._sample_rate, 0.5)

    @property
    def shape(self):
        """Carrier waveshape; behaves differently in 0-1/3, 1/3-2/3 and above."""
        return self._new_carrier_shape

    @shape.setter
    def shape(self, value):
        self._new_carrier_shape = value

    @property
    def bleed(self):
        """Amount of formant that bleeds through; works best 0-1."""
        return self._new_carrier_bleed

    @bleed.setter
    def bleed(self, value):
        self._new_carrier_bleed = value