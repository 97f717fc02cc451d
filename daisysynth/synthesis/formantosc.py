"""Sine formant oscillator with alias-free phase reset."""

from daisysynth.dspmath import next_blep_sample, sine, this_blep_sample

_LIMIT = 0.25


def _limit(value):
    return max(-_LIMIT, min(_LIMIT, value))


class FormantOscillator:
    """Formant sine hard-synced to a carrier, with band-limited resets."""

    def __init__(self, sample_rate):
        self._sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._formant_phase = 0.0
        self._next_sample = 0.0
        self._carrier_frequency = 0.0
        self._formant_frequency = 100.0
        self._phase_shift = 0.0
        self._ps_inc = 0.0

    def process(self):
        """Return the next sample."""
        this_sample = self._next_sample
        next_sample = 0.0
        self._carrier_phase += self._carrier_frequency

        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0
            reset_time = self._carrier_phase / self._carrier_frequency
            formant_phase_at_reset = (
                self._formant_phase + (1.0 - reset_time) * self._formant_frequency
            )
            before = sine(
                formant_phase_at_reset
                + self._phase_shift
                + self._ps_inc * (1.0 - reset_time)
            )
            after = sine(self._phase_shift + self._ps_inc)
            discontinuity = after - before
            this_sample += discontinuity * this_blep_sample(reset_time)
            next_sample += discontinuity * next_blep_sample(reset_time)
            self._formant_phase = reset_time * self._formant_frequency
        else:
            self._formant_phase += self._formant_frequency
            if self._formant_phase >= 1.0:
                self._formant_phase -= 1.0

        self._phase_shift += self._ps_inc
        self._ps_inc = 0.0

        next_sample += sine(self._formant_phase + self._phase_shift)
        self._next_sample = next_sample
        return this_sample

    @property
    def formant_freq(self):
        """Formant frequency in Hz, within a quarter of the sample rate."""
        return self._formant_frequency * self._sample_rate

    @formant_freq.setter
    def formant_freq(self, value):
        self._formant_frequency = _limit(value / self._sample_rate)

    @property
    def carrier_freq(self):
        """Carrier (main) frequency in Hz, within a quarter of the sample rate."""
        return self._carrier_frequency * self._sample_rate

    @carrier_freq.setter
    def carrier_freq(self, value):
        self._carrier_frequency = _limit(value / self._sample_rate)

    @property
    def phase_shift(self):
        """Phase shift of the formant in cycles, applied on the next sample."""
        return self._phase_shift + self._ps_inc

    @phase_shift.setter
    def phase_shift(self, value):
        self._ps_inc = value - self._phase_shift