"""VOSIM oscillator: two formant sines multiplied by and synced to a carrier."""

from daisysynth.dspmath import sine

_LIMIT = 0.25


class VosimOscillator:
    """Two formant sines reset by, and multiplied by, a carrier pulse."""

    def __init__(self, sample_rate):
        self._sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._formant_1_phase = 0.0
        self._formant_2_phase = 0.0
        self._carrier_frequency = 0.0
        self._formant_1_frequency = 0.0
        self._formant_2_frequency = 0.0
        self._carrier_shape = 0.0
        self.freq = 105.0
        self.form1_freq = 1390.0
        self.form2_freq = 817.0
        self.shape = 0.5

    def process(self):
        """Return the next sample."""
        self._carrier_phase += self._carrier_frequency
        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0
            reset_time = self._carrier_phase / self._carrier_frequency
            self._formant_1_phase = reset_time * self._formant_1_frequency
            self._formant_2_phase = reset_time * self._formant_2_frequency
        else:
            self._formant_1_phase += self._formant_1_frequency
            if self._formant_1_phase >= 1.0:
                self._formant_1_phase -= 1.0
            self._formant_2_phase += self._formant_2_frequency
            if self._formant_2_phase >= 1.0:
                self._formant_2_phase -= 1.0

        carrier = sine(self._carrier_phase * 0.5 + 0.25) + 1.0
        reset_phase = 0.75 - 0.25 * self._carrier_shape
        reset_amplitude = sine(reset_phase)
        formant_0 = sine(self._formant_1_phase + reset_phase) - reset_amplitude
        formant_1 = sine(self._formant_2_phase + reset_phase) - reset_amplitude
        return carrier * (formant_0 + formant_1) * 0.25 + reset_amplitude

    def _normalize(self, value):
        return min(value / self._sample_rate, _LIMIT)

    @property
    def freq(self):
        """Carrier frequency in Hz, at most a quarter of the sample rate."""
        return self._carrier_frequency * self._sample_rate

    @freq.setter
    def freq(self, value):
        self._carrier_frequency = self._normalize(value)

    @property
    def form1_freq(self):
        """First formant frequency in Hz, at most a quarter of the sample rate."""
        return self._formant_1_frequency * self._sample_rate

    @form1_freq.setter
    def form1_freq(self, value):
        self._formant_1_frequency = self._normalize(value)

    @property
    def form2_freq(self):
        """Second formant frequency in Hz, at most a quarter of the sample rate."""
        return self._formant_2_frequency * self._sample_rate

    @form2_freq.setter
    def form2_freq(self, value):
        self._formant_2_frequency = self._normalize(value)

    @property
    def shape(self):
        """Waveshape; works from -1 to 1."""
        return self._carrier_shape

    @shape.setter
    def shape(self, value):
        self._carrier_shape = value