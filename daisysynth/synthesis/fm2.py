"""Two-operator FM voice."""

from daisysynth.synthesis.oscillator import Oscillator, Waveform

_IDX_SCALAR = 0.2
_IDX_SCALAR_RECIP = 1.0 / _IDX_SCALAR


class Fm2:
    """A sine carrier phase-modulated by a sine at a ratio of its frequency."""

    def __init__(self, sample_rate):
        self._car = Oscillator(sample_rate)
        self._mod = Oscillator(sample_rate)
        self._lfreq = 440.0
        self._lratio = 2.0
        self._freq = 0.0
        self._ratio = 0.0
        self.frequency = self._lfreq
        self.ratio = self._lratio
        self._car.amp = 1.0
        self._mod.amp = 1.0
        self._car.waveform = Waveform.SIN
        self._mod.waveform = Waveform.SIN
        self._idx = 1.0

    def process(self):
        """Return the next sample."""
        if self._lratio != self._ratio or self._lfreq != self._freq:
            self._lratio = self._ratio
            self._lfreq = self._freq
            self._car.freq = self._lfreq
            self._mod.freq = self._lfreq * self._lratio

        modval = self._mod.process()
        self._car.phase_add(modval * self._idx)
        return self._car.process()

    @property
    def frequency(self):
        """Carrier frequency in Hz; negative values are made positive."""
        return self._freq

    @frequency.setter
    def frequency(self, value):
        self._freq = abs(value)

    @property
    def ratio(self):
        """Modulator frequency as a multiple of the carrier frequency."""
        return self._ratio

    @ratio.setter
    def ratio(self, value):
        self._ratio = abs(value)

    @property
    def index(self):
        """FM depth; 5 corresponds to a full turn of phase deviation."""
        return self._idx * _IDX_SCALAR_RECIP

    @index.setter
    def index(self, value):
        self._idx = value * _IDX_SCALAR

    def reset(self):
        """Reset both oscillators to zero phase."""
        self._car.reset()
        self._mod.reset()