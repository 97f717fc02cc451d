"""Fractal noise: octave-spaced noise sources summed with decaying gains."""

from daisysynth.dspmath import clamp


class FractalRandomGenerator:
    """Stack of ``order`` noise sources, each an octave above the last.

    ``factory`` is called with the sample rate to build each source; a source
    must have a writable ``freq`` attribute in Hz and a ``process()`` method.
    """

    def __init__(self, factory, order, sample_rate):
        if order < 1:
            raise ValueError("order must be at least 1")
        self._sample_rate = sample_rate
        self._decay = 0.0
        self._frequency = 0.0
        self.color = 0.5
        self.freq = 440.0
        self._generators = [factory(sample_rate) for _ in range(order)]

    def process(self):
        """Return the next sample."""
        gain = 0.5
        total = 0.0
        frequency = self._frequency
        for generator in self._generators:
            generator.freq = frequency
            total += generator.process() * gain
            gain *= self._decay
            frequency *= 2.0
        return total

    @property
    def freq(self):
        """Frequency of the lowest source in Hz, limited to 0..sample_rate."""
        return self._frequency

    @freq.setter
    def freq(self, value):
        self._frequency = clamp(value, 0.0, self._sample_rate)

    @property
    def color(self):
        """Amount of high-frequency noise: 0 is darkest, 1 brightest."""
        return self._decay

    @color.setter
    def color(self, value):
        self._decay = clamp(value, 0.0, 1.0)