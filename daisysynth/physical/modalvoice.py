"""Modal synthesis voice: mallet click through a low-pass into a resonator."""

import random

from daisysynth.dspmath import clamp
from daisysynth.noise.dust import Dust
from daisysynth.physical.resonator import FilterMode, Resonator, ResonatorSvf

_ONE_TWELFTH = 1.0 / 12.0


class ModalVoice:
    """Struck modal resonator; with sustain on it is excited by dust noise.

    ``rng`` is any object with a ``random()`` method returning values in
    [0, 1); a fresh :class:`random.Random` is used when none is given.
    """

    def __init__(self, sample_rate, rng=None):
        self._sample_rate = sample_rate
        self._aux = 0.0
        self._trig = False
        self._excitation_filter = ResonatorSvf(1)
        self._resonator = Resonator(0.015, 24, sample_rate)
        self._dust = Dust(rng if rng is not None else random.Random())

        self._sustain = False
        self._freq = 0.0
        self._f0 = 0.0
        self._accent = 0.0
        self._brightness = 0.0
        self._density = 0.0
        self._damping = 0.0
        self.freq = 440.0
        self.accent = 0.3
        self.structure = 0.6
        self.brightness = 0.8
        self.damping = 0.6

    def trig(self):
        """Strike the resonator on the next call to :meth:`process`."""
        self._trig = True

    def process(self, trigger=False):
        """Return the next sample; ``trigger`` strikes the resonator."""
        accent = self._accent
        brightness = self._brightness + 0.25 * accent * (1.0 - self._brightness)
        damping = self._damping + 0.25 * accent * (1.0 - self._damping)

        sustain = self._sustain
        tone_range = 36.0 if sustain else 60.0
        f = 4.0 * self._f0 if sustain else 2.0 * self._f0
        cutoff = min(
            f
            * 2.0
            ** (_ONE_TWELFTH * ((brightness * (2.0 - brightness) - 0.5) * tone_range)),
            0.499,
        )
        q = 0.7 if sustain else 1.5

        temp = 0.0
        if sustain:
            dust_f = 0.00005 + 0.99995 * self._density * self._density
            self._dust.density = dust_f
            temp = self._dust.process() * (4.0 - dust_f * 3.0) * accent
        elif trigger or self._trig:
            attenuation = 1.0 - damping * 0.5
            amplitude = (0.12 + 0.08 * accent) * attenuation
            temp = amplitude * 2.0 ** (_ONE_TWELFTH * (cutoff * cutoff * 24.0)) / cutoff
            self._trig = False

        temp = self._excitation_filter.process(
            [cutoff], [q], [1.0], temp, FilterMode.LOW_PASS
        )
        self._aux = temp

        self._resonator.brightness = brightness
        self._resonator.damping = damping
        return self._resonator.process(temp)

    @property
    def sustain(self):
        """When true, the resonator is continually excited with noise."""
        return self._sustain

    @sustain.setter
    def sustain(self, value):
        self._sustain = bool(value)

    @property
    def freq(self):
        """Root frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, value):
        self._freq = value
        self._resonator.freq = value
        self._f0 = clamp(value / self._sample_rate, 0.0, 0.25)

    @property
    def accent(self):
        """Strike strength between 0 and 1."""
        return self._accent

    @accent.setter
    def accent(self, value):
        self._accent = clamp(value, 0.0, 1.0)

    @property
    def structure(self):
        """General character of the resonator between 0 and 1."""
        return self._resonator.structure

    @structure.setter
    def structure(self, value):
        self._resonator.structure = value

    @property
    def brightness(self):
        """Brightness and noise density between 0 and 1."""
        return self._brightness

    @brightness.setter
    def brightness(self, value):
        self._brightness = clamp(value, 0.0, 1.0)
        self._density = self._brightness * self._brightness

    @property
    def damping(self):
        """Decay control between 0 and 1."""
        return self._damping

    @damping.setter
    def damping(self, value):
        self._damping = clamp(value, 0.0, 1.0)

    @property
    def aux(self):
        """Raw excitation signal of the last call to :meth:`process`."""
        return self._aux