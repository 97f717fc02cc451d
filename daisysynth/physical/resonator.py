"""Modal resonant body: a bank of band-pass state variable filters."""

import enum
import math

from daisysynth.dspmath import TWO_PI, clamp

_PI_POW3 = math.pi**3
_PI_POW5 = _PI_POW3 * math.pi * math.pi
_TAN_A = 3.260e-01 * _PI_POW3
_TAN_B = 1.823e-01 * _PI_POW5

_MAX_NUM_MODES = 24
_MODE_BATCH_SIZE = 4
_RATIO_FRAC = 1.0 / 12.0
_STIFF_FRAC_2 = 1.0 / 0.6


class FilterMode(enum.IntEnum):
    """Response taken from a :class:`ResonatorSvf`."""

    LOW_PASS = 0
    BAND_PASS = 1
    BAND_PASS_NORMALIZED = 2
    HIGH_PASS = 3


def _fasttan(f):
    f2 = f * f
    return f * (math.pi + f2 * (_TAN_A + _TAN_B * f2))


class ResonatorSvf:
    """A batch of ``batch_size`` state variable filters fed by one input.

    Frequencies are given in cycles per sample.
    """

    def __init__(self, batch_size):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self._batch_size = batch_size
        self._state_1 = [0.0] * batch_size
        self._state_2 = [0.0] * batch_size

    def reset(self):
        """Clear the state of every filter in the batch."""
        self._state_1 = [0.0] * self._batch_size
        self._state_2 = [0.0] * self._batch_size

    def process(self, f, q, gain, sample, mode=FilterMode.BAND_PASS):
        """Run ``sample`` through every filter and return the weighted sum.

        ``f``, ``q`` and ``gain`` each hold one value per filter. Low-pass
        mode sums the low-pass outputs; every other mode sums band-pass.
        """
        f, q, gain = list(f), list(q), list(gain)
        n = self._batch_size
        if not len(f) == len(q) == len(gain) == n:
            raise ValueError(f"f, q and gain must each hold {n} values")
        low_pass = mode == FilterMode.LOW_PASS
        s_out = 0.0
        for i, (fi, qi, gi) in enumerate(zip(f, q, gain)):
            g = _fasttan(fi)
            r = 1.0 / qi
            h = 1.0 / (1.0 + r * g + g * g)
            s1 = self._state_1[i]
            s2 = self._state_2[i]
            hp = (sample - (r + g) * s1 - s2) * h
            bp = g * hp + s1
            self._state_1[i] = g * hp + bp
            lp = g * bp + s2
            self._state_2[i] = g * bp + lp
            s_out += gi * (lp if low_pass else bp)
        return s_out


def _nth_harmonic_compensation(n, stiffness):
    stretch_factor = 1.0
    for _ in range(n - 1):
        stretch_factor += stiffness
        stiffness *= 0.93 if stiffness < 0.0 else 0.98
    return 1.0 / stretch_factor


def _calc_stiff(sig):
    if sig < 0.25:
        return -(0.25 - sig) * 0.25
    if sig < 0.3:
        return 0.0
    if sig < 0.9:
        return (sig - 0.3) * _STIFF_FRAC_2
    sig = (sig - 0.9) * 10.0
    sig *= sig
    return 1.5 - math.cos(sig * math.pi) * 0.5


class Resonator:
    """Resonant body simulated by up to 24 band-pass modes.

    ``position`` (0-1) offsets the phase of the mode amplitudes and
    ``resolution`` sets how many modes run; only whole batches of four
    modes are heard.
    """

    def __init__(self, position, resolution, sample_rate):
        self._sample_rate = sample_rate
        self._frequency = 0.0
        self._structure = 0.0
        self._brightness = 0.0
        self._damping = 0.0
        self.freq = 440.0
        self.structure = 0.5
        self.brightness = 0.5
        self.damping = 0.5

        self._resolution = int(min(resolution, _MAX_NUM_MODES))
        amplitude = math.cos(position * TWO_PI) * 0.25
        self._mode_amplitude = [amplitude] * max(self._resolution, 0) + [0.0] * (
            _MAX_NUM_MODES - max(self._resolution, 0)
        )
        self._mode_filters = [
            ResonatorSvf(_MODE_BATCH_SIZE)
            for _ in range(_MAX_NUM_MODES // _MODE_BATCH_SIZE)
        ]

    def process(self, sample):
        """Excite the body with one sample and return the output."""
        out = 0.0
        stiffness = _calc_stiff(self._structure)
        f0 = self._frequency * _nth_harmonic_compensation(3, stiffness)
        brightness = self._brightness

        harmonic = f0
        stretch_factor = 1.0
        q_sqrt = 2.0 ** (self._damping * 79.7 * _RATIO_FRAC)
        q = 500.0 * q_sqrt * q_sqrt
        brightness *= 1.0 - self._structure * 0.3
        brightness *= 1.0 - self._damping * 0.3
        q_loss = brightness * (2.0 - brightness) * 0.85 + 0.15

        mode_f, mode_q, mode_a = [], [], []
        filters = iter(self._mode_filters)

        for amplitude in self._mode_amplitude[: self._resolution]:
            mode_frequency = min(harmonic * stretch_factor, 0.499)
            mode_attenuation = 1.0 - mode_frequency * 2.0
            mode_f.append(mode_frequency)
            mode_q.append(1.0 + mode_frequency * q)
            mode_a.append(amplitude * mode_attenuation)

            if len(mode_f) == _MODE_BATCH_SIZE:
                out += next(filters).process(
                    mode_f, mode_q, mode_a, sample, FilterMode.BAND_PASS
                )
                mode_f, mode_q, mode_a = [], [], []

            stretch_factor += stiffness
            # Keep partials from folding back into negative frequencies, and
            # add a few extra partials at the top when stiffness is positive.
            stiffness *= 0.93 if stiffness < 0.0 else 0.98
            harmonic += f0
            q *= q_loss

        return out

    @property
    def freq(self):
        """Root frequency in Hz."""
        return self._frequency * self._sample_rate

    @freq.setter
    def freq(self, value):
        self._frequency = value / self._sample_rate

    @property
    def structure(self):
        """General character (stiffness) between 0 and 1."""
        return self._structure

    @structure.setter
    def structure(self, value):
        self._structure = clamp(value, 0.0, 1.0)

    @property
    def brightness(self):
        """Brightness between 0 and 1."""
        return self._brightness

    @brightness.setter
    def brightness(self, value):
        self._brightness = clamp(value, 0.0, 1.0)

    @property
    def damping(self):
        """Decay control between 0 and 1."""
        return self._damping

    @damping.setter
    def damping(self, value):
        self._damping = clamp(value, 0.0, 1.0)