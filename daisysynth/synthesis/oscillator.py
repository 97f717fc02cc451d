"""Multi-waveform oscillator, with naive and polyBLEP band-limited shapes."""

import enum
import math

from daisysynth.dspmath import TWO_PI

_TWO_PI_RECIP = 1.0 / TWO_PI


class Waveform(enum.IntEnum):
    """Output waveforms; the POLYBLEP ones are band-limited."""

    SIN = 0
    TRI = 1
    SAW = 2
    RAMP = 3
    SQUARE = 4
    POLYBLEP_TRI = 5
    POLYBLEP_SAW = 6
    POLYBLEP_SQUARE = 7


def _polyblep(phase_inc, t):
    dt = phase_inc * _TWO_PI_RECIP
    if t < dt:
        t /= dt
        return t + t - t * t - 1.0
    if t > 1.0 - dt:
        t = (t - 1.0) / dt
        return t * t + t + t + 1.0
    return 0.0


class Oscillator:
    """Oscillator with phase in radians; defaults to a 100 Hz sine at 0.5."""

    def __init__(self, sample_rate):
        self._sr = sample_rate
        self._sr_recip = 1.0 / sample_rate
        self._amp = 0.5
        self._phase = 0.0
        self._freq = 100.0
        self._phase_inc = self._calc_phase_inc(self._freq)
        self._waveform = Waveform.SIN
        self._eoc = True
        self._eor = True
        self._last_out = 0.0

    def _calc_phase_inc(self, f):
        return TWO_PI * f * self._sr_recip

    def process(self):
        """Return the next sample and advance the phase."""
        phase = self._phase
        inc = self._phase_inc
        wf = self._waveform
        if wf is Waveform.SIN:
            out = math.sin(phase)
        elif wf is Waveform.TRI:
            t = -1.0 + 2.0 * phase * _TWO_PI_RECIP
            out = 2.0 * (abs(t) - 0.5)
        elif wf is Waveform.SAW:
            out = -1.0 * (phase * _TWO_PI_RECIP * 2.0 - 1.0)
        elif wf is Waveform.RAMP:
            out = phase * _TWO_PI_RECIP * 2.0 - 1.0
        elif wf is Waveform.SQUARE:
            out = 1.0 if phase < math.pi else -1.0
        elif wf is Waveform.POLYBLEP_TRI:
            t = phase * _TWO_PI_RECIP
            out = 1.0 if phase < math.pi else -1.0
            out += _polyblep(inc, t)
            out -= _polyblep(inc, math.fmod(t + 0.5, 1.0))
            # Leaky integrator turns the square into a triangle.
            out = inc * out + (1.0 - inc) * self._last_out
            self._last_out = out
        elif wf is Waveform.POLYBLEP_SAW:
            t = phase * _TWO_PI_RECIP
            out = 2.0 * t - 1.0
            out -= _polyblep(inc, t)
            out *= -1.0
        else:
            t = phase * _TWO_PI_RECIP
            out = 1.0 if phase < math.pi else -1.0
            out += _polyblep(inc, t)
            out -= _polyblep(inc, math.fmod(t + 0.5, 1.0))
            out *= 0.707

        self._phase += inc
        if self._phase > TWO_PI:
            self._phase -= TWO_PI
            self._eoc = True
        else:
            self._eoc = False
        self._eor = self._phase - inc < math.pi <= self._phase
        return out * self._amp

    @property
    def freq(self):
        """Frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, value):
        self._freq = value
        self._phase_inc = self._calc_phase_inc(value)

    @property
    def amp(self):
        """Output amplitude."""
        return self._amp

    @amp.setter
    def amp(self, value):
        self._amp = value

    @property
    def waveform(self):
        """Current :class:`Waveform`; unknown values select the sine."""
        return self._waveform

    @waveform.setter
    def waveform(self, value):
        try:
            self._waveform = Waveform(value)
        except ValueError:
            self._waveform = Waveform.SIN

    @property
    def is_eor(self):
        """True if the last :meth:`process` call crossed the end of the rise."""
        return self._eor

    @property
    def is_eoc(self):
        """True if the last :meth:`process` call completed a cycle."""
        return self._eoc

    @property
    def is_rising(self):
        """True while in the first half of the cycle."""
        return self._phase < math.pi

    @property
    def is_falling(self):
        """True while in the second half of the cycle."""
        return self._phase >= math.pi

    def phase_add(self, phase):
        """Add ``phase`` cycles (1.0 is a full turn) to the current phase."""
        self._phase += phase * TWO_PI

    def reset(self, phase=0.0):
        """Set the phase, in radians."""
        self._phase = phase