"""Physically modelled dripping water."""

import math
import random

from daisysynth.dspmath import TWO_PI

_SOUND_DECAY = 0.95
_SYSTEM_DECAY = 0.996
_GAIN = 1.0
_NUM_SOURCES = 10.0
_CENTER_FREQS = (450.0, 600.0, 750.0)
_RESON = 0.9985
_FREQ_SWEEP = 1.0001
_MAX_SHAKE = 2000.0
_RAND_RANGE = 2147483648
_HALF_RAND = 1073741823.0
# Offsets of the re-drawn resonator frequencies, relative to the second one.
_DROP_OFFSETS = (0.75, 1.0, 1.25)
# Gain above which a resonator's centre frequency keeps sweeping upwards.
_SWEEP_THRESHOLDS = (0.001, 0.0, 0.001)


class Drip:
    """Dripping water from randomly retuned resonators fed by decaying noise.

    ``dettack`` is the time in seconds after which the excitation stops.
    ``rng`` is any object with a ``random()`` method returning values in
    [0, 1); a fresh :class:`random.Random` is used when none is given.
    """

    def __init__(self, sample_rate, dettack, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self._sample_rate = sample_rate
        self._dettack = dettack
        self._start()

    def _start(self):
        tpidsr = TWO_PI / self._sample_rate
        self._num_tubes = 10.0
        self._damp = 0.2
        self._shake_max = 0.0
        self._targets = (450.0, 600.0, 720.0)
        self._amp = 0.3
        self._snd_level = 0.0
        self._kloop = self._sample_rate * self._dettack

        self._outputs = [[0.0, 0.0] for _ in _CENTER_FREQS]
        self._center_freqs = list(_CENTER_FREQS)
        self._res_freqs = list(_CENTER_FREQS)
        self._num_objects = _NUM_SOURCES
        self._sound_decay = _SOUND_DECAY
        self._system_decay = _SYSTEM_DECAY
        gain = math.log(_NUM_SOURCES) * _GAIN / _NUM_SOURCES
        self._gains = [gain, gain, gain]
        self._coeffs = [
            [-_RESON * 2.0 * math.cos(freq * tpidsr), _RESON * _RESON]
            for freq in _CENTER_FREQS
        ]

        self._shake_energy = min(self._amp * _MAX_SHAKE * 0.1, _MAX_SHAKE)
        self._shake_damp = 0.0
        self._shake_max_save = 0.0
        self._final_z = [0.0, 0.0, 0.0]

    def _rand(self):
        return int(self._rng.random() * _RAND_RANGE)

    def _random_upto(self, limit):
        return self._rand() % (limit + 1)

    def _noise(self):
        return (self._rand() - (_HALF_RAND + 0.5)) / _HALF_RAND

    def process(self, trigger=False):
        """Return the next sample; a true ``trigger`` starts a new drip."""
        if trigger:
            self._start()
        tpidsr = TWO_PI / self._sample_rate

        if self._num_tubes != 0.0 and self._num_tubes != self._num_objects:
            self._num_objects = max(self._num_tubes, 1.0)
        for i, target in enumerate(self._targets):
            if target != 0.0 and target != self._res_freqs[i]:
                self._res_freqs[i] = target
                self._coeffs[i][0] = -_RESON * 2.0 * math.cos(target * tpidsr)
        if self._damp != 0.0 and self._damp != self._shake_damp:
            self._shake_damp = self._damp
            self._system_decay = _SYSTEM_DECAY + self._shake_damp * 0.002
        if self._shake_max != 0.0 and self._shake_max != self._shake_max_save:
            self._shake_max_save = self._shake_max
            self._shake_energy = min(
                self._shake_energy + self._shake_max_save * _MAX_SHAKE * 0.1,
                _MAX_SHAKE,
            )

        self._kloop -= 1.0
        if self._kloop == 0.0:
            self._shake_energy = 0.0

        self._shake_energy *= self._system_decay
        snd_level = self._shake_energy

        if self._random_upto(32767) < self._num_objects:
            which = min(self._random_upto(3), 2)
            self._center_freqs[which] = self._res_freqs[1] * (
                _DROP_OFFSETS[which] + 0.25 * self._noise()
            )
            self._gains[which] = abs(self._noise())

        for i, threshold in enumerate(_SWEEP_THRESHOLDS):
            self._gains[i] *= _RESON
            if self._gains[i] > threshold:
                self._center_freqs[i] *= _FREQ_SWEEP
                self._coeffs[i][0] = -_RESON * 2.0 * math.cos(
                    self._center_freqs[i] * tpidsr
                )

        snd_level *= self._sound_decay
        excitation = snd_level * self._noise()

        first = self._outputs[0]
        coeffs = self._coeffs[0]
        value = excitation * self._gains[0] - first[0] * coeffs[0] - first[1] * coeffs[1]
        self._outputs[0] = [value, first[0]]
        # The second and third resonators latch an input that is never fed,
        # so their outputs stay at zero.
        for i in (1, 2):
            self._outputs[i] = [0.0, self._outputs[i][0]]

        data = sum(gain * out[0] for gain, out in zip(self._gains, self._outputs))

        self._final_z = [data * 4.0] + self._final_z[:2]
        self._snd_level = snd_level
        return (self._final_z[2] - self._final_z[0]) * 0.005