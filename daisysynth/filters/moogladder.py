"""Moog-style four-stage ladder low-pass filter."""

import math

_THERMAL = 0.000025


def _ladder_tanh(x):
    """Cheap saturating curve; identity for negative and small inputs."""
    if x < 0:
        return x
    if x >= 4.0:
        return 1.0
    if x < 0.5:
        return x
    return math.tanh(x)


class MoogLadder:
    """Resonant four-pole ladder low-pass filter, run twice per sample."""

    def __init__(self, sample_rate):
        self._sample_rate = sample_rate
        self._res = 0.4
        self._freq = 1000.0
        self._delay = [0.0] * 6
        self._tanhstg = [0.0] * 3
        self._old_freq = 0.0
        self._old_res = -1.0
        self._old_acr = 0.0
        self._old_tune = 0.0

    def process(self, sample):
        """Filter one sample and return the result."""
        freq = self._freq
        res = max(self._res, 0.0)

        if self._old_freq != freq or self._old_res != res:
            self._old_freq = freq
            fc = freq / self._sample_rate
            f = 0.5 * fc
            fc2 = fc * fc
            fc3 = fc2 * fc2
            fcr = 1.8730 * fc3 + 0.4955 * fc2 - 0.6490 * fc + 0.9988
            acr = -3.9364 * fc2 + 1.8409 * fc + 0.9968
            tune = (1.0 - math.exp(-(2.0 * math.pi * f * fcr))) / _THERMAL
            self._old_res = res
            self._old_acr = acr
            self._old_tune = tune
        else:
            res = self._old_res
            acr = self._old_acr
            tune = self._old_tune

        res4 = 4.0 * res * acr
        delay = self._delay
        tanhstg = self._tanhstg
        stg = [0.0] * 4
        x = sample

        for _ in range(2):
            x -= res4 * delay[5]
            stg[0] = delay[0] + tune * (_ladder_tanh(x * _THERMAL) - tanhstg[0])
            delay[0] = stg[0]
            for k in range(1, 4):
                x = stg[k - 1]
                tanhstg[k - 1] = _ladder_tanh(x * _THERMAL)
                if k != 3:
                    other = tanhstg[k]
                else:
                    other = _ladder_tanh(delay[k] * _THERMAL)
                stg[k] = delay[k] + tune * (tanhstg[k - 1] - other)
                delay[k] = stg[k]
            delay[5] = (stg[3] + delay[4]) * 0.5
            delay[4] = stg[3]

        return delay[5]

    @property
    def freq(self):
        """Cutoff frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, value):
        self._freq = value

    @property
    def res(self):
        """Resonance; negative values act as zero."""
        return self._res

    @res.setter
    def res(self, value):
        self._res = value