"""Dobson/Fitch non-linear filter working on blocks of samples."""

import math

MAX_DELAY = 1024
_MAXAMP = 1.935125


class NlFilt:
    """Non-linear filter following ``Y[n] = tanh(a Y[n-1] + b Y[n-2] +
    d Y[n-L]^2 + X[n] - C)``.

    The coefficients are the public attributes ``a``, ``b``, ``d``, ``c`` and
    ``l``; ``l`` is limited to 1..1024 when a block is processed.
    """

    def __init__(self):
        self.a = 0.0
        self.b = 0.0
        self.d = 0.0
        self.c = 0.0
        self.l = 0.0
        self._point = 0
        self._delay = [0.0] * MAX_DELAY

    def reset(self):
        """Clear the delay line and rewind the write position."""
        self._point = 0
        self._delay = [0.0] * MAX_DELAY

    def set_coefficients(self, a, b, d, c, l):
        """Set all five filter coefficients at once."""
        self.a = a
        self.b = b
        self.d = d
        self.c = c
        self.l = l

    def process_block(self, samples):
        """Filter a block of samples and return the filtered block as a list."""
        a, b, d, c = self.a, self.b, self.d, self.c
        fp = self._delay
        point = self._point

        lag = self.l
        if lag < 1.0:
            lag = 1.0
        elif lag >= MAX_DELAY:
            lag = float(MAX_DELAY)

        nm1 = point % MAX_DELAY
        nm2 = (point - 1) % MAX_DELAY
        nml = (point - int(lag) - 1) % MAX_DELAY
        ynm1 = fp[nm1]
        ynm2 = fp[nm2]
        ynml = fp[nml]

        dvmaxamp = 1.0 / _MAXAMP
        maxampd2 = _MAXAMP * 0.5
        out = []
        for sample in samples:
            yn = a * ynm1 + b * ynm2 + d * ynml * ynml - c
            yn += sample * dvmaxamp
            outv = yn * maxampd2
            if outv > _MAXAMP:
                outv = maxampd2
            elif outv < -_MAXAMP:
                outv = -maxampd2
            out.append(outv)

            point = (point + 1) % MAX_DELAY
            yn = math.tanh(yn)
            fp[point] = yn
            nml = (nml + 1) % MAX_DELAY
            ynm2 = ynm1
            ynm1 = yn
            ynml = fp[nml]

        self._point = point
        return out