"""Fast white noise from a multiplicative congruential generator."""

_COEFF = 4.6566129e-010
_MULTIPLIER = 16807


class WhiteNoise:
    """White noise in the range -amp..amp, deterministic from a fixed seed."""

    def __init__(self):
        self._amp = 1.0
        self._seed = 1

    @property
    def amp(self):
        """Output amplitude."""
        return self._amp

    @amp.setter
    def amp(self, value):
        self._amp = value

    def process(self):
        """Return the next noise sample."""
        seed = (self._seed * _MULTIPLIER) & 0xFFFFFFFF
        if seed >= 0x80000000:
            seed -= 0x100000000
        self._seed = seed
        return seed * _COEFF * self._amp