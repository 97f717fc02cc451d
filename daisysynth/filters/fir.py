"""Direct-form FIR filter with internally allocated state."""


class FirFilter:
    """FIR filter of up to ``max_size`` taps, processing up to ``max_block``
    samples per block.

    Coefficients are stored tail-first: the last coefficient multiplies the
    newest input sample.  :meth:`set_ir` can reverse an impulse response given
    in natural order.
    """

    def __init__(self, max_size, max_block):
        if max_size <= 0 or max_block <= 0:
            raise ValueError("max_size and max_block must be positive")
        self._max_size = max_size
        self._max_block = max_block
        self._state = [0.0] * (max_size + max_block - 1)
        self._coefs = [0.0] * max_size
        self._size = 0

    @property
    def latency(self):
        """Processing latency in samples; always zero for a FIR filter."""
        return 0

    def reset(self):
        """Clear the filter state but keep the coefficients."""
        self._state = [0.0] * len(self._state)

    def set_ir(self, ir, reverse):
        """Load an impulse response, silently truncated to ``max_size`` taps.

        With ``reverse`` set, ``ir`` is taken in natural order and reversed;
        otherwise it is copied as given (tail-first).
        """
        ir = list(ir)
        size = min(len(ir), self._max_size)
        if reverse:
            # Read from the end of the whole response, not the truncated one.
            coefs = ir[::-1][:size]
        else:
            coefs = ir[:size]
        self._coefs = coefs + [0.0] * (self._max_size - size)
        self._size = size
        self.reset()

    def _require_coefficients(self):
        if self._size == 0:
            raise ValueError("no impulse response has been set")

    def process(self, sample):
        """Filter one sample and return the result."""
        self._require_coefficients()
        size = self._size
        state = self._state
        coefs = self._coefs
        state[size - 1] = sample
        acc = 0.0
        for i in range(size - 1):
            acc += state[i] * coefs[i]
            state[i] = state[i + 1]
        acc += sample * coefs[size - 1]
        return acc

    def process_block(self, samples):
        """Filter a block of samples and return the filtered block as a list."""
        samples = list(samples)
        block = len(samples)
        if block > self._max_block:
            raise ValueError(
                f"block of {block} samples exceeds the maximum of {self._max_block}"
            )
        self._require_coefficients()
        size = self._size
        state = self._state
        coefs = self._coefs[:size]
        out = []
        for j, sample in enumerate(samples):
            state[size - 1 + j] = sample
            window = state[j : j + size]
            out.append(sum(s * c for s, c in zip(window, coefs)))
        state[: size - 1] = state[block : block + size - 1]
        return out