# daisysynth

A collection of audio building blocks that work one sample at a time:
filters, noise generators, physical models and oscillators. Everything is
plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Layout

- `daisysynth.filters`: `Svf`, `Tone`, `ATone`, `Biquad`, `Allpass`, `Comb`,
  `Mode`, `FirFilter`, `MoogLadder`, `NlFilt`
- `daisysynth.noise`: `WhiteNoise`, `Dust`, `ClockedNoise`,
  `GrainletOscillator`, `Particle`, `FractalRandomGenerator`
- `daisysynth.physical`: `Resonator`, `ResonatorSvf`, `FilterMode`,
  `ModalVoice`, `Drip`
- `daisysynth.synthesis`: `Oscillator`, `Waveform`, `BlOsc`, `BlWaveform`,
  `Fm2`, `FormantOscillator`, `HarmonicOscillator`, `OscillatorBank`,
  `VosimOscillator`, `ZOscillator`
- `daisysynth.dspmath`: shared helpers `clamp`, `sine`, `this_blep_sample`,
  `next_blep_sample` and the constant `TWO_PI`

Each class lives in a module of its own, for example
`daisysynth.filters.svf.Svf` or `daisysynth.synthesis.oscillator.Oscillator`.

## Usage

Most modules are built with the sample rate of the audio engine. Parameters
are properties, and `process()` returns the next sample (`Svf.process()`
updates its `low`, `high`, `band`, `notch` and `peak` outputs instead).

```python
from daisysynth.synthesis.oscillator import Oscillator, Waveform
from daisysynth.filters.svf import Svf

osc = Oscillator(48000)
osc.waveform = Waveform.POLYBLEP_SAW
osc.freq = 220.0
osc.amp = 0.5

flt = Svf(48000)
flt.freq = 1200.0
flt.res = 0.6

block = []
for _ in range(480):
    flt.process(osc.process())
    block.append(flt.low)
```

`FirFilter` and `NlFilt` also work on whole blocks through
`process_block()`, which takes a sequence of samples and returns a list.

Modules that use randomness (`Dust`, `ClockedNoise`, `Particle`,
`ModalVoice`, `Drip`) take an optional object with a `random()` method, such
as a `random.Random` instance, so their output can be reproduced:

```python
import random
from daisysynth.physical.drip import Drip

drip = Drip(48000, 0.09, random.Random(1))
first = drip.process(True)
rest = [drip.process(False) for _ in range(1000)]
```

## What is not included

There is no plucked-string voice and no audio input or output: the package
only computes samples, and playing or recording them is left to the caller.