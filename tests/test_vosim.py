import math

import pytest

from daisysynth.synthesis.vosim import VosimOscillator

SR = 48000.0


def run(osc, n):
    return [osc.process() for _ in range(n)]


def test_defaults():
    osc = VosimOscillator(SR)
    assert osc.freq == pytest.approx(105.0)
    assert osc.form1_freq == pytest.approx(1390.0)
    assert osc.form2_freq == pytest.approx(817.0)
    assert osc.shape == 0.5


@pytest.mark.parametrize("name", ["freq", "form1_freq", "form2_freq"])
def test_frequencies_limited_to_quarter_rate(name):
    osc = VosimOscillator(SR)
    setattr(osc, name, 20000.0)
    assert getattr(osc, name) == pytest.approx(SR / 4)


def test_output_is_bounded():
    out = run(VosimOscillator(SR), 5000)
    assert all(math.isfinite(v) for v in out)
    assert max(abs(v) for v in out) <= 3.0


def test_deterministic():
    first = run(VosimOscillator(SR), 500)
    second = run(VosimOscillator(SR), 500)
    assert first == second
    assert max(abs(v) for v in first) > 0.0


def test_shape_changes_output():
    a = VosimOscillator(SR)
    b = VosimOscillator(SR)
    b.shape = -0.5
    assert run(a, 200) != run(b, 200)