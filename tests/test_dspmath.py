import pytest

from daisysynth.dspmath import clamp, next_blep_sample, sine, this_blep_sample


@pytest.mark.parametrize(
    "value, low, high, expected",
    [(0.5, 0.0, 1.0, 0.5), (-3.0, 0.0, 1.0, 0.0), (7.0, 0.0, 1.0, 1.0)],
)
def test_clamp(value, low, high, expected):
    assert clamp(value, low, high) == expected


def test_sine_quarter_turn_peaks():
    assert sine(0.25) == pytest.approx(1.0)
    assert sine(0.0) == pytest.approx(0.0)


def test_sine_is_periodic():
    for phase in (0.1, 0.37, 0.8):
        assert sine(phase + 1.0) == pytest.approx(sine(phase), abs=1e-12)


def test_sine_is_odd():
    for phase in (0.1, 0.2, 0.45):
        assert sine(-phase) == pytest.approx(-sine(phase))


def test_blep_edges_vanish():
    assert this_blep_sample(0.0) == 0.0
    assert next_blep_sample(1.0) == 0.0


@pytest.mark.parametrize("t", [0.0, 0.1, 0.5, 0.9, 1.0])
def test_blep_halves_mirror(t):
    assert this_blep_sample(t) == pytest.approx(-next_blep_sample(1.0 - t))


def test_blep_signs():
    for t in (0.2, 0.6):
        assert this_blep_sample(t) > 0.0
        assert next_blep_sample(t) < 0.0