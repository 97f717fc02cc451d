"""Small numeric helpers shared by the oscillators and filters."""

import math

TWO_PI = 2.0 * math.pi


def clamp(value, low, high):
    """Return ``value`` limited to the closed range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def sine(phase):
    """Sine of a phase given in cycles (1.0 is one full turn)."""
    return math.sin(phase * TWO_PI)


def this_blep_sample(t):
    """Band-limited step correction for the sample where the step occurs."""
    return 0.5 * t * t


def next_blep_sample(t):
    """Band-limited step correction for the sample after the step."""
    t = 1.0 - t
    return -0.5 * t * t