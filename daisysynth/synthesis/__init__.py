"""Oscillators and synthesis voices."""