"""Filters: state-variable, one-pole, biquad, comb, allpass, modal, FIR, ladder and non-linear."""