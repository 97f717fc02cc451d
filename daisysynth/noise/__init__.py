"""Noise sources and noisy generators."""