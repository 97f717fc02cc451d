"""Sample-by-sample audio filters, noise sources, physical models and oscillators."""

__version__ = "0.1.0"