[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daisysynth"
version = "0.1.0"
description = "Sample-by-sample audio filters, noise sources, physical models and oscillators"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "synthesis", "filter", "oscillator", "physical-modeling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["daisysynth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
