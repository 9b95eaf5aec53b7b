[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loguekit"
version = "0.1.0"
description = "DSP primitives, wave table lookups and the user program header for logue-style oscillators and effects"
requires-python = ">=3.10"
dependencies = []
keywords = ["dsp", "synthesizer", "oscillator", "biquad", "lfo", "delay", "fixed-point", "wavetable", "audio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["loguekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
