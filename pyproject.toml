[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "satoriui"
version = "0.1.0"
description = "Layout, slider, knob, waveform and keymap models for a string synthesizer user interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesizer", "ui", "layout", "midi", "knob", "slider", "waveform"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["satoriui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
