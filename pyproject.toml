[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "harpsynth"
version = "0.1.0"
description = "Wavetable harp voices with ADSR envelopes, note players and debounced sensor watching"
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesis", "wavetable", "adsr", "envelope", "harp", "audio", "dac", "debounce"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["harpsynth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
