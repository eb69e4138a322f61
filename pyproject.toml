[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svscraft"
version = "0.1.0"
description = "Music time, tempo map, pitch, mode and decibel utilities for music editing tools"
requires-python = ">=3.10"
keywords = ["music", "timeline", "tempo", "time signature", "pitch", "scale", "decibel"]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["svscraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
