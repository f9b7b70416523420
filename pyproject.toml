[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diskchannels"
version = "0.1.0"
description = "Random unit disk graphs, node loads and a Markov-chain model of per-node throughput under a radio channel allocation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "unit disk graph",
    "channel allocation",
    "wireless networks",
    "glauber dynamics",
    "independent sets",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
diskchannels = "diskchannels.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["diskchannels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
