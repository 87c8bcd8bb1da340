[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genalgo"
version = "1.0.0"
description = "Small dense neural networks evolved by a genetic algorithm, with a price-direction problem built on technical indicators"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "genetic-algorithm",
    "neural-network",
    "neuroevolution",
    "technical-indicators",
    "rsi",
    "ema",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
genalgo = "genalgo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["genalgo"]

[tool.hatch.build.targets.sdist]
include = ["genalgo", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
