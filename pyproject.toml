[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortedsample"
version = "0.1.0"
description = "Linear-time weighted resampling with replacement, yielding indices in ascending order"
requires-python = ">=3.10"
dependencies = []
keywords = ["sampling", "resampling", "monte-carlo", "statistics", "particle-filter", "order-statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
sortedsample-quick-start = "sortedsample.quick_start:main"

[tool.hatch.build.targets.wheel]
packages = ["sortedsample"]

[tool.pytest.ini_options]
addopts = "-ra"
