[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nureweight"
version = "0.1.0"
description = "Systematic tweak dials, one-sigma uncertainties and an event reweighting driver for neutrino interaction simulations"
requires-python = ">=3.10"
dependencies = []
keywords = ["neutrino", "reweighting", "systematics", "physics", "monte-carlo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nureweight"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
