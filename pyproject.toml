[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sattools"
version = "0.1.0"
description = "Building blocks for SAT solvers: literals, assignments, trails, VSIDS decisions, restart policies and DIMACS CNF reading."
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "solver", "cnf", "dimacs", "vsids", "luby", "boolean", "union-find"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sattools"]

[tool.pytest.ini_options]
addopts = "-ra"
