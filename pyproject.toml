[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubelogic"
version = "0.1.0"
description = "Bit-set families, cube operations, sharp products and variable pairing for two-level logic, with DIMACS solution parsing"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "logic minimization",
    "two-level logic",
    "cubes",
    "covers",
    "sharp product",
    "karnaugh map",
    "variable pairing",
    "DIMACS",
]
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
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubelogic"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
