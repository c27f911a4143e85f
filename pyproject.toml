[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "problemset"
version = "0.1.0"
description = "Solutions to classic algorithmic problems: sorting, searching, dynamic programming, graphs and modular arithmetic."
requires-python = ">=3.10"
keywords = [
    "algorithms",
    "competitive-programming",
    "dynamic-programming",
    "graphs",
    "modular-arithmetic",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
problemset = "problemset.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["problemset"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
