[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eightpuzzle"
version = "0.1.0"
description = "An 8-puzzle solver using breadth-first and depth-limited search over a state tree"
requires-python = ">=3.10"
keywords = ["8-puzzle", "sliding puzzle", "search", "breadth-first", "depth-first"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eightpuzzle = "eightpuzzle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eightpuzzle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
