[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "comboboxes"
version = "0.1.0"
description = "Game rules for a 2D puzzle platformer about merging boxes: merge rules, players, elevators, lights and level building."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "platformer", "boxes", "merging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["comboboxes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
