[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heartmaze"
version = "0.1.0"
description = "A two-stage terminal maze game: collect hearts, then stars, and find the exit."
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["game", "maze", "terminal", "console", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
test = [
    "pytest",
]

[project.scripts]
heartmaze = "heartmaze.game:main"

[tool.hatch.build.targets.wheel]
packages = ["heartmaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
