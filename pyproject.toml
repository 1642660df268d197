[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minefield"
version = "0.1.0"
description = "A classic minesweeper game with a welcome screen, timer, pause, debug view and a top-five leaderboard."
requires-python = ">=3.10"
keywords = ["minesweeper", "game", "puzzle", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minefield = "minefield.game:main"

[tool.hatch.build.targets.wheel]
packages = ["minefield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
