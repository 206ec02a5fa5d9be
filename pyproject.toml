[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazeclick"
version = "0.1.0"
description = "A terminal maze explorer: generate a maze, click to place a player and a goal, and watch A* find the way."
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "a-star", "pathfinding", "terminal", "console", "curses", "game", "game-engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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

[project.scripts]
mazeclick = "mazeclick.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mazeclick"]

[tool.hatch.build.targets.sdist]
include = ["mazeclick", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
