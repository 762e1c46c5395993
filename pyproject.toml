[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakegate"
version = "0.1.0"
description = "A terminal snake game with gates, items and four stages"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "curses", "terminal", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakegate = "snakegate.game:main"

[tool.hatch.build.targets.wheel]
packages = ["snakegate"]

[tool.pytest.ini_options]
addopts = "-ra"
