[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakegame"
version = "0.1.0"
description = "A classic snake game played in the terminal"
requires-python = ">=3.10"
keywords = ["snake", "game", "terminal", "arcade", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakegame = "snakegame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["snakegame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
