[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cnake"
version = "0.1.0"
description = "A classic snake game played in the terminal with WASD keys"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "arcade", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
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
cnake = "cnake.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cnake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
