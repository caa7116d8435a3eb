[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "snakestack"
version = "0.1.0"
description = "A two-player terminal snake game built on a position stack, bounded command queues and position lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "curses", "stack", "queue", "linked list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
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
snakestack = "snakestack.game:main"
snakestack-selfcheck = "snakestack.selfcheck:main"

[tool.setuptools.packages.find]
include = ["snakestack*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
