[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xastle"
version = "0.1.0"
description = "Backend-independent core of a side-scrolling platformer: animation state machines, input tracking, sprite geometry and a scrolling background."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "state-machine", "animation", "side-scroller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xastle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
