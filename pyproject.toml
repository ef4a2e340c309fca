[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termarcade"
version = "0.1.0"
description = "Two small terminal arcade games: Space Invaders and Frogger"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "arcade", "space-invaders", "frogger", "console"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termarcade = "termarcade.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termarcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
