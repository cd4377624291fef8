[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakearcade"
version = "0.1.0"
description = "A grid-based snake arcade game with food, poison and walls, difficulty levels and a saved high score."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["snake", "arcade", "game", "pygame"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakearcade = "snakearcade.main:main"

[tool.hatch.build.targets.wheel]
packages = ["snakearcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
