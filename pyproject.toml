[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chesspane"
version = "0.1.0"
description = "A drag-and-drop chessboard in a pygame window, set up from FEN positions"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["chess", "board", "fen", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chesspane = "chesspane.game:main"

[tool.hatch.build.targets.wheel]
packages = ["chesspane"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
