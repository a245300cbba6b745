[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeon_designer"
version = "1.0.0"
description = "Generate tabletop RPG dungeons with random room layouts and encounters"
requires-python = ">=3.10"
dependencies = []
keywords = ["dungeon", "rpg", "tabletop", "generator", "graph"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeon-designer = "dungeon_designer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeon_designer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
