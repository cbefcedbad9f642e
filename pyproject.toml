[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "streetchase"
version = "0.1.0"
description = "Headless game logic for a top-down city chase: player, police, pedestrians, cars and pickups on a Tiled JSON map."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "top-down", "pathfinding", "a-star", "quadtree", "simulation", "tiled"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
streetchase = "streetchase.world:main"

[tool.hatch.build.targets.wheel]
packages = ["streetchase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
