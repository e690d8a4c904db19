[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubekit"
version = "0.1.0"
description = "Map validation, XPM texture loading and colour utilities for a grid-based raycasting game"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "xpm", "map", "cub", "game", "textures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
