[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ethrl"
version = "0.1.0"
description = "A small 2D game engine with actors, components, scenes and events, plus a side-scrolling platformer built on it"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "game",
    "engine",
    "2d",
    "platformer",
    "entity-component",
    "pygame",
]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ethrl = "ethrl.game.main:main"

[tool.hatch.build.targets.wheel]
packages = ["ethrl"]

[tool.hatch.build.targets.sdist]
include = [
    "ethrl",
    "tests",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"
