[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spriteworks"
version = "0.1.0"
description = "Building blocks for 2D sprite games: vectors and collision shapes, actors and components, timed events, key input, and Pillow-backed images and sprite sheets"
requires-python = ">=3.10"
keywords = ["game", "2d", "sprite", "collision", "actor", "input"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["spriteworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
