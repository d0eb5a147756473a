[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mage"
version = "0.1.0"
description = "A small game engine core: vector and matrix maths, entities and components, simple physics, mesh generation, OBJ loading and a binary network message format."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "game-engine",
    "entity-component",
    "physics",
    "collision",
    "mesh",
    "obj",
    "vector",
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mage"]

[tool.pytest.ini_options]
addopts = "-ra"
