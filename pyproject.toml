[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gossipsim"
version = "0.1.0"
description = "A small simulation of NPCs, their relationships and the gossip they hear"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "npc", "gossip", "relationships", "games"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gossipsim = "gossipsim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["gossipsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
