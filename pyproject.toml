[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rummysim"
version = "0.1.0"
description = "Enumerate every legal rummy play for a hand, discard pile and table of played cards"
requires-python = ">=3.10"
dependencies = []
keywords = ["rummy", "cards", "card-game", "simulation"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rummysim = "rummysim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rummysim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
