[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cselab"
version = "0.1.0"
description = "A toroidal Game of Life simulator and a hashed transaction lookup tool"
requires-python = ">=3.10"
keywords = ["game-of-life", "cellular-automaton", "hash-table", "lookup"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
transaction-lookup = "cselab.lookup_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cselab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
