[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "istree"
version = "0.1.0"
description = "Construct the independent spanning trees of the bubble-sort graph of permutations"
requires-python = ">=3.10"
dependencies = []
keywords = ["independent spanning trees", "permutations", "bubble-sort graph", "interconnection networks", "graph theory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
istree = "istree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["istree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
