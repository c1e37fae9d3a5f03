[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gapalgo"
version = "0.1.0"
description = "Small algorithm toolkit: intervals, distributions, multisets, heaps, graphs, local alignment and line fitting"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graph",
    "fibonacci-heap",
    "smith-waterman",
    "interval",
    "disjoint-set",
    "multiset",
    "spanning-tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gapalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
