[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "k2dyn"
version = "0.1.0"
description = "Building blocks for dynamic k2-trees: Morton codes, stacks, vectors and query scratch state"
requires-python = ">=3.10"
dependencies = []
keywords = ["k2-tree", "morton code", "z-order", "succinct data structures", "sparse matrix"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["k2dyn"]

[tool.pytest.ini_options]
addopts = "-ra"
