[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic data structures and algorithms: trees, heaps, hash tables, graphs and small solvers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "avl-tree",
    "binary-search-tree",
    "binomial-heap",
    "hash-table",
    "graph",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "closest-pair",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-hashbench = "algolab.hashbench:main"
algolab-avl = "algolab.avl:main"
algolab-greedy = "algolab.greedy:main"
algolab-dice = "algolab.dice:main"
algolab-floyd = "algolab.floyd:main"
algolab-bst = "algolab.bst:main"
algolab-shortestpath = "algolab.shortestpath:main"
algolab-binomial = "algolab.binomial:main"
algolab-cityhunt = "algolab.cityhunt:main"
algolab-closest = "algolab.closest:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
