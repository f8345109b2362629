[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "routefinder"
version = "0.1.0"
description = "Bellman-Ford shortest paths and travelling-salesman circuits on small named graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bellman-ford", "shortest-path", "tsp", "held-karp", "ant-colony"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
routefinder = "routefinder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["routefinder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
