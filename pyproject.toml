[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cityroutes"
version = "0.1.0"
description = "Shortest travel times between cities on a text map, by road or by flight"
requires-python = ">=3.10"
dependencies = []
keywords = ["shortest path", "dijkstra", "bfs", "grid", "graph", "routing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
cityroutes = "cityroutes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cityroutes"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
