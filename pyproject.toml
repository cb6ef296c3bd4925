[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arrayops"
version = "0.1.0"
description = "Read integer arrays from text, sort them with a hand-written quicksort, intersect them and collect their unique elements"
requires-python = ">=3.10"
dependencies = []
keywords = ["arrays", "intersection", "quicksort", "unique", "integers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arrayops = "arrayops.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arrayops"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
