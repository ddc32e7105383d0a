[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sequencekit"
version = "0.1.0"
description = "Fixed-size arrays, growable strings and vectors with explicit capacity management"
requires-python = ">=3.10"
dependencies = []
keywords = ["array", "vector", "string", "container", "sequence", "capacity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sequencekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
