[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nslib"
version = "0.1.0"
description = "Small utility library: mutable strings, 3D vectors, threads with message passing, mutexes, object pools, shared pointers and buffered streams"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "threading", "vectors", "strings", "pool", "streams"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
packages = ["nslib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
