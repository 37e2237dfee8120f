[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fakedata"
version = "0.1.0"
description = "Generate fake values of built-in and common data types from a seedable random source"
requires-python = ">=3.10"
dependencies = []
keywords = ["fake", "dummy", "test data", "random", "generator", "fixtures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fakedata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
