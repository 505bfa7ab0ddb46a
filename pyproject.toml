[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "librarydesk"
version = "0.1.0"
description = "A small interactive library management desk: add, search, check out and return books."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "catalog", "binary-search-tree", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
librarydesk = "librarydesk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["librarydesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
