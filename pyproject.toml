[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estructuras"
version = "0.1.0"
description = "Linear and tree data structures: circular sequences, iterators, stacks, queues, binary search trees and word trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "binary search tree", "trie", "stack", "queue", "iterator", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["estructuras"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
