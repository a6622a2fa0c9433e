[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainlist"
version = "0.1.0"
description = "A singly linked list of integers with searching, reversal, cycle handling and merge sort"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "data structures", "merge sort", "cycle detection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chainlist-demo = "chainlist.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["chainlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
