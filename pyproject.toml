[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qtlabs"
version = "0.1.0"
description = "Small teaching programs: a length converter, list operations and a pharmacy stock merger"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "length conversion", "lists", "pharmacy", "binary records"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qtlabs-length = "qtlabs.lengthconv:main"
qtlabs-list = "qtlabs.listops:main"
qtlabs-pharmacy = "qtlabs.pharmacy:main"

[tool.hatch.build.targets.wheel]
packages = ["qtlabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
