[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "hshell"
version = "0.1.0"
description = "A small command shell with PATH lookup, environment and file helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "path", "environment", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: System Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hsh = "hshell.cli:main"

[tool.setuptools.packages.find]
include = ["hshell*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
