[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kat"
version = "0.1.0"
description = "Print source files to the terminal with line numbers and syntax colouring"
requires-python = ">=3.10"
dependencies = []
keywords = ["cat", "syntax-highlighting", "terminal", "pager", "source-code"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kat = "kat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
