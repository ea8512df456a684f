[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "synk"
version = "0.1.0"
description = "A syntax highlighter with terminal support"
requires-python = ">=3.10"
dependencies = []
keywords = ["syntax", "highlighting", "terminal", "ansi", "colors"]
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
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
synk = "synk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["synk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
