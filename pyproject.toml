[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vfsterm"
version = "0.1.0"
description = "An in-memory virtual file system driven from a small command-line shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "virtual", "shell", "terminal", "in-memory", "reference-counting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vfsterm = "vfsterm.terminal:main"

[tool.hatch.build.targets.wheel]
packages = ["vfsterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
