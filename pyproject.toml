[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eglibpy"
version = "0.3.0"
description = "Small utility toolkit: list, queue and pointer-array containers, quicksort, glob patterns, shell quoting, path helpers and a pluggable message sink."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "containers", "quicksort", "glob", "shell", "quoting", "paths", "logging"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["eglibpy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
