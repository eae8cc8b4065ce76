[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xinulibc"
version = "0.1.0"
description = "A small C-style runtime library: string and memory routines, character classes, printf and scanf formatting, quicksort, a linear congruential generator and resource-allocation-graph deadlock detection."
requires-python = ">=3.10"
dependencies = []
keywords = ["libc", "printf", "scanf", "strings", "qsort", "deadlock", "resource allocation graph"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["xinulibc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
