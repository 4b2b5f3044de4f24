[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diffsolver"
version = "0.1.0"
description = "Small exact algorithms for difference, distance and counting problems on integers, arrays, strings and trees."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "arrays", "digits", "trees", "binary-search", "lexicographic"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["diffsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
