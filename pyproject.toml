[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nctensor"
version = "0.1.0"
description = "Column-major tensor helpers on numpy: sub-tensor layouts, dimension-aware assignment, index-by-vector views and result containers."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["tensor", "numpy", "column-major", "strided view", "indexing", "assignment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nctensor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
