[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spatnear"
version = "0.1.0"
description = "Nearest-neighbour searches, close-pair detection and related spatial kernels for point patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "spatial statistics",
    "point pattern",
    "nearest neighbour",
    "k-nearest neighbours",
    "close pairs",
    "heat kernel",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spatnear"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
