[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "odrkit"
version = "0.6.0"
description = "Road geometry, lane and mesh primitives for OpenDRIVE road networks"
requires-python = ">=3.10"
dependencies = []
keywords = ["opendrive", "xodr", "road", "geometry", "spline", "clothoid", "mesh", "triangulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["odrkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
