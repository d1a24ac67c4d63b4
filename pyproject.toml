[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "visiogeo"
version = "0.1.0"
description = "2D shapes, .geo scene files, SVG output and angular-sweep visibility geometry"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "visibility", "svg", "sweep", "segments", "polygon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["visiogeo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
