[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "supersimplex"
version = "0.1.0"
description = "Smooth OpenSimplex 2 (SuperSimplex) gradient noise in 2D, 3D and 4D"
requires-python = ">=3.10"
dependencies = []
keywords = ["noise", "simplex", "opensimplex", "procedural", "terrain", "gradient-noise"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["supersimplex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
