[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "beamfem"
version = "0.1.0"
description = "Finite element building blocks for 2D beam and frame structures: equivalent loads, displacements, reactions, internal forces and deformations."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["fem", "finite element", "beam", "frame", "structural analysis", "deflection"]
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
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.setuptools.packages.find]
include = ["beamfem*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
