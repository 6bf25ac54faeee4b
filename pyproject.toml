[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qdynamics"
version = "0.1.0"
description = "Dynamics of small closed and open quantum systems: Hamiltonian matrices, Schrodinger evolution and the Lindblad master equation."
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "scipy",
]
keywords = [
    "quantum",
    "hamiltonian",
    "schrodinger",
    "master-equation",
    "lindblad",
    "density-matrix",
    "runge-kutta",
    "cubic-spline",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["qdynamics"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
